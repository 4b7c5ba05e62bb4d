"""
Query and command services for persons.

``PersonQuery`` reads through a ``PersonRepository`` and
``PersonCommand`` writes through one.  Both receive the repository in
their constructor; ``get_person_query`` and ``get_person_command``
build them on the SQLite repository for use as FastAPI dependencies.
"""

import logging
from typing import Optional

from scdemo_api.app.schemas.person import Person, PersonCreate
from scdemo_api.app.services.person_repository import PersonRepository, SqlitePersonRepository

logger = logging.getLogger(__name__)

FAMILY_NAME_PREFIX = "yun"


class PersonQuery:
    """Read-side operations on persons."""

    def __init__(self, person_repository: PersonRepository) -> None:
        self.person_repository = person_repository

    async def get_family(self) -> Person:
        """Return the first person of the family, or the empty fallback."""
        persons = self.person_repository.find_by_name_prefix(FAMILY_NAME_PREFIX)
        if not persons:
            logger.info("No family member found, returning fallback")
            return Person.create_empty()
        return persons[0]

    async def get_person(self, person_id: int) -> Optional[Person]:
        return self.person_repository.find_by_id(person_id)

    async def get_person_by_email(self, email: str) -> Optional[Person]:
        return self.person_repository.find_by_email(email)


class PersonCommand:
    """Write-side operations on persons."""

    def __init__(self, person_repository: PersonRepository) -> None:
        self.person_repository = person_repository

    async def register(self, data: PersonCreate) -> Person:
        """Store a new person.

        Raises ``PersonAlreadyExistsError`` if the email or identity is
        already registered.
        """
        logger.info("Registering person %s", data.email)
        return self.person_repository.save(Person(**data.model_dump()))

    async def remove(self, person_id: int) -> bool:
        return self.person_repository.delete(person_id)


def get_person_query() -> PersonQuery:
    return PersonQuery(SqlitePersonRepository())


def get_person_command() -> PersonCommand:
    return PersonCommand(SqlitePersonRepository())
