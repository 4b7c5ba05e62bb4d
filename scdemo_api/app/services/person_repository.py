"""
Person repository.

``PersonRepository`` is the storage contract used by the person
services; ``SqlitePersonRepository`` implements it on the SQLite
database from ``core.db``.  All queries use parameterized statements.
Dates are stored as ISO strings and gender as its code.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from scdemo_api.app.core.db import get_connection
from scdemo_api.app.core.exceptions import PersonAlreadyExistsError
from scdemo_api.app.schemas.person import Gender, Person

logger = logging.getLogger(__name__)


class PersonRepository(ABC):
    """Storage contract for persons."""

    @abstractmethod
    def find_by_id(self, person_id: int) -> Optional[Person]:
        ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Person]:
        ...

    @abstractmethod
    def find_by_name_prefix(self, prefix: str) -> List[Person]:
        ...

    @abstractmethod
    def save(self, person: Person) -> Person:
        ...

    @abstractmethod
    def delete(self, person_id: int) -> bool:
        ...


class SqlitePersonRepository(PersonRepository):
    """``PersonRepository`` backed by the ``person`` table."""

    def find_by_id(self, person_id: int) -> Optional[Person]:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM person WHERE id = ?", (person_id,)).fetchone()
            return self._row_to_person(row) if row else None
        finally:
            conn.close()

    def find_by_email(self, email: str) -> Optional[Person]:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM person WHERE email = ?", (email,)).fetchone()
            return self._row_to_person(row) if row else None
        finally:
            conn.close()

    def find_by_name_prefix(self, prefix: str) -> List[Person]:
        """Return persons whose name starts with ``prefix``, oldest first.

        The comparison is case-sensitive and wildcard-free.
        """
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM person WHERE substr(name, 1, ?) = ? ORDER BY id ASC",
                (len(prefix), prefix),
            ).fetchall()
            return [self._row_to_person(row) for row in rows]
        finally:
            conn.close()

    def save(self, person: Person) -> Person:
        """Insert ``person`` and return it with its new id.

        Raises ``PersonAlreadyExistsError`` when the email or identity
        is already taken.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO person (name, identity, birth, address, email, phone, gender)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    person.name,
                    person.identity,
                    person.birth.isoformat(),
                    person.address,
                    person.email,
                    person.phone,
                    person.gender.code,
                ),
            )
            person_id = cursor.lastrowid
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            raise PersonAlreadyExistsError(person.email) from exc
        finally:
            conn.close()
        logger.info("Saved person %s", person_id)
        return person.model_copy(update={"id": person_id})

    def delete(self, person_id: int) -> bool:
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM person WHERE id = ?", (person_id,))
            affected = cursor.rowcount
            conn.commit()
        finally:
            conn.close()
        if affected:
            logger.info("Deleted person %s", person_id)
        return affected > 0

    @staticmethod
    def _row_to_person(row: sqlite3.Row) -> Person:
        return Person(
            id=row["id"],
            name=row["name"],
            identity=row["identity"],
            birth=date.fromisoformat(row["birth"]),
            address=row["address"],
            email=row["email"],
            phone=row["phone"],
            gender=Gender.from_code(row["gender"]),
        )
