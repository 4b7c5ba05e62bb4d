"""
Person endpoints.

``GET /family`` returns the first family member, or the empty fallback
person when nobody matches.  The remaining routes expose the person
repository: register, look up by id or email, and delete.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from scdemo_api.app.core.exceptions import PersonAlreadyExistsError
from scdemo_api.app.schemas.common import CommonResponse
from scdemo_api.app.schemas.person import PersonCreate, PersonRead
from scdemo_api.app.services.person_service import (
    PersonCommand,
    PersonQuery,
    get_person_command,
    get_person_query,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sample", response_class=PlainTextResponse)
async def get_sample() -> str:
    return "Sample API"


@router.get("/family", response_model=CommonResponse[PersonRead])
async def get_family(person_query: PersonQuery = Depends(get_person_query)) -> CommonResponse[PersonRead]:
    """Return the first family member, or an empty person when none exists."""
    person = await person_query.get_family()
    return CommonResponse(payload=PersonRead.from_domain(person))


@router.get("/by-email", response_model=CommonResponse[PersonRead])
async def get_person_by_email(
    email: str = Query(..., min_length=3),
    person_query: PersonQuery = Depends(get_person_query),
) -> CommonResponse[PersonRead]:
    person = await person_query.get_person_by_email(email)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return CommonResponse(payload=PersonRead.from_domain(person))


@router.post("", response_model=CommonResponse[PersonRead], status_code=status.HTTP_201_CREATED)
async def register_person(
    person_in: PersonCreate,
    person_command: PersonCommand = Depends(get_person_command),
) -> CommonResponse[PersonRead]:
    """Register a person; 409 if the email or identity is taken."""
    try:
        person = await person_command.register(person_in)
    except PersonAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CommonResponse(payload=PersonRead.from_domain(person))


@router.get("/{person_id}", response_model=CommonResponse[PersonRead])
async def get_person(
    person_id: int,
    person_query: PersonQuery = Depends(get_person_query),
) -> CommonResponse[PersonRead]:
    person = await person_query.get_person(person_id)
    if person is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return CommonResponse(payload=PersonRead.from_domain(person))


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: int,
    person_command: PersonCommand = Depends(get_person_command),
) -> None:
    deleted = await person_command.remove(person_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return None
