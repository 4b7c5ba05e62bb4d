"""
Pydantic models for the person slice.

``Person`` is the domain record stored by the person repository.
``PersonCreate`` is the registration payload and ``PersonRead`` the
public representation returned by the API (identity number and birth
date are not exposed).  ``Person.create_empty`` is the fallback value
returned by queries that find nobody.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Gender(str, Enum):
    """Gender codes as stored in the ``person.gender`` column."""

    MAN = "MAN"
    WOMAN = "WOMAN"
    NONE = "NONE"

    @property
    def code(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _GENDER_DESCRIPTIONS[self.value]

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Gender":
        """Map a stored code back to a member; unknown codes give ``NONE``."""
        for gender in cls:
            if gender.value == code:
                return gender
        return cls.NONE


_GENDER_DESCRIPTIONS = {
    "MAN": "male",
    "WOMAN": "female",
    "NONE": "unknown",
}


class Person(BaseModel):
    """A stored person."""

    id: Optional[int] = None
    name: str
    identity: str
    birth: date
    address: str
    email: str
    phone: str
    gender: Gender = Gender.NONE

    @classmethod
    def create_empty(cls) -> "Person":
        return cls(
            name="",
            identity="",
            birth=date.max,
            address="",
            email="",
            phone="",
            gender=Gender.NONE,
        )

    def is_empty(self) -> bool:
        return self.id is None and not self.email and not self.identity


class PersonCreate(BaseModel):
    """Schema for registering a person."""

    name: str = Field(..., min_length=1, example="yun seok")
    identity: str = Field(..., min_length=1, example="900101-1234567")
    birth: date = Field(..., example="1990-01-01")
    address: str = Field(..., max_length=1000, example="Seoul")
    email: str = Field(..., min_length=3, example="yun@example.com")
    phone: str = Field(..., max_length=20, example="010-1234-5678")
    gender: Gender = Field(Gender.NONE, example="MAN")


class PersonRead(BaseModel):
    """Schema for reading a person from the API."""

    id: Optional[int] = None
    name: str
    address: str
    email: str
    phone: str

    @classmethod
    def from_domain(cls, person: Person) -> "PersonRead":
        return cls(
            id=person.id,
            name=person.name,
            address=person.address,
            email=person.email,
            phone=person.phone,
        )
