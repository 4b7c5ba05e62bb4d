"""
Pydantic models for the final echo endpoint.

Missing request fields fall back to ``name="default"`` and
``age=999``.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class FinalClass:
    """Immutable value handed from the endpoint to ``FinalService``."""

    name: str
    age: int


class FinalRequest(BaseModel):
    name: str = Field("default", example="yun")
    age: int = Field(999, example=30)

    def to_final_class(self) -> FinalClass:
        return FinalClass(name=self.name, age=self.age)


class FinalResponse(BaseModel):
    name: str
    age: int

    @classmethod
    def of(cls, final_class: FinalClass) -> "FinalResponse":
        return cls(name=final_class.name, age=final_class.age)
