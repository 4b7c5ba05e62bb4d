"""Pydantic models for the sample upstream service."""

from pydantic import BaseModel


class SampleResponse(BaseModel):
    """Body returned by the sample upstream (``{name, description}``)."""

    name: str
    description: str

    @classmethod
    def create_empty(cls) -> "SampleResponse":
        """Fallback used when the upstream cannot be reached."""
        return cls(name="", description="")
