"""
Response envelopes shared by all endpoints.

Structured bodies are returned inside ``CommonResponse`` as
``{"payload": ...}``.  Unhandled errors are reported with
``ExceptionResponse`` as an ``errorCode``/``errorMessage`` pair.
Plain-text endpoints are not wrapped.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class CommonResponse(BaseModel, Generic[T]):
    """Envelope around a successful response body."""

    payload: T


class ExceptionResponse(BaseModel):
    """Generic error body."""

    error_code: str = Field(..., alias="errorCode", example="INTERNAL_SERVER_ERROR")
    error_message: str = Field(..., alias="errorMessage")

    model_config = {
        "populate_by_name": True,
    }
