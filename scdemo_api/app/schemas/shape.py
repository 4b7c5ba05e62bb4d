"""Pydantic models for the shape listing."""

from pydantic import BaseModel


class ShapeRead(BaseModel):
    name: str
    area: float
