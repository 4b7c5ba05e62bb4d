"""Pydantic models for the leaderboard."""

from typing import Optional

from pydantic import BaseModel, Field


class RankingEntryCreate(BaseModel):
    """Schema for adding or updating a member's score."""

    member: str = Field(..., min_length=1, example="alice")
    score: float = Field(..., example=100.0)


class RankingEntryRead(BaseModel):
    """A member with its score and 0-based rank (highest score first)."""

    member: str
    score: float
    rank: Optional[int] = None


class RankingCount(BaseModel):
    count: int
