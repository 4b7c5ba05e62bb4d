"""
Leaderboard endpoints.

Thin HTTP surface over ``RankingService``.  Ranks are 0-based with the
highest score first.  Single members live under ``/members/{member}`` so
that no member name can collide with ``/count``.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from scdemo_api.app.schemas.common import CommonResponse
from scdemo_api.app.schemas.ranking import RankingCount, RankingEntryCreate, RankingEntryRead
from scdemo_api.app.services.ranking_service import RankingService

router = APIRouter()


@router.post("", response_model=CommonResponse[RankingEntryRead], status_code=status.HTTP_201_CREATED)
async def add_score(entry: RankingEntryCreate) -> CommonResponse[RankingEntryRead]:
    """Set a member's score and return its new rank."""
    await RankingService.add_score(entry.member, entry.score)
    rank = await RankingService.get_rank(entry.member)
    return CommonResponse(payload=RankingEntryRead(member=entry.member, score=entry.score, rank=rank))


@router.get("", response_model=CommonResponse[List[RankingEntryRead]])
async def list_top(limit: int = Query(10, ge=1, le=100)) -> CommonResponse[List[RankingEntryRead]]:
    """Return the best ``limit`` members, best first."""
    top = await RankingService.get_top(limit)
    entries = [
        RankingEntryRead(member=member, score=score, rank=rank)
        for rank, (member, score) in enumerate(top)
    ]
    return CommonResponse(payload=entries)


@router.get("/count", response_model=CommonResponse[RankingCount])
async def get_rank_count() -> CommonResponse[RankingCount]:
    count = await RankingService.get_rank_count()
    return CommonResponse(payload=RankingCount(count=count))


@router.get("/members/{member}", response_model=CommonResponse[RankingEntryRead])
async def get_member(member: str) -> CommonResponse[RankingEntryRead]:
    """Return a member's score and rank; 404 if the member is not ranked."""
    score = await RankingService.get_score(member)
    if score is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not ranked")
    rank = await RankingService.get_rank(member)
    return CommonResponse(payload=RankingEntryRead(member=member, score=score, rank=rank))


@router.delete("/members/{member}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_member(member: str) -> None:
    await RankingService.remove(member)
    return None


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def remove_all() -> None:
    await RankingService.remove_all()
    return None
