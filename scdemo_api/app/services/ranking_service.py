"""
Service layer for the leaderboard.

Scores live in a single Redis sorted set under the key ``ranking``.
Every operation maps onto one sorted-set command; ranks are reverse
ranks, so the member with the highest score has rank 0.
"""

import logging
from typing import List, Optional, Tuple

from scdemo_api.app.core.redis_client import get_redis

logger = logging.getLogger(__name__)

RANKING_KEY = "ranking"


class RankingService:
    """Leaderboard operations over a Redis sorted set."""

    @classmethod
    async def add_score(cls, member: str, score: float) -> None:
        """Set ``member``'s score, adding the member if needed (``ZADD``)."""
        await get_redis().zadd(RANKING_KEY, {member: score})
        logger.debug("Score of %s set to %s", member, score)

    @classmethod
    async def get_score(cls, member: str) -> Optional[float]:
        """Return ``member``'s score, or ``None`` when absent (``ZSCORE``)."""
        return await get_redis().zscore(RANKING_KEY, member)

    @classmethod
    async def get_rank(cls, member: str) -> Optional[int]:
        """Return ``member``'s 0-based rank, highest score first (``ZREVRANK``)."""
        return await get_redis().zrevrank(RANKING_KEY, member)

    @classmethod
    async def get_rank_count(cls) -> int:
        """Return the number of ranked members (``ZCARD``)."""
        return await get_redis().zcard(RANKING_KEY)

    @classmethod
    async def get_top(cls, limit: int = 10) -> List[Tuple[str, float]]:
        """Return the ``limit`` best members with their scores (``ZREVRANGE``)."""
        if limit <= 0:
            return []
        entries = await get_redis().zrevrange(RANKING_KEY, 0, limit - 1, withscores=True)
        return [(member, float(score)) for member, score in entries]

    @classmethod
    async def remove(cls, member: str) -> None:
        """Remove one member (``ZREM``)."""
        await get_redis().zrem(RANKING_KEY, member)
        logger.info("Removed %s from ranking", member)

    @classmethod
    async def remove_all(cls) -> None:
        """Drop the whole leaderboard (``DEL``)."""
        await get_redis().delete(RANKING_KEY)
        logger.info("Ranking cleared")
