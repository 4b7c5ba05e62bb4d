"""
Shared Redis client.

One ``redis.asyncio.Redis`` instance is created lazily from
``settings.redis_url`` and reused by every service.  Responses are
decoded to ``str`` so callers never deal with raw bytes.  The client
is closed by the application's shutdown hook.
"""

import logging
from typing import Any, Optional

import redis.asyncio as aioredis

from .config import settings

logger = logging.getLogger(__name__)

_client: Optional[Any] = None


def get_redis() -> Any:
    """Return the shared Redis client, creating it on first use."""
    global _client
    if _client is None:
        _client = aioredis.from_url(settings.redis_url, decode_responses=True)
        logger.info("Redis client created for %s", settings.redis_url)
    return _client


def set_redis(client: Optional[Any]) -> None:
    """Install a pre-built client, or ``None`` to drop the current one."""
    global _client
    _client = client


async def close_redis() -> None:
    """Close the shared client if one was created."""
    global _client
    if _client is None:
        return
    await _client.aclose()
    _client = None
    logger.info("Redis client closed")
