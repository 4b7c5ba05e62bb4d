"""
Pytest configuration and fixtures.

Redis is replaced by ``InMemoryRedis``, which implements the handful of
commands the application issues.  The SQLite database lives in a
temporary directory per test and simulated delays are scaled down so
the suite stays fast.
"""

import time
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from scdemo_api.app.core import redis_client
from scdemo_api.app.core.config import settings
from scdemo_api.app.core.db import init_db


class InMemoryRedis:
    """In-process stand-in for ``redis.asyncio.Redis`` (decoded responses)."""

    def __init__(self) -> None:
        self.values: Dict[str, str] = {}
        self.expiry: Dict[str, float] = {}
        self.ttls: Dict[str, int] = {}
        self.sorted_sets: Dict[str, Dict[str, float]] = {}
        self.closed = False

    def _purge(self, key: str) -> None:
        deadline = self.expiry.get(key)
        if deadline is not None and deadline <= time.monotonic():
            self.values.pop(key, None)
            self.expiry.pop(key, None)

    async def set(self, key: str, value: str, nx: bool = False, ex: Optional[int] = None) -> Optional[bool]:
        self._purge(key)
        if nx and key in self.values:
            return None
        self.values[key] = value
        if ex is not None:
            self.expiry[key] = time.monotonic() + ex
            self.ttls[key] = ex
        return True

    async def get(self, key: str) -> Optional[str]:
        self._purge(key)
        return self.values.get(key)

    async def exists(self, key: str) -> int:
        self._purge(key)
        return int(key in self.values or key in self.sorted_sets)

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.values.pop(key, None) is not None:
                removed += 1
            self.expiry.pop(key, None)
            if self.sorted_sets.pop(key, None) is not None:
                removed += 1
        return removed

    async def zadd(self, key: str, mapping: Dict[str, float]) -> int:
        zset = self.sorted_sets.setdefault(key, {})
        added = sum(1 for member in mapping if member not in zset)
        zset.update({member: float(score) for member, score in mapping.items()})
        return added

    async def zscore(self, key: str, member: str) -> Optional[float]:
        return self.sorted_sets.get(key, {}).get(member)

    def _descending(self, key: str) -> List[tuple]:
        zset = self.sorted_sets.get(key, {})
        return sorted(zset.items(), key=lambda item: (item[1], item[0]), reverse=True)

    async def zrevrank(self, key: str, member: str) -> Optional[int]:
        for rank, (name, _) in enumerate(self._descending(key)):
            if name == member:
                return rank
        return None

    async def zcard(self, key: str) -> int:
        return len(self.sorted_sets.get(key, {}))

    async def zrem(self, key: str, *members: str) -> int:
        zset = self.sorted_sets.get(key, {})
        removed = 0
        for member in members:
            if zset.pop(member, None) is not None:
                removed += 1
        if key in self.sorted_sets and not zset:
            del self.sorted_sets[key]
        return removed

    async def zrevrange(self, key: str, start: int, end: int, withscores: bool = False) -> List[Any]:
        items = self._descending(key)
        stop = None if end == -1 else end + 1
        window = items[start:stop]
        if withscores:
            return window
        return [member for member, _ in window]

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def fast_simulated_work(monkeypatch):
    # 3 simulated seconds become 30ms.
    monkeypatch.setattr(settings, "simulated_work_scale", 0.01)


@pytest.fixture
def fake_redis():
    client = InMemoryRedis()
    redis_client.set_redis(client)
    yield client
    redis_client.set_redis(None)


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file with migrations applied."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "test.db"))
    init_db()
    return settings.database_url


@pytest.fixture
def client(fake_redis, database):
    from scdemo_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client
