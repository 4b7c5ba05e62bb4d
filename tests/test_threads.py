import asyncio
import logging
import threading
import time

import pytest

from scdemo_api.app.core.config import settings
from scdemo_api.app.services.thread_service import LOOP_COUNT, ThreadDemoService

SERVICE_LOGGER = "scdemo_api.app.services.thread_service"


def finished_calls(caplog, kind: str) -> int:
    return sum(1 for r in caplog.records if r.getMessage().startswith(f"{kind} call finished"))


async def test_event_loop_runs_calls_concurrently(caplog):
    caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)
    start = time.perf_counter()

    result = await ThreadDemoService.run_on_event_loop()

    elapsed = time.perf_counter() - start
    assert result == "run_on_event_loop"
    assert finished_calls(caplog, "Coroutine") == LOOP_COUNT
    # Ten 10ms calls overlap instead of adding up.
    assert elapsed < LOOP_COUNT * 0.01
    assert any("run_on_event_loop elapsed time" in r.getMessage() for r in caplog.records)


async def test_thread_pool_runs_in_rounds(caplog):
    caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)
    start = time.perf_counter()

    result = await ThreadDemoService.run_on_thread_pool()

    elapsed = time.perf_counter() - start
    assert result == "run_on_thread_pool"
    assert finished_calls(caplog, "Thread") == LOOP_COUNT
    rounds = LOOP_COUNT // ThreadDemoService.pool_size
    assert elapsed >= rounds * 0.01
    assert any("name: platform" in r.getMessage() for r in caplog.records)


async def test_interrupted_worker_raises_runtime_error():
    interrupt = threading.Event()
    interrupt.set()

    with pytest.raises(RuntimeError, match="was interrupted"):
        await ThreadDemoService.run_on_thread_pool(interrupt)


async def test_cancelled_coroutine_raises_runtime_error(monkeypatch):
    monkeypatch.setattr(settings, "simulated_work_scale", 1.0)
    task = asyncio.create_task(ThreadDemoService._coroutine_call(3))
    await asyncio.sleep(0)

    task.cancel()

    with pytest.raises(RuntimeError, match="Coroutine call 3 was interrupted"):
        await task


def test_thread_endpoints(client):
    assert client.get("/api/sample/v1/threads/event-loop").text == "run_on_event_loop"
    assert client.get("/api/sample/v1/threads/pool").text == "run_on_thread_pool"
