"""
Coroutines versus platform threads.

Both demos run ``LOOP_COUNT`` simulated one-second blocking calls and
log the elapsed wall time.  ``run_on_event_loop`` schedules them as
coroutines on the running loop; ``run_on_thread_pool`` hands them to a
small ``ThreadPoolExecutor`` whose workers actually block, so with
fewer workers than calls the pool needs several rounds.

An interrupted call is reported as ``RuntimeError``: a cancelled
coroutine, or a worker whose ``interrupt`` event is set.
"""

import asyncio
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from scdemo_api.app.core.simulation import scaled_seconds, simulate_work

logger = logging.getLogger(__name__)

LOOP_COUNT = 10
WORK_SECONDS = 1.0


class ThreadDemoService:
    loop_count = LOOP_COUNT
    pool_size = 2

    @classmethod
    async def run_on_event_loop(cls) -> str:
        start = time.perf_counter()
        await asyncio.gather(*(cls._coroutine_call(i) for i in range(cls.loop_count)))
        logger.info("run_on_event_loop elapsed time: %.3fs", time.perf_counter() - start)
        return "run_on_event_loop"

    @classmethod
    async def run_on_thread_pool(cls, interrupt: Optional[threading.Event] = None) -> str:
        """Run the calls on ``pool_size`` threads.

        Setting ``interrupt`` makes waiting workers fail with
        ``RuntimeError``, which propagates to the caller.
        """
        interrupt = interrupt or threading.Event()
        loop = asyncio.get_running_loop()
        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=cls.pool_size, thread_name_prefix="platform") as executor:
            await asyncio.gather(
                *(loop.run_in_executor(executor, cls._blocking_call, i, interrupt) for i in range(cls.loop_count))
            )
        logger.info("run_on_thread_pool elapsed time: %.3fs", time.perf_counter() - start)
        return "run_on_thread_pool"

    @staticmethod
    async def _coroutine_call(i: int) -> None:
        logger.info("Coroutine call started. i: %s", i)
        try:
            await simulate_work(WORK_SECONDS)
        except asyncio.CancelledError as exc:
            raise RuntimeError(f"Coroutine call {i} was interrupted") from exc
        logger.info("Coroutine call finished. i: %s", i)

    @staticmethod
    def _blocking_call(i: int, interrupt: threading.Event) -> None:
        logger.info("Thread call started. name: %s, i: %s", threading.current_thread().name, i)
        if interrupt.wait(scaled_seconds(WORK_SECONDS)):
            raise RuntimeError(f"Thread call {i} was interrupted")
        logger.info("Thread call finished. i: %s", i)
