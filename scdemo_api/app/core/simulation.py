"""Simulated blocking work used by the demo services."""

import asyncio

from .config import settings


def scaled_seconds(seconds: float) -> float:
    """``seconds`` multiplied by ``settings.simulated_work_scale``."""
    return seconds * settings.simulated_work_scale


async def simulate_work(seconds: float) -> None:
    """Sleep for ``seconds`` scaled by ``settings.simulated_work_scale``."""
    delay = scaled_seconds(seconds)
    if delay > 0:
        await asyncio.sleep(delay)
