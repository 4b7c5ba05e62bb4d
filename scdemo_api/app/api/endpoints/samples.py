"""
Sample endpoints.

Static sample text, a call through the sample upstream client (which
falls back to an empty response when the upstream fails), the
dependency-wiring demo and the coroutine versus thread-pool timing demo.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from scdemo_api.app.schemas.common import CommonResponse
from scdemo_api.app.schemas.sample import SampleResponse
from scdemo_api.app.services.inject_service import AService, build_a_service
from scdemo_api.app.services.sample_client import SampleClient, get_sample_client
from scdemo_api.app.services.thread_service import ThreadDemoService

router = APIRouter()


@router.get("/sample", response_class=PlainTextResponse)
async def get_sample() -> str:
    return "Sample API"


@router.get("/remote", response_model=CommonResponse[SampleResponse])
def get_remote_sample(
    path: str = Query("/api/sample"),
    sample_client: SampleClient = Depends(get_sample_client),
) -> CommonResponse[SampleResponse]:
    """Proxy the sample upstream; an unreachable upstream yields empty fields."""
    return CommonResponse(payload=sample_client.get_sample(path))


@router.get("/inject", response_class=PlainTextResponse)
def run_inject_demo(a_service: AService = Depends(build_a_service)) -> str:
    return a_service.do_something()


@router.get("/threads/event-loop", response_class=PlainTextResponse)
async def run_threads_on_event_loop() -> str:
    return await ThreadDemoService.run_on_event_loop()


@router.get("/threads/pool", response_class=PlainTextResponse)
async def run_threads_on_pool() -> str:
    return await ThreadDemoService.run_on_thread_pool()
