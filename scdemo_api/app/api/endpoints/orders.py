"""
Order endpoints.

Two ways of guarding against duplicate execution are shown side by
side: ``POST /orders`` carries the guard on the endpoint itself, while
``POST /orders/service`` and ``DELETE /orders`` delegate to
``OrderService`` whose methods are guarded.  ``GET /orders/batch`` is
keyed on the endpoint name alone, so only one batch may run at a time.
A rejected duplicate is answered with HTTP 429.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from scdemo_api.app.core.duplicate_guard import prevent_duplicate_execution
from scdemo_api.app.core.simulation import simulate_work
from scdemo_api.app.schemas.order import OrderRequest
from scdemo_api.app.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_class=PlainTextResponse)
@prevent_duplicate_execution(
    keys=("user_id", "order_id"),
    ttl=5,
    message="The same order request is already being processed.",
)
async def create_order_in_controller(request: OrderRequest) -> str:
    """Create an order, guarded at the endpoint level."""
    logger.info("Received order request: %s", request)
    await simulate_work(2.0)
    return f"Order created in controller: {request.order_id}"


@router.post("/service", response_class=PlainTextResponse)
async def create_order_in_service(request: OrderRequest) -> str:
    """Create an order through the guarded service method."""
    logger.info("Delegating to service layer: %s", request)
    return await OrderService.create_order(request)


@router.delete("", response_class=PlainTextResponse)
async def cancel_order(request: OrderRequest) -> str:
    """Cancel an order through the guarded service method."""
    logger.info("Cancel order request: %s", request)
    return await OrderService.cancel_order(request)


@router.get("/batch", response_class=PlainTextResponse)
@prevent_duplicate_execution(
    use_method_name=True,
    ttl=10,
    message="The batch job is already running.",
)
async def run_batch_process() -> str:
    logger.info("Starting batch process...")
    await simulate_work(5.0)
    logger.info("Batch process completed")
    return "Batch process completed"
