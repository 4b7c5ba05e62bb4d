"""
Service layer for the order examples.

Both operations are guarded against duplicate execution: a second call
carrying the same identifying fields while the first is still running
is rejected with ``DuplicateExecutionError``.  The work itself is
simulated with a delay.
"""

import logging

from scdemo_api.app.core.duplicate_guard import prevent_duplicate_execution
from scdemo_api.app.core.simulation import simulate_work
from scdemo_api.app.schemas.order import OrderRequest

logger = logging.getLogger(__name__)


class OrderService:
    """Simulated order processing."""

    create_delay_seconds = 3.0
    cancel_delay_seconds = 2.0

    @classmethod
    @prevent_duplicate_execution(
        keys=("user_id", "order_id"),
        ttl=5,
        message="The same order is already being processed. Please try again shortly.",
    )
    async def create_order(cls, request: OrderRequest) -> str:
        """Create an order; duplicates are keyed on user and order id for 5s."""
        logger.info("Creating order - userId: %s, orderId: %s", request.user_id, request.order_id)
        await simulate_work(cls.create_delay_seconds)
        logger.info("Order created successfully - orderId: %s", request.order_id)
        return f"Order created: {request.order_id}"

    @classmethod
    @prevent_duplicate_execution(
        keys=("user_id", "order_id", "product_id"),
        ttl=10,
        message="The same order cancellation is already being processed.",
    )
    async def cancel_order(cls, request: OrderRequest) -> str:
        """Cancel an order; duplicates are keyed on user, order and product for 10s."""
        logger.info(
            "Canceling order - userId: %s, orderId: %s, productId: %s",
            request.user_id,
            request.order_id,
            request.product_id,
        )
        await simulate_work(cls.cancel_delay_seconds)
        logger.info("Order canceled successfully - orderId: %s", request.order_id)
        return f"Order canceled: {request.order_id}"
