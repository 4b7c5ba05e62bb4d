"""
Service layer for the payment examples.

The payment endpoints carry the duplicate-execution guard themselves;
this service only performs the (simulated) work and builds the reply.
"""

import logging

from scdemo_api.app.core.simulation import simulate_work
from scdemo_api.app.schemas.payment import PaymentRequest

logger = logging.getLogger(__name__)


class PaymentService:
    """Simulated payment processing."""

    @classmethod
    async def process_payment(cls, request: PaymentRequest) -> str:
        logger.info("Processing payment - paymentId: %s, userId: %s", request.payment_id, request.user_id)
        await simulate_work(3.0)
        return f"Payment processed: {request.payment_id}"

    @classmethod
    async def refund_payment(cls, request: PaymentRequest) -> str:
        logger.info("Processing refund - paymentId: %s", request.payment_id)
        await simulate_work(2.0)
        return f"Refund processed: {request.payment_id}"

    @classmethod
    async def payment_history(cls, request: PaymentRequest) -> str:
        logger.info("Fetching payment history - userId: %s", request.user_id)
        await simulate_work(1.5)
        return f"Payment history for user: {request.user_id}"
