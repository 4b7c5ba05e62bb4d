"""
Payment endpoints.

Each endpoint is guarded against duplicate execution with its own key
fields and TTL; the work is delegated to ``PaymentService``.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from scdemo_api.app.core.duplicate_guard import prevent_duplicate_execution
from scdemo_api.app.schemas.payment import PaymentRequest
from scdemo_api.app.services.payment_service import PaymentService


router = APIRouter()


@router.post("", response_class=PlainTextResponse)
@prevent_duplicate_execution(keys=("payment_id", "user_id"))
async def process_payment(request: PaymentRequest) -> str:
    """Process a payment (default 5 second lock)."""
    return await PaymentService.process_payment(request)


@router.post("/refund", response_class=PlainTextResponse)
@prevent_duplicate_execution(
    keys=("payment_id",),
    ttl=30,
    message="A refund is already in progress. Please try again in 30 seconds.",
)
async def refund_payment(request: PaymentRequest) -> str:
    """Refund a payment (30 second lock per payment)."""
    return await PaymentService.refund_payment(request)


@router.post("/history", response_class=PlainTextResponse)
@prevent_duplicate_execution(
    keys=("user_id",),
    ttl=2,
    message="Payment history is already being fetched.",
)
async def get_payment_history(request: PaymentRequest) -> str:
    """Fetch a user's payment history (2 second lock per user)."""
    return await PaymentService.payment_history(request)
