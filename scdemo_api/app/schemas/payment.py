"""
Pydantic models for the payment examples.

Like orders, payments are simulated.  ``PaymentRequest`` carries the
identifiers used as duplicate-execution lock keys.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PaymentRequest(BaseModel):
    """Schema for a payment, refund or history request."""

    payment_id: Optional[str] = Field(None, alias="paymentId", example="pay-1")
    user_id: Optional[str] = Field(None, alias="userId", example="user1")
    amount: Optional[float] = Field(None, example=5000.0)
    payment_method: Optional[str] = Field(None, alias="paymentMethod", example="card")

    model_config = {
        "populate_by_name": True,
    }
