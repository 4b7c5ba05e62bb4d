"""
Pydantic models for the order examples.

Orders are not stored anywhere; the request only carries the fields
the duplicate-execution guard builds its lock keys from.  JSON bodies
may use either the camelCase names (``userId``) or the snake_case
attribute names (``user_id``).
"""

from typing import Optional

from pydantic import BaseModel, Field


class OrderRequest(BaseModel):
    """Schema for an order submission or cancellation."""

    user_id: Optional[str] = Field(None, alias="userId", example="user1")
    order_id: Optional[str] = Field(None, alias="orderId", example="order1")
    product_id: Optional[str] = Field(None, alias="productId", example="product1")
    quantity: Optional[int] = Field(None, example=1)
    amount: Optional[float] = Field(None, example=10000.0)

    model_config = {
        "populate_by_name": True,
    }
