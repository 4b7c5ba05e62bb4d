import asyncio

from scdemo_api.app.core.config import settings
from scdemo_api.app.core.exceptions import DuplicateExecutionError
from scdemo_api.app.schemas.order import OrderRequest
from scdemo_api.app.services.order_service import OrderService
from scdemo_api.app.services.payment_service import PaymentService
from scdemo_api.app.schemas.payment import PaymentRequest


async def test_create_order(fake_redis):
    result = await OrderService.create_order(OrderRequest(user_id="user1", order_id="order1"))

    assert result == "Order created: order1"
    assert fake_redis.ttls == {"execution:lock:OrderService:create_order:user1:order1": 5}


async def test_cancel_order_keys_on_product(fake_redis):
    request = OrderRequest(user_id="user1", order_id="order1", product_id="p1")

    assert await OrderService.cancel_order(request) == "Order canceled: order1"
    assert fake_redis.ttls == {"execution:lock:OrderService:cancel_order:user1:order1:p1": 10}


async def test_duplicate_cancel_is_rejected(fake_redis):
    request = OrderRequest(user_id="user1", order_id="order1", product_id="p1")

    results = await asyncio.gather(
        OrderService.cancel_order(request),
        OrderService.cancel_order(request),
        return_exceptions=True,
    )

    errors = [r for r in results if isinstance(r, DuplicateExecutionError)]
    assert len(errors) == 1
    assert errors[0].message == "The same order cancellation is already being processed."


async def test_payment_operations(fake_redis):
    request = PaymentRequest(payment_id="pay-1", user_id="user1")

    assert await PaymentService.process_payment(request) == "Payment processed: pay-1"
    assert await PaymentService.refund_payment(request) == "Refund processed: pay-1"
    assert await PaymentService.payment_history(request) == "Payment history for user: user1"


async def test_simulated_work_can_be_disabled(fake_redis, monkeypatch):
    monkeypatch.setattr(settings, "simulated_work_scale", 0)
    result = await OrderService.create_order(OrderRequest(user_id="u", order_id="o"))
    assert result == "Order created: o"
