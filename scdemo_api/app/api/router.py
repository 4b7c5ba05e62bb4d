"""
Top-level router for the ``/api`` prefix.

This router aggregates the domain-specific routers.  The final echo
router is mounted separately by ``main.create_app`` because it lives
outside ``/api``.
"""

from fastapi import APIRouter

from .endpoints import (
    orders,
    payments,
    ranking,
    shapes,
    persons,
    samples,
    uploads,
)

router = APIRouter()

router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(payments.router, prefix="/payments", tags=["payments"])
router.include_router(ranking.router, prefix="/ranking", tags=["ranking"])
router.include_router(shapes.router, prefix="/shapes", tags=["shapes"])
router.include_router(persons.router, prefix="/person/v1", tags=["persons"])
router.include_router(samples.router, prefix="/sample/v1", tags=["samples"])
# The upload router defines its own "/upload" path.
router.include_router(uploads.router, tags=["uploads"])
