"""
Pydantic schema definitions for API payloads.

Each domain (orders, payments, ranking, persons, etc.) defines its own
Pydantic models for request and response bodies.  Schemas are separated
from storage concerns so the API representation stays decoupled from
how records are persisted.
"""
