"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas check types at the system boundary; content rules live in core/validate_payload.py
    - Response schemas read directly from frozen core entities (from_attributes)

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities are ledger state (ADR: DDD boundary)
"""
