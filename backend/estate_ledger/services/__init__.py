"""Services Layer — ledger handlers and operation dispatch.

Invariants:
    - Handlers split by concern (users, properties, transfer)
    - Dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per concern for locality (ADR: no god objects)
"""
