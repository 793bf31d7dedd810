"""Core Layer — pure ledger logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Failures are returned as LedgerError values, never raised across the boundary

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
