"""Route Dependencies — dispatch and caller identity for every request.

Invariants:
    - One LedgerDispatch per app, built by create_app() and kept on app.state
    - Missing X-Caller-Principal header means the anonymous caller

Design Decisions:
    - app.state over a module-level dict: tests build a fresh app state per client
"""

from fastapi import Header, Request

from estate_ledger.core.domain_types import ANONYMOUS_CALLER
from estate_ledger.services.ledger_dispatch import LedgerDispatch


def get_dispatch(request: Request) -> LedgerDispatch:
    return request.app.state.dispatch


def get_caller(
    x_caller_principal: str | None = Header(None),
) -> str:
    if x_caller_principal and x_caller_principal.strip():
        return x_caller_principal.strip()
    return ANONYMOUS_CALLER
