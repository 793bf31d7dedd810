"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Reports record counts so operators can see the ledger is populated
"""

from fastapi import APIRouter, Depends, status

from estate_ledger.api.dependencies import get_dispatch
from estate_ledger.config import get_settings
from estate_ledger.services.ledger_dispatch import LedgerDispatch

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
def health_check(dispatch: LedgerDispatch = Depends(get_dispatch)):
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": get_settings().service_name,
        "users": dispatch.state.user_count,
        "properties": dispatch.state.property_count,
    }
