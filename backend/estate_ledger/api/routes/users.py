"""User Routes — CRUD endpoints for ledger users.

Invariants:
    - Every route goes through LedgerDispatch (serialized, logged)
    - Error values become HTTP errors via raise_for_error
    - DELETE returns the removed user, not an empty body
"""

from fastapi import APIRouter, Depends, Query, status

from estate_ledger.api.dependencies import get_caller, get_dispatch
from estate_ledger.api.error_handlers import raise_for_error
from estate_ledger.config import get_settings
from estate_ledger.core.domain_types import Operation
from estate_ledger.schemas.user import UserResponse, UserWrite
from estate_ledger.services.ledger_dispatch import LedgerDispatch

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
def add_user(
    body: UserWrite,
    dispatch: LedgerDispatch = Depends(get_dispatch),
    caller: str = Depends(get_caller),
):
    return raise_for_error(dispatch.execute(
        Operation.ADD_USER, payload=body.to_payload(), caller=caller,
    ))


@router.get("", response_model=list[UserResponse])
def list_users(
    page: int = Query(0),
    page_size: int | None = Query(None),
    dispatch: LedgerDispatch = Depends(get_dispatch),
):
    """List users ordered by id."""
    size = page_size if page_size is not None else get_settings().default_page_size
    return raise_for_error(dispatch.execute(
        Operation.LIST_USERS, page=page, page_size=size,
    ))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int, dispatch: LedgerDispatch = Depends(get_dispatch),
):
    return raise_for_error(dispatch.execute(Operation.GET_USER, user_id=user_id))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserWrite,
    dispatch: LedgerDispatch = Depends(get_dispatch),
    caller: str = Depends(get_caller),
):
    return raise_for_error(dispatch.execute(
        Operation.UPDATE_USER,
        user_id=user_id, payload=body.to_payload(), caller=caller,
    ))


@router.delete("/{user_id}", response_model=UserResponse)
def delete_user(
    user_id: int, dispatch: LedgerDispatch = Depends(get_dispatch),
):
    return raise_for_error(dispatch.execute(Operation.DELETE_USER, user_id=user_id))
