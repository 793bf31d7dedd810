"""Property Routes — CRUD and ownership transfer endpoints.

Invariants:
    - Every route goes through LedgerDispatch (serialized, logged)
    - Error values become HTTP errors via raise_for_error
    - Transfer is a POST on the property resource: it mutates owner and history
"""

from fastapi import APIRouter, Depends, Query, status

from estate_ledger.api.dependencies import get_caller, get_dispatch
from estate_ledger.api.error_handlers import raise_for_error
from estate_ledger.config import get_settings
from estate_ledger.core.domain_types import Operation
from estate_ledger.schemas.property import (
    PropertyResponse, PropertyWrite, TransferRequest,
)
from estate_ledger.services.ledger_dispatch import LedgerDispatch

router = APIRouter(prefix="/api/v1/properties", tags=["properties"])


@router.post(
    "", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED,
)
def add_property(
    body: PropertyWrite,
    dispatch: LedgerDispatch = Depends(get_dispatch),
    caller: str = Depends(get_caller),
):
    return raise_for_error(dispatch.execute(
        Operation.ADD_PROPERTY, payload=body.to_payload(), caller=caller,
    ))


@router.get("", response_model=list[PropertyResponse])
def list_properties(
    page: int = Query(0),
    page_size: int | None = Query(None),
    dispatch: LedgerDispatch = Depends(get_dispatch),
):
    """List properties ordered by id."""
    size = page_size if page_size is not None else get_settings().default_page_size
    return raise_for_error(dispatch.execute(
        Operation.LIST_PROPERTIES, page=page, page_size=size,
    ))


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(
    property_id: int, dispatch: LedgerDispatch = Depends(get_dispatch),
):
    return raise_for_error(dispatch.execute(
        Operation.GET_PROPERTY, property_id=property_id,
    ))


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: int,
    body: PropertyWrite,
    dispatch: LedgerDispatch = Depends(get_dispatch),
    caller: str = Depends(get_caller),
):
    return raise_for_error(dispatch.execute(
        Operation.UPDATE_PROPERTY,
        property_id=property_id, payload=body.to_payload(), caller=caller,
    ))


@router.delete("/{property_id}", response_model=PropertyResponse)
def delete_property(
    property_id: int, dispatch: LedgerDispatch = Depends(get_dispatch),
):
    return raise_for_error(dispatch.execute(
        Operation.DELETE_PROPERTY, property_id=property_id,
    ))


@router.post("/{property_id}/transfer", response_model=PropertyResponse)
def transfer_ownership(
    property_id: int,
    body: TransferRequest,
    dispatch: LedgerDispatch = Depends(get_dispatch),
    caller: str = Depends(get_caller),
):
    """Reassign the property to to_user_id. Caller must name the current owner."""
    return raise_for_error(dispatch.execute(
        Operation.TRANSFER_OWNERSHIP,
        property_id=property_id,
        from_user_id=body.from_user_id,
        to_user_id=body.to_user_id,
        shares=body.shares,
        caller=caller,
    ))
