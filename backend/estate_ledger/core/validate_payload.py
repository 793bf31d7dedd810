"""Payload Validation — shape and range checks run before any mutation.

Invariants:
    - Pure: returns None (ok) or InvalidInput, never touches a store
    - Referential integrity (does owner_id exist?) is NOT checked here — handlers do it
    - Strings are judged after trimming; bool is not accepted as an integer
    - Integer fields fit the u64 range [0, MAX_ID]

Design Decisions:
    - Separate from handlers: one place defines what a well-formed payload is
    - First failing field wins; the message names the operation and the field
"""

from estate_ledger.core.domain_types import MAX_ID
from estate_ledger.core.entities import PropertyPayload, UserPayload
from estate_ledger.core.errors import InvalidInput


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_u64(value: object) -> bool:
    return (
        isinstance(value, int) and not isinstance(value, bool)
        and 0 <= value <= MAX_ID
    )


def validate_user_payload(
    payload: UserPayload, operation: str = "user",
) -> InvalidInput | None:
    """name and contact_info must be non-empty after trimming."""
    if _is_blank(payload.name):
        return InvalidInput(f"{operation}: field 'name' must be a non-empty string")
    if _is_blank(payload.contact_info):
        return InvalidInput(
            f"{operation}: field 'contact_info' must be a non-empty string",
        )
    return None


def validate_property_payload(
    payload: PropertyPayload, operation: str = "property",
) -> InvalidInput | None:
    """address non-empty; tokenized_shares and owner_id present, ints in the u64 range."""
    if _is_blank(payload.address):
        return InvalidInput(
            f"{operation}: field 'address' must be a non-empty string",
        )
    if payload.tokenized_shares is None:
        return InvalidInput(f"{operation}: field 'tokenized_shares' is required")
    if not _is_u64(payload.tokenized_shares):
        return InvalidInput(
            f"{operation}: field 'tokenized_shares' must be a u64 integer",
        )
    if payload.owner_id is None:
        return InvalidInput(f"{operation}: field 'owner_id' is required")
    if not _is_u64(payload.owner_id):
        return InvalidInput(
            f"{operation}: field 'owner_id' must be a u64 integer",
        )
    return None


def validate_page(
    page: int, page_size: int, max_page_size: int,
) -> InvalidInput | None:
    """page >= 0 and 1 <= page_size <= max_page_size."""
    if page < 0:
        return InvalidInput(f"page must be >= 0, got {page}")
    if page_size < 1 or page_size > max_page_size:
        return InvalidInput(
            f"page_size must be between 1 and {max_page_size}, got {page_size}",
        )
    return None
