"""Ownership Transfer — precondition checks and the pure transfer step.

Invariants:
    - Preconditions run in a fixed order and the first failure wins:
        1. property exists          -> NotFound
        2. owner_id == from_user_id -> Unauthorized
        3. to_user exists           -> NotFound
        4. 0 < shares <= min(tokenized_shares, MAX_ID) -> InvalidInput
    - check_transfer is PURE: it reports, it never mutates
    - apply_transfer reassigns owner_id and appends exactly one history entry
    - tokenized_shares is unchanged by a transfer

Design Decisions:
    - Single-owner model: a transfer of any valid share amount moves the whole
      ownership record to the recipient; the share count is recorded in the
      history entry only (ADR: no fractional co-ownership)
    - Shell looks records up and commits the result; this module only decides
"""

from dataclasses import replace

from estate_ledger.core.domain_types import (
    MAX_ID, EntityKind, HistoryEvent, Timestamp, UserId,
)
from estate_ledger.core.entities import Property, User
from estate_ledger.core.errors import (
    InvalidInput, LedgerError, Unauthorized, not_found,
)
from estate_ledger.core.history_log import append_history


def check_transfer(
    property_id: int,
    prop: Property | None,
    from_user_id: int,
    to_user_id: int,
    to_user: User | None,
    shares: int,
) -> LedgerError | None:
    """Evaluate transfer preconditions in order. Pure — no state mutation."""
    if prop is None:
        return not_found(EntityKind.PROPERTY, property_id)
    if prop.owner_id != from_user_id:
        return Unauthorized("caller does not own this property")
    if to_user is None:
        return not_found(EntityKind.USER, to_user_id)
    if (
        not isinstance(shares, int) or isinstance(shares, bool)
        or shares <= 0 or shares > min(prop.tokenized_shares, MAX_ID)
    ):
        return InvalidInput("invalid share amount")
    return None


def describe_transfer(from_user_id: int, to_user_id: int, shares: int) -> str:
    return (
        f"{HistoryEvent.TRANSFERRED.value} {shares} shares "
        f"from {from_user_id} to {to_user_id}"
    )


def apply_transfer(
    prop: Property,
    from_user_id: int,
    to_user_id: int,
    shares: int,
    now: Timestamp,
    caller: str | None = None,
) -> Property:
    """Reassign owner and append the transfer event. Call only after check_transfer."""
    moved = replace(prop, owner_id=UserId(to_user_id))
    return append_history(
        moved, describe_transfer(from_user_id, to_user_id, shares), now, caller,
    )
