"""Ledger Entities — User, Property, HistoryEntry and their write payloads.

Invariants:
    - Entities are frozen: every mutation produces a new value via dataclasses.replace
    - Property.history is a tuple — append-only, never reordered or truncated
    - id fields are never changed after creation
    - Payload fields are optional so the validator can report missing values

Design Decisions:
    - Frozen values over mutable records: a read can never alias store state,
      and a failed write can never leave a half-updated record (ADR: atomic commit)
    - Payloads are plain dataclasses, not pydantic: core stays free of the API stack
"""

from dataclasses import dataclass

from estate_ledger.core.domain_types import PropertyId, Timestamp, UserId


@dataclass(frozen=True)
class HistoryEntry:
    """One immutable audit record of a property-affecting event."""
    event: str
    timestamp: Timestamp


@dataclass(frozen=True)
class User:
    id: UserId
    name: str
    contact_info: str
    created_at: Timestamp
    created_by: str
    updated_at: Timestamp | None = None
    updated_by: str | None = None


@dataclass(frozen=True)
class Property:
    id: PropertyId
    address: str
    owner_id: UserId
    tokenized_shares: int
    created_at: Timestamp
    created_by: str
    updated_at: Timestamp | None = None
    updated_by: str | None = None
    history: tuple[HistoryEntry, ...] = ()


@dataclass
class UserPayload:
    """Write payload for add_user / update_user."""
    name: str | None = None
    contact_info: str | None = None


@dataclass
class PropertyPayload:
    """Write payload for add_property / update_property."""
    address: str | None = None
    owner_id: int | None = None
    tokenized_shares: int | None = None
