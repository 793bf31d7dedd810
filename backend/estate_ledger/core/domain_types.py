"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and PropertyId wrap int — never mix the two id spaces
    - Timestamps are nanoseconds since the Unix epoch
    - MAX_ID is the last id an allocator may issue (u64 range)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PropertyId = NewType("PropertyId", int)
Timestamp = NewType("Timestamp", int)  # ns since epoch

MAX_ID: int = 2**64 - 1

ANONYMOUS_CALLER: str = "anonymous"


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """Record kinds — one id counter and one store per kind."""
    USER = "user"
    PROPERTY = "property"


class HistoryEvent(str, Enum):
    """Fixed event names appended to a property's history."""
    CREATED = "Created"
    UPDATED = "Updated"
    TRANSFERRED = "Transferred"


class Operation(str, Enum):
    """Every operation the ledger dispatches."""
    ADD_USER = "add_user"
    GET_USER = "get_user"
    UPDATE_USER = "update_user"
    DELETE_USER = "delete_user"
    LIST_USERS = "list_users"
    ADD_PROPERTY = "add_property"
    GET_PROPERTY = "get_property"
    UPDATE_PROPERTY = "update_property"
    DELETE_PROPERTY = "delete_property"
    LIST_PROPERTIES = "list_properties"
    TRANSFER_OWNERSHIP = "transfer_ownership"
