"""Error Taxonomy — closed, typed error values for every ledger failure mode.

Invariants:
    - Exactly three public kinds: InvalidInput, NotFound, Unauthorized
    - Errors are values returned to the caller, never raised across the core boundary
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope; no internal details leaked
    - IdSpaceExhaustedError is the only exception the core raises (fatal, unreachable in practice)

Design Decisions:
    - Frozen dataclasses over exceptions: callers match on the value (ADR: errors as values)
    - Class-level kind/code/status: the taxonomy is closed by construction, not by string
    - timestamp excluded from equality: two errors with the same message compare equal
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar

from estate_ledger.core.domain_types import EntityKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHORIZATION = "authorization"
    INTERNAL = "internal"


class ErrorKind(str, Enum):
    """The closed set of failure kinds surfaced to callers."""
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class LedgerError:
    """Base value for all ledger errors. Not an exception."""

    msg: str
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc),
        compare=False, repr=False,
    )

    kind: ClassVar[ErrorKind]
    code: ClassVar[str]
    category: ClassVar[ErrorCategory]
    severity: ClassVar[ErrorSeverity] = ErrorSeverity.ERROR
    http_status: ClassVar[int]

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "kind": self.kind.value,
                "message": self.msg,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


@dataclass(frozen=True)
class InvalidInput(LedgerError):
    """Payload failed shape or range validation."""
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_INPUT
    code: ClassVar[str] = "INVALID_INPUT"
    category: ClassVar[ErrorCategory] = ErrorCategory.VALIDATION
    http_status: ClassVar[int] = 400


@dataclass(frozen=True)
class NotFound(LedgerError):
    """Referenced id is absent from the relevant store."""
    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND
    code: ClassVar[str] = "NOT_FOUND"
    category: ClassVar[ErrorCategory] = ErrorCategory.RESOURCE_NOT_FOUND
    http_status: ClassVar[int] = 404


@dataclass(frozen=True)
class Unauthorized(LedgerError):
    """Caller-supplied owner does not match the current owner."""
    kind: ClassVar[ErrorKind] = ErrorKind.UNAUTHORIZED
    code: ClassVar[str] = "UNAUTHORIZED"
    category: ClassVar[ErrorCategory] = ErrorCategory.AUTHORIZATION
    http_status: ClassVar[int] = 403


def not_found(kind: EntityKind, entity_id: int) -> NotFound:
    """Uniform NotFound message: '<kind> id <id> not found'."""
    return NotFound(f"{kind.value} id {entity_id} not found")


# ─── Internal (fatal) ───────────────────────────────────────────

class IdSpaceExhaustedError(Exception):
    """An id counter passed MAX_ID. Not part of the public taxonomy."""

    def __init__(self, kind: EntityKind):
        super().__init__(f"Id space exhausted for {kind.value} records")
        self.kind = kind
