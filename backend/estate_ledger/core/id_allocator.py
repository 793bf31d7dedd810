"""Id Allocator — independent, strictly increasing id counters per entity kind.

Invariants:
    - Each EntityKind has its own counter starting at 0
    - next() never returns the same id twice, even after the record is deleted
    - Passing MAX_ID raises IdSpaceExhaustedError (fatal, not a LedgerError)
"""

from estate_ledger.core.domain_types import MAX_ID, EntityKind
from estate_ledger.core.errors import IdSpaceExhaustedError


class IdAllocator:
    """Monotonic id source. One instance per LedgerState."""

    def __init__(self) -> None:
        self._next: dict[EntityKind, int] = {kind: 0 for kind in EntityKind}

    def next(self, kind: EntityKind) -> int:
        current = self._next[kind]
        if current > MAX_ID:
            raise IdSpaceExhaustedError(kind)
        self._next[kind] = current + 1
        return current

    def peek(self, kind: EntityKind) -> int:
        """The id next() would return, without consuming it."""
        return self._next[kind]
