"""Ledger State — the explicit context object owning every piece of mutable ledger state.

Invariants:
    - All stores and counters live on a LedgerState instance — no module-level state
    - Only the service handlers mutate a LedgerState
    - A fresh LedgerState is empty: no users, no properties, counters at 0

Design Decisions:
    - Injected into handlers instead of ambient globals: each test builds its own
      (ADR: isolated unit tests with fresh contexts)
    - Dataclass with computed properties: pure, deterministic, testable without mocks
"""

from dataclasses import dataclass, field

from estate_ledger.core.clock import Clock, SystemClock
from estate_ledger.core.entities import Property, User
from estate_ledger.core.id_allocator import IdAllocator
from estate_ledger.core.record_store import RecordStore


@dataclass
class LedgerState:
    """Stores, id counters and clock for one ledger."""

    users: RecordStore[User] = field(default_factory=RecordStore)
    properties: RecordStore[Property] = field(default_factory=RecordStore)
    ids: IdAllocator = field(default_factory=IdAllocator)
    clock: Clock = field(default_factory=SystemClock)

    @property
    def user_count(self) -> int:
        return len(self.users)

    @property
    def property_count(self) -> int:
        return len(self.properties)
