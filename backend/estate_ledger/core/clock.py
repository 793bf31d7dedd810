"""Clock — injectable timestamp source for history entries and audit fields.

Invariants:
    - now() returns integer nanoseconds since the Unix epoch
    - The core never reads wall time directly; it asks the LedgerState's clock

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass any object with now()
    - FixedClock for deterministic tests: time only moves when advance() is called
"""

import time
from typing import Protocol

from estate_ledger.core.domain_types import Timestamp


class Clock(Protocol):
    """Abstract timestamp source."""
    def now(self) -> Timestamp: ...


class SystemClock:
    """Production clock backed by time.time_ns()."""

    def now(self) -> Timestamp:
        return Timestamp(time.time_ns())


class FixedClock:
    """Controllable clock for deterministic testing.

    Example:
        clock = FixedClock(start=1_000)
        clock.now()       # 1000
        clock.advance(5)
        clock.now()       # 1005
    """

    def __init__(self, start: int = 0) -> None:
        self._current = start

    def now(self) -> Timestamp:
        return Timestamp(self._current)

    def advance(self, ns: int) -> None:
        if ns < 0:
            raise ValueError("Cannot advance clock backwards")
        self._current += ns
