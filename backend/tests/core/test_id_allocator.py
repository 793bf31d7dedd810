"""IdAllocator — independent, strictly increasing counters per entity kind."""

import pytest

from estate_ledger.core.domain_types import MAX_ID, EntityKind
from estate_ledger.core.errors import IdSpaceExhaustedError
from estate_ledger.core.id_allocator import IdAllocator


def test_starts_at_zero():
    ids = IdAllocator()
    assert ids.next(EntityKind.USER) == 0


def test_strictly_increasing():
    ids = IdAllocator()
    issued = [ids.next(EntityKind.USER) for _ in range(5)]
    assert issued == [0, 1, 2, 3, 4]


def test_counters_are_independent_per_kind():
    ids = IdAllocator()
    ids.next(EntityKind.USER)
    ids.next(EntityKind.USER)
    assert ids.next(EntityKind.PROPERTY) == 0
    assert ids.next(EntityKind.USER) == 2


def test_peek_does_not_consume():
    ids = IdAllocator()
    assert ids.peek(EntityKind.PROPERTY) == 0
    assert ids.peek(EntityKind.PROPERTY) == 0
    assert ids.next(EntityKind.PROPERTY) == 0
    assert ids.peek(EntityKind.PROPERTY) == 1


def test_exhaustion_raises_internal_error():
    ids = IdAllocator()
    ids._next[EntityKind.USER] = MAX_ID
    assert ids.next(EntityKind.USER) == MAX_ID
    with pytest.raises(IdSpaceExhaustedError):
        ids.next(EntityKind.USER)
