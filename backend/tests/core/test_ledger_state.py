"""LedgerState and clocks — fresh contexts are empty and isolated."""

import time

import pytest

from estate_ledger.core.clock import FixedClock, SystemClock
from estate_ledger.core.domain_types import EntityKind
from estate_ledger.core.entities import User
from estate_ledger.core.ledger_state import LedgerState


def test_fresh_state_is_empty():
    state = LedgerState()
    assert state.user_count == 0
    assert state.property_count == 0
    assert state.ids.peek(EntityKind.USER) == 0


def test_states_do_not_share_stores():
    a, b = LedgerState(), LedgerState()
    a.users.insert(User(id=0, name="A", contact_info="a", created_at=0, created_by="x"))
    assert a.user_count == 1
    assert b.user_count == 0


def test_default_clock_is_system_clock():
    assert isinstance(LedgerState().clock, SystemClock)


def test_system_clock_returns_epoch_nanoseconds():
    before = time.time_ns()
    now = SystemClock().now()
    assert before <= now <= time.time_ns()


def test_fixed_clock_only_moves_on_advance():
    clock = FixedClock(start=100)
    assert clock.now() == 100
    assert clock.now() == 100
    clock.advance(5)
    assert clock.now() == 105


def test_fixed_clock_rejects_going_backwards():
    with pytest.raises(ValueError):
        FixedClock().advance(-1)
