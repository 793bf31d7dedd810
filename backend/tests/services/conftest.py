"""Service test fixtures — fresh LedgerState + FastAPI test client.

Invariants:
    - Every test gets a fresh LedgerState with a FixedClock
    - The app under test is built around that same state, so tests can
      inspect stores directly after an HTTP call

Design Decisions:
    - httpx AsyncClient over ASGITransport: no network, no server process
"""

import pytest
from httpx import ASGITransport, AsyncClient

from estate_ledger.core.clock import FixedClock
from estate_ledger.core.entities import PropertyPayload, UserPayload
from estate_ledger.core.ledger_state import LedgerState
from estate_ledger.main import create_app
from estate_ledger.services.handle_properties import PropertyHandlers
from estate_ledger.services.handle_transfer import TransferHandlers
from estate_ledger.services.handle_users import UserHandlers
from estate_ledger.services.ledger_dispatch import LedgerDispatch


@pytest.fixture
def clock():
    return FixedClock(start=1_000)


@pytest.fixture
def state(clock):
    return LedgerState(clock=clock)


@pytest.fixture
def users(state):
    return UserHandlers(state, max_page_size=50)


@pytest.fixture
def properties(state):
    return PropertyHandlers(state, max_page_size=50)


@pytest.fixture
def transfer(state):
    return TransferHandlers(state)


@pytest.fixture
def dispatch(state):
    return LedgerDispatch(state, max_page_size=50)


@pytest.fixture
def alice(users):
    return users.add_user(UserPayload("A", "a@example.com"))


@pytest.fixture
def bob(users):
    return users.add_user(UserPayload("B", "b@example.com"))


@pytest.fixture
def house(properties, alice):
    return properties.add_property(
        PropertyPayload(address="1 Main St", owner_id=alice.id, tokenized_shares=1000),
    )


@pytest.fixture
async def client(state):
    """FastAPI test client around the per-test LedgerState."""
    app = create_app(state)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
