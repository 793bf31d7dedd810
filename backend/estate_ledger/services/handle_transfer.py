"""Transfer Handler — transfer_ownership over the property and user stores.

Invariants:
    - Lookups feed check_transfer; the store is written only when it returns None
    - Owner reassignment and the history append commit as one store write
    - A failed transfer leaves the property byte-for-byte unchanged (history included)

Design Decisions:
    - Imperative shell around core/transfer_ownership.py: this file reads and
      writes, the core decides (ADR: impureim sandwich)
"""

import logging

from estate_ledger.core.domain_types import ANONYMOUS_CALLER
from estate_ledger.core.entities import Property
from estate_ledger.core.errors import LedgerError
from estate_ledger.core.ledger_state import LedgerState
from estate_ledger.core.transfer_ownership import apply_transfer, check_transfer

logger = logging.getLogger(__name__)


class TransferHandlers:
    """Ownership transfer between users."""

    def __init__(self, state: LedgerState):
        self.state = state

    def transfer_ownership(
        self,
        property_id: int,
        from_user_id: int,
        to_user_id: int,
        shares: int,
        caller: str = ANONYMOUS_CALLER,
    ) -> Property | LedgerError:
        prop = self.state.properties.get(property_id)
        error = check_transfer(
            property_id, prop, from_user_id,
            to_user_id, self.state.users.get(to_user_id), shares,
        )
        if error:
            return error
        now = self.state.clock.now()
        updated = self.state.properties.update(
            property_id,
            lambda p: apply_transfer(
                p, from_user_id, to_user_id, shares, now, caller,
            ),
        )
        logger.info(
            f"Property {property_id} transferred {from_user_id} -> {to_user_id} "
            f"({shares} shares)",
            extra={"entity_id": property_id},
        )
        return updated
