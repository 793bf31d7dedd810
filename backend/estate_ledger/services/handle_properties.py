"""Property Handlers — add, get, update, delete and list properties.

Invariants:
    - Validation and the owner existence check run before any mutation
    - add_property appends "Created", update_property appends "Updated" — once each
    - Reads and failed writes never append history
    - delete_property returns the removed record's prior state (history included)
    - created_at/created_by are set once at creation and never modified

Design Decisions:
    - The new record and its history entry are built as one frozen value, then
      committed in a single store write (ADR: no intermediate observable state)
    - Owner existence is checked here, not in the validator (shape vs referential)
"""

import logging
from dataclasses import replace

from estate_ledger.core.domain_types import (
    ANONYMOUS_CALLER, EntityKind, HistoryEvent, PropertyId, UserId,
)
from estate_ledger.core.entities import Property, PropertyPayload
from estate_ledger.core.errors import LedgerError, not_found
from estate_ledger.core.history_log import append_history
from estate_ledger.core.ledger_state import LedgerState
from estate_ledger.core.validate_payload import (
    validate_page, validate_property_payload,
)

logger = logging.getLogger(__name__)


class PropertyHandlers:
    """CRUD over the property store."""

    def __init__(self, state: LedgerState, max_page_size: int = 100):
        self.state = state
        self.max_page_size = max_page_size

    def add_property(
        self, payload: PropertyPayload, caller: str = ANONYMOUS_CALLER,
    ) -> Property | LedgerError:
        error = (
            validate_property_payload(payload, "add_property")
            or self._check_owner_exists(payload.owner_id)
        )
        if error:
            return error
        now = self.state.clock.now()
        prop = Property(
            id=PropertyId(self.state.ids.next(EntityKind.PROPERTY)),
            address=payload.address.strip(),
            owner_id=UserId(payload.owner_id),
            tokenized_shares=payload.tokenized_shares,
            created_at=now,
            created_by=caller,
        )
        prop = append_history(prop, HistoryEvent.CREATED.value, now, caller)
        self.state.properties.insert(prop)
        logger.info(f"Property {prop.id} created", extra={"entity_id": prop.id})
        return prop

    def get_property(self, property_id: int) -> Property | LedgerError:
        prop = self.state.properties.get(property_id)
        if prop is None:
            return not_found(EntityKind.PROPERTY, property_id)
        return prop

    def update_property(
        self, property_id: int, payload: PropertyPayload,
        caller: str = ANONYMOUS_CALLER,
    ) -> Property | LedgerError:
        error = validate_property_payload(payload, "update_property")
        if error:
            return error
        if property_id not in self.state.properties:
            return not_found(EntityKind.PROPERTY, property_id)
        error = self._check_owner_exists(payload.owner_id)
        if error:
            return error
        now = self.state.clock.now()
        return self.state.properties.update(property_id, lambda p: append_history(
            replace(
                p,
                address=payload.address.strip(),
                owner_id=UserId(payload.owner_id),
                tokenized_shares=payload.tokenized_shares,
            ),
            HistoryEvent.UPDATED.value, now, caller,
        ))

    def delete_property(self, property_id: int) -> Property | LedgerError:
        removed = self.state.properties.remove(property_id)
        if removed is None:
            return not_found(EntityKind.PROPERTY, property_id)
        logger.info(
            f"Property {property_id} deleted", extra={"entity_id": property_id},
        )
        return removed

    def list_properties(
        self, page: int, page_size: int,
    ) -> list[Property] | LedgerError:
        error = validate_page(page, page_size, self.max_page_size)
        if error:
            return error
        return self.state.properties.page(page, page_size)

    def _check_owner_exists(self, owner_id: int) -> LedgerError | None:
        if owner_id not in self.state.users:
            return not_found(EntityKind.USER, owner_id)
        return None
