"""User Handlers — add_user, get_user, update_user, delete_user, list_users.

Invariants:
    - Validation runs before any id is allocated or record touched
    - update_user replaces name/contact_info only; id and created_* are immutable
    - delete_user returns the removed record's prior state
    - Deleting a user never cascades to properties that reference it

Design Decisions:
    - Handlers return entity | LedgerError: the dispatch surface decides presentation
    - Pagination bounds come from settings via the constructor, not from globals
"""

import logging
from dataclasses import replace

from estate_ledger.core.domain_types import ANONYMOUS_CALLER, EntityKind, UserId
from estate_ledger.core.entities import User, UserPayload
from estate_ledger.core.errors import LedgerError, not_found
from estate_ledger.core.ledger_state import LedgerState
from estate_ledger.core.validate_payload import validate_page, validate_user_payload

logger = logging.getLogger(__name__)


class UserHandlers:
    """CRUD over the user store."""

    def __init__(self, state: LedgerState, max_page_size: int = 100):
        self.state = state
        self.max_page_size = max_page_size

    def add_user(
        self, payload: UserPayload, caller: str = ANONYMOUS_CALLER,
    ) -> User | LedgerError:
        error = validate_user_payload(payload, "add_user")
        if error:
            return error
        user = User(
            id=UserId(self.state.ids.next(EntityKind.USER)),
            name=payload.name.strip(),
            contact_info=payload.contact_info.strip(),
            created_at=self.state.clock.now(),
            created_by=caller,
        )
        self.state.users.insert(user)
        logger.info(f"User {user.id} created", extra={"entity_id": user.id})
        return user

    def get_user(self, user_id: int) -> User | LedgerError:
        user = self.state.users.get(user_id)
        if user is None:
            return not_found(EntityKind.USER, user_id)
        return user

    def update_user(
        self, user_id: int, payload: UserPayload,
        caller: str = ANONYMOUS_CALLER,
    ) -> User | LedgerError:
        error = validate_user_payload(payload, "update_user")
        if error:
            return error
        now = self.state.clock.now()
        updated = self.state.users.update(user_id, lambda u: replace(
            u,
            name=payload.name.strip(),
            contact_info=payload.contact_info.strip(),
            updated_at=now,
            updated_by=caller,
        ))
        if updated is None:
            return not_found(EntityKind.USER, user_id)
        return updated

    def delete_user(self, user_id: int) -> User | LedgerError:
        removed = self.state.users.remove(user_id)
        if removed is None:
            return not_found(EntityKind.USER, user_id)
        logger.info(f"User {user_id} deleted", extra={"entity_id": user_id})
        return removed

    def list_users(self, page: int, page_size: int) -> list[User] | LedgerError:
        error = validate_page(page, page_size, self.max_page_size)
        if error:
            return error
        return self.state.users.page(page, page_size)
