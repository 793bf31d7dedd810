"""Ledger Dispatch — explicit routing from operation name to handler, one call at a time.

Invariants:
    - Every operation->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown operations return InvalidInput (never raise)
    - Every call runs to completion under a single lock: no two operations interleave,
      reads included, even when the host serves requests from a threadpool
    - Every call is logged with its operation name; error values at WARNING

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
      (ADR: no convention-over-config)
    - Handlers split by concern (users / properties / transfer), max ~5 methods each
      (ADR: no god objects)
    - threading.Lock, not asyncio.Lock: handlers are synchronous and FastAPI runs
      sync routes in worker threads
"""

import logging
import threading
from typing import Any, Callable

from estate_ledger.core.domain_types import Operation
from estate_ledger.core.errors import InvalidInput, LedgerError
from estate_ledger.core.ledger_state import LedgerState
from estate_ledger.services.handle_properties import PropertyHandlers
from estate_ledger.services.handle_transfer import TransferHandlers
from estate_ledger.services.handle_users import UserHandlers

logger = logging.getLogger(__name__)


class LedgerDispatch:
    """Routes Operation -> handler. Explicit registration, serialized execution."""

    def __init__(self, state: LedgerState, max_page_size: int = 100):
        self._state = state
        self._lock = threading.Lock()
        users = UserHandlers(state, max_page_size)
        properties = PropertyHandlers(state, max_page_size)
        transfer = TransferHandlers(state)

        # ADR: every mapping explicit — adding an operation requires editing this dict
        self._handlers: dict[Operation, Callable[..., Any]] = {
            # Users (5 operations)
            Operation.ADD_USER: users.add_user,
            Operation.GET_USER: users.get_user,
            Operation.UPDATE_USER: users.update_user,
            Operation.DELETE_USER: users.delete_user,
            Operation.LIST_USERS: users.list_users,

            # Properties (5 operations)
            Operation.ADD_PROPERTY: properties.add_property,
            Operation.GET_PROPERTY: properties.get_property,
            Operation.UPDATE_PROPERTY: properties.update_property,
            Operation.DELETE_PROPERTY: properties.delete_property,
            Operation.LIST_PROPERTIES: properties.list_properties,

            # Transfer (1 operation)
            Operation.TRANSFER_OWNERSHIP: transfer.transfer_ownership,
        }

    @property
    def state(self) -> LedgerState:
        return self._state

    def execute(self, operation: Operation | str, **kwargs: Any) -> Any:
        """Route operation to its handler. Returns the entity or a LedgerError."""
        try:
            op = Operation(operation)
        except ValueError:
            result = InvalidInput(f"Operation '{operation}' does not exist.")
            self._log_call(str(operation), result)
            return result

        with self._lock:
            result = self._handlers[op](**kwargs)
        self._log_call(op.value, result, kwargs.get("caller"))
        return result

    def _log_call(
        self, operation: str, result: Any, caller: str | None = None,
    ) -> None:
        if isinstance(result, LedgerError):
            logger.warning(
                f"{operation} failed: {result.msg}",
                extra={
                    "operation": operation,
                    "error_kind": result.kind.value,
                    "caller": caller,
                },
            )
            return
        logger.info(
            f"{operation} ok",
            extra={
                "operation": operation,
                "entity_id": getattr(result, "id", None),
                "caller": caller,
            },
        )
