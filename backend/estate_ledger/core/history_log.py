"""History Log — append-only audit trail owned by each Property.

Invariants:
    - append() is the only way history grows; entries are never removed or reordered
    - Every append sets updated_at to the entry's timestamp
    - created_at is never touched here
    - Called once per successful create/update/transfer, never on reads or failures
"""

from dataclasses import replace

from estate_ledger.core.domain_types import Timestamp
from estate_ledger.core.entities import HistoryEntry, Property


def append_history(
    prop: Property, event: str, now: Timestamp, caller: str | None = None,
) -> Property:
    """Return prop with {event, now} appended and updated_at = now. Pure."""
    entry = HistoryEntry(event=event, timestamp=now)
    return replace(
        prop,
        history=(*prop.history, entry),
        updated_at=now,
        updated_by=caller if caller is not None else prop.updated_by,
    )
