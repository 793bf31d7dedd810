"""Record Store — generic keyed container mapping id -> frozen entity.

Invariants:
    - One store per entity kind; keys are the entity's own id
    - get/update/remove never raise on a miss — they return None and the caller decides
    - update swaps in the mutator's result only after it returns (no partial writes)
    - page() orders by ascending id; iteration order carries no other meaning

Design Decisions:
    - Plain dict over an ordered map: O(1) insert/get/remove, sort only when paging
    - Mutator returns a new value: entities are frozen (see core/entities.py)
"""

from typing import Callable, Generic, Protocol, TypeVar


class HasId(Protocol):
    """Structural contract for anything the store can hold."""
    @property
    def id(self) -> int: ...


E = TypeVar("E", bound=HasId)


class RecordStore(Generic[E]):
    """In-memory keyed storage for one entity kind."""

    def __init__(self) -> None:
        self._records: dict[int, E] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._records

    def insert(self, entity: E) -> int:
        if entity.id in self._records:
            raise ValueError(f"Record id {entity.id} already stored")
        self._records[entity.id] = entity
        return entity.id

    def get(self, entity_id: int) -> E | None:
        return self._records.get(entity_id)

    def update(self, entity_id: int, mutator: Callable[[E], E]) -> E | None:
        """Replace the record with mutator(record). None if absent."""
        current = self._records.get(entity_id)
        if current is None:
            return None
        updated = mutator(current)
        if updated.id != entity_id:
            raise ValueError("Mutator must not change the record id")
        self._records[entity_id] = updated
        return updated

    def remove(self, entity_id: int) -> E | None:
        return self._records.pop(entity_id, None)

    def page(self, page: int, page_size: int) -> list[E]:
        """Records ordered by id, skipping page * page_size."""
        start = page * page_size
        ordered = sorted(self._records)
        return [self._records[i] for i in ordered[start:start + page_size]]
