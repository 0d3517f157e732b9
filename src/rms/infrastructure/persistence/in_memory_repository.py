"""Dict-backed implementations of Repository and StockRepository.

One re-entrant lock per repository instance guards every operation, so
``list_all`` always returns a consistent snapshot even if the repository
is shared between threads.
"""

from __future__ import annotations

import threading
from typing import Generic

from rms.domain.exceptions import DuplicateKeyError, EntityNotFoundError, InvalidValueError
from rms.domain.model.entity import EntityId
from rms.domain.repository.repository import E, Repository, S, StockRepository


class InMemoryRepository(Repository[E], Generic[E]):

    def __init__(self, entities: list[E] | None = None) -> None:
        self._store: dict[EntityId, E] = {}
        self._lock = threading.RLock()
        for entity in entities or []:
            self.add(entity)

    # --- Repository interface -------------------------------------------------

    def add(self, entity: E) -> None:
        with self._lock:
            if entity.id in self._store:
                raise DuplicateKeyError(
                    f"{self._label(entity)} with ID {entity.id} already exists"
                )
            self._store[entity.id] = entity

    def get_by_id(self, entity_id: EntityId) -> E:
        with self._lock:
            try:
                return self._store[entity_id]
            except KeyError:
                raise EntityNotFoundError(f"Item with ID {entity_id} not found") from None

    def remove(self, entity_id: EntityId) -> None:
        with self._lock:
            if entity_id not in self._store:
                raise EntityNotFoundError(
                    f"Cannot remove. Item with ID {entity_id} not found"
                )
            del self._store[entity_id]

    def list_all(self) -> list[E]:
        with self._lock:
            return list(self._store.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, entity_id: object) -> bool:
        with self._lock:
            return entity_id in self._store

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _label(entity: E) -> str:
        return type(entity).__name__


class InMemoryStockRepository(InMemoryRepository[S], StockRepository[S]):

    def update_quantity(self, entity_id: EntityId, new_quantity: int) -> None:
        # Negative values fail before the id is looked up.
        if new_quantity < 0:
            raise InvalidValueError(
                f"Quantity cannot be negative (item {entity_id}, got {new_quantity})"
            )
        with self._lock:
            item = self.get_by_id(entity_id)
            item.quantity = new_quantity
