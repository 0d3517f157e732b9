"""Abstract keyed repository for any Identifiable entity.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rms.domain.model.entity import EntityId, Identifiable, StockItem

E = TypeVar("E", bound=Identifiable)
S = TypeVar("S", bound=StockItem)


class Repository(ABC, Generic[E]):

    @abstractmethod
    def add(self, entity: E) -> None:
        """Store a new entity. Raises DuplicateKeyError if the id is taken."""

    @abstractmethod
    def get_by_id(self, entity_id: EntityId) -> E:
        """Return an entity by its ID. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def remove(self, entity_id: EntityId) -> None:
        """Delete an entity. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def list_all(self) -> list[E]:
        """Return every entity in insertion order, as a new list."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __contains__(self, entity_id: object) -> bool: ...


class StockRepository(Repository[S]):

    @abstractmethod
    def update_quantity(self, entity_id: EntityId, new_quantity: int) -> None:
        """Set the quantity on hand.

        Raises InvalidValueError for a negative quantity (checked first,
        whether or not the id exists), then EntityNotFoundError.
        """
