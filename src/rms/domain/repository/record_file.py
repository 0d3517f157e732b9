"""Abstract flat-file store for a list of entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from rms.domain.model.entity import Identifiable

E = TypeVar("E", bound=Identifiable)


class RecordFile(ABC, Generic[E]):

    @abstractmethod
    def read(self) -> list[E]:
        """Return the stored entities in file order.

        A missing file yields an empty list; unreadable content raises
        LoadError.
        """

    @abstractmethod
    def write(self, entities: list[E]) -> None:
        """Replace the file contents with *entities*."""
