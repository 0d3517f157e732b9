"""InventoryRecord: an immutable line in the persisted inventory log."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InventoryRecord:
    """A logged stock entry.

    Records are never edited once written; a new session reloads them
    from the log file as-is.
    """

    id: int
    name: str
    quantity: int
    date_added: datetime

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Date Added: {self.date_added:%Y-%m-%d %H:%M:%S}"
        )
