"""Result of a best-effort operation that reports instead of raising."""

from __future__ import annotations

from dataclasses import dataclass

from rms.domain.model.entity import EntityId


@dataclass(frozen=True)
class Outcome:

    operation: str
    entity_id: EntityId | None
    ok: bool
    message: str

    @staticmethod
    def success(operation: str, entity_id: EntityId | None, message: str) -> Outcome:
        return Outcome(operation=operation, entity_id=entity_id, ok=True, message=message)

    @staticmethod
    def failure(operation: str, entity_id: EntityId | None, error: Exception) -> Outcome:
        return Outcome(operation=operation, entity_id=entity_id, ok=False, message=str(error))

    def __str__(self) -> str:
        prefix = "OK" if self.ok else "Error"
        return f"[{prefix}] {self.operation}: {self.message}"
