"""Domain service: Inventory Logger.

Keeps a list of entities in memory and mirrors it to a ``RecordFile``
on request.  Loading replaces the in-memory contents wholesale with a
fresh repository; a file that cannot be read leaves the logger empty
rather than half-filled.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Generic

import structlog

from rms.domain.exceptions import DomainException
from rms.domain.model.inventory import InventoryRecord
from rms.domain.model.outcome import Outcome
from rms.domain.repository.record_file import E, RecordFile
from rms.domain.repository.repository import Repository

logger = structlog.get_logger(__name__)


def sample_inventory(now: datetime | None = None) -> list[InventoryRecord]:
    now = now or datetime.now()
    return [
        InventoryRecord(id=1, name="Laptop", quantity=10, date_added=now),
        InventoryRecord(id=2, name="Monitor", quantity=5, date_added=now),
        InventoryRecord(id=3, name="Keyboard", quantity=15, date_added=now),
        InventoryRecord(id=4, name="Mouse", quantity=20, date_added=now),
        InventoryRecord(id=5, name="Chair", quantity=8, date_added=now),
    ]


class InventoryLogger(Generic[E]):

    def __init__(
        self,
        record_file: RecordFile[E],
        repository_factory: Callable[[], Repository[E]],
    ) -> None:
        self._record_file = record_file
        self._repository_factory = repository_factory
        self._repo = repository_factory()

    def add(self, entity: E) -> None:
        """Add one entity. Raises DuplicateKeyError if the id is taken."""
        self._repo.add(entity)

    def list_all(self) -> list[E]:
        return self._repo.list_all()

    def clear(self) -> None:
        """Drop everything held in memory; the file is left alone."""
        self._repo = self._repository_factory()

    def save_to_file(self) -> Outcome:
        entities = self._repo.list_all()
        try:
            self._record_file.write(entities)
        except OSError as exc:
            logger.error("Inventory save failed", operation="save", reason=str(exc))
            return Outcome.failure("save", None, exc)

        logger.info("Inventory saved", count=len(entities))
        return Outcome.success("save", None, f"Saved {len(entities)} records")

    def load_from_file(self) -> Outcome:
        repo = self._repository_factory()
        try:
            for entity in self._record_file.read():
                repo.add(entity)
        except DomainException as exc:
            self._repo = self._repository_factory()
            logger.warning("Inventory load failed", operation="load", reason=str(exc))
            return Outcome.failure("load", None, exc)

        self._repo = repo
        logger.info("Inventory loaded", count=len(repo))
        return Outcome.success("load", None, f"Loaded {len(repo)} records")


def seed_sample_data(inventory_logger: InventoryLogger[InventoryRecord]) -> list[Outcome]:
    """Add the sample records, reporting any that are already present."""
    failures: list[Outcome] = []
    for record in sample_inventory():
        try:
            inventory_logger.add(record)
        except DomainException as exc:
            logger.warning("Seed record rejected", operation="seed", entity_id=record.id, reason=str(exc))
            failures.append(Outcome.failure("seed", record.id, exc))
    return failures
