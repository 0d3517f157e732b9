"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from rms.config import settings
from rms.domain.model.health import Patient, Prescription
from rms.domain.model.inventory import InventoryRecord
from rms.domain.model.warehouse import ElectronicItem, GroceryItem
from rms.domain.service.health_records_manager import HealthRecordsManager
from rms.domain.service.inventory_logger import InventoryLogger
from rms.domain.service.warehouse_manager import WarehouseManager
from rms.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
    InMemoryStockRepository,
)
from rms.infrastructure.persistence.json_record_file import inventory_record_file
from rms.infrastructure.persistence.text_student_results_repository import (
    TextStudentResultsRepository,
)


def warehouse_manager() -> WarehouseManager:
    return WarehouseManager(
        electronics=InMemoryStockRepository[ElectronicItem](),
        groceries=InMemoryStockRepository[GroceryItem](),
    )


def health_records_manager() -> HealthRecordsManager:
    return HealthRecordsManager(
        patients=InMemoryRepository[Patient](),
        prescriptions=InMemoryRepository[Prescription](),
    )


def inventory_logger(file_path: Path | None = None) -> InventoryLogger[InventoryRecord]:
    return InventoryLogger(
        record_file=inventory_record_file(file_path or settings.inventory_path),
        repository_factory=InMemoryRepository[InventoryRecord],
    )


def student_results_repository(
    input_path: Path | None = None,
    output_path: Path | None = None,
) -> TextStudentResultsRepository:
    return TextStudentResultsRepository(
        input_path or settings.grades_input_path,
        output_path or settings.grades_report_path,
    )
