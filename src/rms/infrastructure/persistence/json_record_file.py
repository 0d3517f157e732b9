"""JSON-file-backed implementation of RecordFile."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Generic

from rms.domain.exceptions import LoadError
from rms.domain.model.inventory import InventoryRecord
from rms.domain.repository.record_file import E, RecordFile


class JsonRecordFile(RecordFile[E], Generic[E]):
    """Stores entities as a JSON array of objects.

    The file is rewritten whole on every ``write``; nothing is appended.
    Conversion to and from plain dicts is supplied by the caller.
    """

    def __init__(
        self,
        file_path: Path,
        to_raw: Callable[[E], dict[str, Any]],
        to_domain: Callable[[dict[str, Any]], E],
    ) -> None:
        self._file_path = file_path
        self._to_raw = to_raw
        self._to_domain = to_domain

    # --- RecordFile interface -------------------------------------------------

    def read(self) -> list[E]:
        if not self._file_path.exists():
            return []
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LoadError(f"Cannot read {self._file_path}: {exc}") from exc

        if not isinstance(records, list):
            raise LoadError(
                f"Cannot read {self._file_path}: expected a JSON array, "
                f"got {type(records).__name__}"
            )
        try:
            return [self._to_domain(raw) for raw in records]
        except (KeyError, TypeError, ValueError) as exc:
            raise LoadError(f"Malformed record in {self._file_path}: {exc!r}") from exc

    def write(self, entities: list[E]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(
            json.dumps([self._to_raw(e) for e in entities], indent=2) + "\n",
            encoding="utf-8",
        )


# --- Serialization ------------------------------------------------------------


def inventory_record_to_raw(record: InventoryRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "name": record.name,
        "quantity": record.quantity,
        "date_added": record.date_added.isoformat(),
    }


def inventory_record_to_domain(raw: dict[str, Any]) -> InventoryRecord:
    return InventoryRecord(
        id=raw["id"],
        name=raw["name"],
        quantity=raw["quantity"],
        date_added=datetime.fromisoformat(raw["date_added"]),
    )


def inventory_record_file(file_path: Path) -> JsonRecordFile[InventoryRecord]:
    return JsonRecordFile(file_path, inventory_record_to_raw, inventory_record_to_domain)
