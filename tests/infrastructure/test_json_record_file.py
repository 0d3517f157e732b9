"""Tests for the JSON-backed record file, using real files under tmp_path."""

import json
from datetime import datetime

import pytest

from rms.domain.exceptions import LoadError
from rms.domain.model.inventory import InventoryRecord
from rms.domain.service.inventory_logger import InventoryLogger
from rms.infrastructure.persistence.in_memory_repository import InMemoryRepository
from rms.infrastructure.persistence.json_record_file import inventory_record_file


def _records() -> list[InventoryRecord]:
    added = datetime(2026, 10, 1, 9, 30, 15)
    return [
        InventoryRecord(id=1, name="Laptop", quantity=10, date_added=added),
        InventoryRecord(id=2, name="Monitor", quantity=5, date_added=added),
    ]


class TestRead:

    def test_missing_file_yields_empty(self, tmp_path):
        record_file = inventory_record_file(tmp_path / "nope.json")
        assert record_file.read() == []

    def test_malformed_json_raises_load_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LoadError, match="Cannot read"):
            inventory_record_file(path).read()

    def test_undecodable_bytes_raise_load_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_bytes(b"[\xff\xfe]")
        with pytest.raises(LoadError, match="Cannot read"):
            inventory_record_file(path).read()

    def test_non_array_raises_load_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(LoadError, match="expected a JSON array"):
            inventory_record_file(path).read()

    def test_missing_field_raises_load_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text('[{"id": 1, "name": "Laptop"}]', encoding="utf-8")
        with pytest.raises(LoadError, match="Malformed record"):
            inventory_record_file(path).read()


class TestWrite:

    def test_writes_array_of_objects(self, tmp_path):
        path = tmp_path / "inventory.json"
        inventory_record_file(path).write(_records())

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw[0] == {
            "id": 1,
            "name": "Laptop",
            "quantity": 10,
            "date_added": "2026-10-01T09:30:15",
        }
        assert len(raw) == 2

    def test_overwrites_whole_file(self, tmp_path):
        path = tmp_path / "inventory.json"
        record_file = inventory_record_file(path)
        record_file.write(_records())
        record_file.write(_records()[:1])
        assert len(json.loads(path.read_text(encoding="utf-8"))) == 1

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "inventory.json"
        inventory_record_file(path).write(_records())
        assert path.exists()

    def test_read_back_matches_written(self, tmp_path):
        record_file = inventory_record_file(tmp_path / "inventory.json")
        record_file.write(_records())
        assert record_file.read() == _records()


class TestInventoryLoggerOnDisk:

    def test_undecodable_file_reported_and_loaded_empty(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_bytes(b"[\xff\xfe]")
        inventory = InventoryLogger(inventory_record_file(path), InMemoryRepository[InventoryRecord])

        outcome = inventory.load_from_file()
        assert not outcome.ok
        assert "Cannot read" in outcome.message
        assert inventory.list_all() == []
