"""Unit tests for the WarehouseManager domain service."""

from datetime import date

import pytest

from rms.domain.exceptions import EntityNotFoundError
from rms.domain.model.warehouse import Category, ElectronicItem, GroceryItem
from rms.domain.service.warehouse_manager import WarehouseManager, default_groceries
from rms.infrastructure.persistence.in_memory_repository import InMemoryStockRepository


def _manager(seed: bool = True) -> WarehouseManager:
    manager = WarehouseManager(
        electronics=InMemoryStockRepository[ElectronicItem](),
        groceries=InMemoryStockRepository[GroceryItem](),
    )
    if seed:
        manager.seed_data()
    return manager


class TestSeedData:

    def test_default_dataset(self):
        manager = _manager(seed=False)
        assert manager.seed_data() == []
        assert [i.name for i in manager.electronics.list_all()] == ["Laptop", "Smartphone"]
        assert [i.name for i in manager.groceries.list_all()] == ["Milk", "Bread"]

    def test_same_id_in_different_categories_is_fine(self):
        manager = _manager()
        assert manager.get_item(Category.ELECTRONICS, 1).name == "Laptop"
        assert manager.get_item(Category.GROCERIES, 1).name == "Milk"

    def test_duplicate_in_seed_reported_not_raised(self):
        manager = _manager(seed=False)
        electronics = [
            ElectronicItem(id=1, name="Laptop", quantity=5, brand="Dell", warranty_months=24),
            ElectronicItem(id=1, name="Tablet", quantity=3, brand="Lenovo", warranty_months=18),
            ElectronicItem(id=2, name="Smartphone", quantity=10, brand="Samsung", warranty_months=12),
        ]
        failures = manager.seed_data(electronics=electronics, groceries=[])

        assert len(failures) == 1
        assert failures[0].operation == "seed"
        assert failures[0].entity_id == 1
        assert "already exists" in failures[0].message
        # The rest of the seed still went in, and the first Laptop was kept.
        assert [i.name for i in manager.electronics.list_all()] == ["Laptop", "Smartphone"]

    def test_grocery_expiry_relative_to_today(self):
        milk, bread = default_groceries(today=date(2026, 10, 18))
        assert milk.expiry_date == date(2026, 10, 25)
        assert bread.expiry_date == date(2026, 10, 20)


class TestPrintAll:

    def test_emits_each_item_in_order(self):
        manager = _manager()
        lines: list[str] = []
        manager.print_all(Category.ELECTRONICS, lines.append)
        assert lines == [
            "- Laptop (ID: 1, Brand: Dell, Qty: 5, Warranty: 24 months)",
            "- Smartphone (ID: 2, Brand: Samsung, Qty: 10, Warranty: 12 months)",
        ]

    def test_read_only(self):
        manager = _manager()
        manager.print_all(Category.GROCERIES, lambda _line: None)
        assert len(manager.groceries) == 2


class TestIncreaseStock:

    def test_adds_delta(self):
        manager = _manager()
        outcome = manager.increase_stock(Category.ELECTRONICS, 2, 5)
        assert outcome.ok
        assert outcome.message == "Stock increased. New quantity: 15"
        assert manager.get_item(Category.ELECTRONICS, 2).quantity == 15

    def test_missing_item_reported(self):
        manager = _manager()
        outcome = manager.increase_stock(Category.GROCERIES, 999, 1)
        assert not outcome.ok
        assert outcome.operation == "increase_stock"
        assert "999 not found" in outcome.message

    def test_negative_result_reported_value_unchanged(self):
        manager = _manager()
        outcome = manager.increase_stock(Category.ELECTRONICS, 2, -15)
        assert not outcome.ok
        assert "cannot be negative" in outcome.message
        assert manager.get_item(Category.ELECTRONICS, 2).quantity == 10


class TestRemoveById:

    def test_removes(self):
        manager = _manager()
        outcome = manager.remove_by_id(Category.GROCERIES, 2)
        assert outcome.ok
        assert [i.id for i in manager.groceries.list_all()] == [1]

    def test_missing_reported_size_unchanged(self):
        manager = _manager()
        outcome = manager.remove_by_id(Category.GROCERIES, 999)
        assert not outcome.ok
        assert "Cannot remove" in outcome.message
        assert len(manager.groceries) == 2


class TestAddItem:

    def test_duplicate_reported(self):
        manager = _manager()
        tablet = ElectronicItem(id=1, name="Tablet", quantity=3, brand="Lenovo", warranty_months=18)
        outcome = manager.add_item(Category.ELECTRONICS, tablet)
        assert not outcome.ok
        assert manager.get_item(Category.ELECTRONICS, 1).name == "Laptop"

    def test_new_item_added(self):
        manager = _manager()
        tablet = ElectronicItem(id=3, name="Tablet", quantity=3, brand="Lenovo", warranty_months=18)
        assert manager.add_item(Category.ELECTRONICS, tablet).ok
        assert len(manager.electronics) == 3


class TestGetItem:

    def test_missing_propagates(self):
        manager = _manager()
        with pytest.raises(EntityNotFoundError):
            manager.get_item(Category.ELECTRONICS, 42)
