"""Domain service: Warehouse Manager.

Coordinates one stock repository per item category.  Mutations are
best-effort: repository errors are caught, logged and handed back as
an ``Outcome`` so a run never stops half-way.  Lookups (``get_item``)
let EntityNotFoundError propagate, since the caller asked for one
specific item.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable

import structlog

from rms.domain.exceptions import DomainException
from rms.domain.model.entity import EntityId, StockItem
from rms.domain.model.outcome import Outcome
from rms.domain.model.warehouse import Category, ElectronicItem, GroceryItem
from rms.domain.repository.repository import StockRepository

logger = structlog.get_logger(__name__)


def default_electronics() -> list[ElectronicItem]:
    return [
        ElectronicItem(id=1, name="Laptop", quantity=5, brand="Dell", warranty_months=24),
        ElectronicItem(id=2, name="Smartphone", quantity=10, brand="Samsung", warranty_months=12),
    ]


def default_groceries(today: date | None = None) -> list[GroceryItem]:
    today = today or date.today()
    return [
        GroceryItem(id=1, name="Milk", quantity=20, expiry_date=today + timedelta(days=7)),
        GroceryItem(id=2, name="Bread", quantity=15, expiry_date=today + timedelta(days=2)),
    ]


class WarehouseManager:

    def __init__(
        self,
        electronics: StockRepository[ElectronicItem],
        groceries: StockRepository[GroceryItem],
    ) -> None:
        self._repos: dict[Category, StockRepository] = {
            Category.ELECTRONICS: electronics,
            Category.GROCERIES: groceries,
        }

    @property
    def electronics(self) -> StockRepository[ElectronicItem]:
        return self._repos[Category.ELECTRONICS]

    @property
    def groceries(self) -> StockRepository[GroceryItem]:
        return self._repos[Category.GROCERIES]

    # --- Seeding --------------------------------------------------------------

    def seed_data(
        self,
        electronics: list[ElectronicItem] | None = None,
        groceries: list[GroceryItem] | None = None,
    ) -> list[Outcome]:
        """Load the initial dataset.

        Each item is added independently, so a duplicate in the seed list
        only skips that one item.  Returns the failures, if any.
        """
        seeds: list[tuple[Category, StockItem]] = [
            (Category.ELECTRONICS, item)
            for item in (default_electronics() if electronics is None else electronics)
        ]
        seeds += [
            (Category.GROCERIES, item)
            for item in (default_groceries() if groceries is None else groceries)
        ]

        failures: list[Outcome] = []
        for category, item in seeds:
            outcome = self.add_item(category, item, operation="seed")
            if not outcome.ok:
                failures.append(outcome)

        logger.info(
            "Warehouse seeded",
            electronics=len(self.electronics),
            groceries=len(self.groceries),
            failures=len(failures),
        )
        return failures

    # --- Queries --------------------------------------------------------------

    def get_item(self, category: Category, item_id: EntityId) -> StockItem:
        return self._repos[category].get_by_id(item_id)

    def print_all(self, category: Category, echo: Callable[[str], None]) -> None:
        for item in self._repos[category].list_all():
            echo(f"- {item}")

    # --- Best-effort mutations ------------------------------------------------

    def add_item(
        self, category: Category, item: StockItem, operation: str = "add"
    ) -> Outcome:
        try:
            self._repos[category].add(item)
        except DomainException as exc:
            return self._report_failure(operation, category, item.id, exc)
        return Outcome.success(operation, item.id, f"{item.name} added to {category.value}")

    def increase_stock(
        self, category: Category, item_id: EntityId, delta: int
    ) -> Outcome:
        repo = self._repos[category]
        try:
            item = repo.get_by_id(item_id)
            repo.update_quantity(item_id, item.quantity + delta)
        except DomainException as exc:
            return self._report_failure("increase_stock", category, item_id, exc)

        logger.info(
            "Stock increased",
            category=category.value,
            entity_id=item_id,
            delta=delta,
            quantity=item.quantity,
        )
        return Outcome.success(
            "increase_stock", item_id, f"Stock increased. New quantity: {item.quantity}"
        )

    def remove_by_id(self, category: Category, item_id: EntityId) -> Outcome:
        try:
            self._repos[category].remove(item_id)
        except DomainException as exc:
            return self._report_failure("remove", category, item_id, exc)

        logger.info("Item removed", category=category.value, entity_id=item_id)
        return Outcome.success("remove", item_id, f"Item {item_id} removed")

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _report_failure(
        operation: str, category: Category, item_id: EntityId, exc: DomainException
    ) -> Outcome:
        logger.warning(
            "Warehouse operation failed",
            operation=operation,
            category=category.value,
            entity_id=item_id,
            reason=str(exc),
        )
        return Outcome.failure(operation, item_id, exc)
