"""Warehouse stock items.

Two unrelated item kinds share only the ``StockItem`` capability; the
quantity is the single field the warehouse is allowed to change.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Category(Enum):
    ELECTRONICS = "electronics"
    GROCERIES = "groceries"


@dataclass
class ElectronicItem:

    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (
            f"{self.name} (ID: {self.id}, Brand: {self.brand}, "
            f"Qty: {self.quantity}, Warranty: {self.warranty_months} months)"
        )


@dataclass
class GroceryItem:

    id: int
    name: str
    quantity: int
    expiry_date: date

    def __str__(self) -> str:
        return (
            f"{self.name} (ID: {self.id}, Qty: {self.quantity}, "
            f"Exp: {self.expiry_date:%Y-%m-%d})"
        )
