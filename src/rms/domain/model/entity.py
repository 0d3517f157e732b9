"""Capabilities every stored record must provide.

Repositories only ever ask an entity for its identifier; stock
repositories additionally touch ``quantity``.
"""

from __future__ import annotations

from typing import Protocol, Union

EntityId = Union[int, str]


class Identifiable(Protocol):

    @property
    def id(self) -> EntityId: ...


class StockItem(Identifiable, Protocol):
    """A record whose quantity on hand can be adjusted in place."""

    name: str
    quantity: int
