"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransactionLineDTO:
    """Output: one processed transaction as displayed to the user."""

    transaction_id: int
    category: str
    amount: str  # formatted, e.g. "$150.00"
    processor_note: str
    status: str
    balance_after: str


@dataclass(frozen=True)
class SimulationDTO:
    """Output: a finished finance simulation."""

    account_number: str
    starting_balance: str
    final_balance: str
    lines: list[TransactionLineDTO]
    history: list[str]
