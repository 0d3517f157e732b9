"""Accounts and transactions for the finance simulator.

A transaction is immutable.  Its fate is tracked on a separate
``TransactionRecord`` that moves PENDING -> APPLIED | REJECTED exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from rms.domain.exceptions import ValidationError
from rms.domain.model.value_objects import Money


class TransactionStatus(Enum):
    PENDING = "PENDING"
    APPLIED = "APPLIED"
    REJECTED = "REJECTED"


@dataclass(frozen=True)
class Transaction:

    id: int
    date: datetime
    amount: Money
    category: str

    def __str__(self) -> str:
        return f"[{self.date:%Y-%m-%d}] {self.amount} for {self.category}"


@dataclass
class TransactionRecord:
    """Outcome of running one transaction through a processor and an account."""

    transaction: Transaction
    processor: str
    status: TransactionStatus = TransactionStatus.PENDING
    balance_after: Money | None = None

    def resolve(self, status: TransactionStatus, balance_after: Money) -> None:
        if self.status != TransactionStatus.PENDING:
            raise ValidationError(
                f"Transaction #{self.transaction.id} already {self.status.value}"
            )
        if status == TransactionStatus.PENDING:
            raise ValidationError("A transaction can only resolve to APPLIED or REJECTED")
        self.status = status
        self.balance_after = balance_after


@dataclass
class Account:
    """A plain account: every debit is attempted.

    Because ``balance`` is Money, overdrawing raises ValidationError
    rather than producing a negative balance.
    """

    account_number: str
    balance: Money

    def apply_transaction(self, transaction: Transaction) -> TransactionStatus:
        self.balance = self.balance - transaction.amount
        return TransactionStatus.APPLIED


@dataclass
class SavingsAccount(Account):
    """Rejects, rather than fails, any debit the balance cannot cover."""

    def apply_transaction(self, transaction: Transaction) -> TransactionStatus:
        if self.balance >= transaction.amount:
            self.balance = self.balance - transaction.amount
            return TransactionStatus.APPLIED
        return TransactionStatus.REJECTED
