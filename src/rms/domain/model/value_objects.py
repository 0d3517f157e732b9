"""Money: the amount type for account balances and transactions.

A balance can never drop below zero, so overdrafts surface as a
ValidationError raised by subtraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from rms.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Balances and transaction amounts are both Money, so a debit that
    would overdraw an account fails at the subtraction itself.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    @classmethod
    def of(cls, amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Build Money from a config value, CLI option or literal."""
        try:
            value = Decimal(str(amount))
        except InvalidOperation:
            raise ValidationError(f"Not a monetary amount: {amount!r}") from None
        return cls(value, currency)

    def __add__(self, other: Money) -> Money:
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._check_currency(other)
        remaining = self.amount - other.amount
        if remaining < 0:
            raise ValidationError(f"Insufficient funds: {self} is less than {other}")
        return Money(remaining, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __ge__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def _check_currency(self, other: Money) -> None:
        if other.currency != self.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )
