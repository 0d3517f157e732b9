"""Application service: Simulate Transactions use case.

Opens a savings account, pairs each transaction with a payment channel
in order, and reports how each one resolved.
"""

from __future__ import annotations

from datetime import datetime

from rms.application.dto import SimulationDTO, TransactionLineDTO
from rms.domain.exceptions import ValidationError
from rms.domain.model.finance import SavingsAccount, Transaction, TransactionRecord
from rms.domain.model.value_objects import Money
from rms.domain.service.transaction_processors import ProcessorKind, build_processor
from rms.domain.service.transaction_service import TransactionService

DEFAULT_CHANNELS = [
    ProcessorKind.BANK_TRANSFER,
    ProcessorKind.MOBILE_MONEY,
    ProcessorKind.CRYPTO_WALLET,
]


def default_transactions(now: datetime | None = None) -> list[Transaction]:
    now = now or datetime.now()
    return [
        Transaction(id=1, date=now, amount=Money.of("150"), category="Groceries"),
        Transaction(id=2, date=now, amount=Money.of("500"), category="Rent"),
        Transaction(id=3, date=now, amount=Money.of("400"), category="Online Courses"),
    ]


class SimulateTransactionsHandler:

    def handle(
        self,
        account_number: str,
        starting_balance: str,
        transactions: list[Transaction] | None = None,
        channels: list[ProcessorKind] | None = None,
    ) -> SimulationDTO:
        """Run the simulation.

        Args:
            account_number: Label for the savings account.
            starting_balance: Opening balance, e.g. "1000".
            transactions: Defaults to the three sample transactions.
            channels: One processor per transaction, matched by position.
                Defaults to bank transfer, mobile money, crypto wallet.
        """
        if transactions is None:
            transactions = default_transactions()
        if channels is None:
            channels = DEFAULT_CHANNELS
        if len(channels) < len(transactions):
            raise ValidationError(
                f"{len(transactions)} transactions but only {len(channels)} channels"
            )

        opening = Money.of(starting_balance)
        service = TransactionService(SavingsAccount(account_number, opening))

        lines: list[TransactionLineDTO] = []
        for transaction, kind in zip(transactions, channels):
            record, note = service.process(transaction, build_processor(kind))
            lines.append(self._to_line(record, note))

        return SimulationDTO(
            account_number=account_number,
            starting_balance=str(opening),
            final_balance=str(service.account.balance),
            lines=lines,
            history=[str(record.transaction) for record in service.history()],
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_line(record: TransactionRecord, note: str) -> TransactionLineDTO:
        return TransactionLineDTO(
            transaction_id=record.transaction.id,
            category=record.transaction.category,
            amount=str(record.transaction.amount),
            processor_note=note,
            status=record.status.value,
            balance_after=str(record.balance_after),
        )
