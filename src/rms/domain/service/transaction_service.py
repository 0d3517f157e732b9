"""Domain service: Transaction processing.

Runs each transaction through its payment channel, then applies it to
the account.  The account alone decides APPLIED or REJECTED; this
service records the decision and keeps the history.

Not safe for concurrent callers: the balance check and the debit inside
``SavingsAccount.apply_transaction`` are not atomic across callers.
"""

from __future__ import annotations

import structlog

from rms.domain.model.finance import Account, Transaction, TransactionRecord
from rms.domain.service.transaction_processors import TransactionProcessor

logger = structlog.get_logger(__name__)


class TransactionService:

    def __init__(self, account: Account) -> None:
        self._account = account
        self._history: list[TransactionRecord] = []

    @property
    def account(self) -> Account:
        return self._account

    def process(
        self, transaction: Transaction, processor: TransactionProcessor
    ) -> tuple[TransactionRecord, str]:
        """Process one transaction.

        Returns the resolved record and the channel's description line.
        """
        record = TransactionRecord(transaction=transaction, processor=processor.kind.value)
        note = processor.process(transaction)

        status = self._account.apply_transaction(transaction)
        record.resolve(status, self._account.balance)
        self._history.append(record)

        logger.info(
            "Transaction resolved",
            transaction_id=transaction.id,
            account=self._account.account_number,
            processor=record.processor,
            amount=str(transaction.amount.amount),
            status=status.value,
            balance=str(self._account.balance.amount),
        )
        return record, note

    def history(self) -> list[TransactionRecord]:
        return list(self._history)
