"""Payment channels a transaction can be routed through.

The set is closed: ``ProcessorKind`` lists every implementation and
``build_processor`` is the only way the application creates one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from rms.domain.model.finance import Transaction


class ProcessorKind(Enum):
    BANK_TRANSFER = "bank-transfer"
    MOBILE_MONEY = "mobile-money"
    CRYPTO_WALLET = "crypto-wallet"


class TransactionProcessor(ABC):

    kind: ProcessorKind

    @abstractmethod
    def process(self, transaction: Transaction) -> str:
        """Hand the transaction to the channel and describe what happened."""


class BankTransferProcessor(TransactionProcessor):

    kind = ProcessorKind.BANK_TRANSFER

    def process(self, transaction: Transaction) -> str:
        return (
            f"[BankTransfer] Processing {transaction.amount} for "
            f"'{transaction.category}' on {transaction.date:%Y-%m-%d}"
        )


class MobileMoneyProcessor(TransactionProcessor):

    kind = ProcessorKind.MOBILE_MONEY

    def process(self, transaction: Transaction) -> str:
        return f"[MobileMoney] Paid {transaction.amount} - Category: {transaction.category}"


class CryptoWalletProcessor(TransactionProcessor):

    kind = ProcessorKind.CRYPTO_WALLET

    def process(self, transaction: Transaction) -> str:
        return (
            f"[CryptoWallet] Sent {transaction.amount.amount:.2f} in crypto "
            f"for '{transaction.category}'"
        )


_PROCESSORS: dict[ProcessorKind, type[TransactionProcessor]] = {
    ProcessorKind.BANK_TRANSFER: BankTransferProcessor,
    ProcessorKind.MOBILE_MONEY: MobileMoneyProcessor,
    ProcessorKind.CRYPTO_WALLET: CryptoWalletProcessor,
}


def build_processor(kind: ProcessorKind) -> TransactionProcessor:
    return _PROCESSORS[kind]()
