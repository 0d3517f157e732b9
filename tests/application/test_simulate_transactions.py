"""Integration tests for the SimulateTransactions use case."""

from datetime import datetime

import pytest

from rms.application.simulate_transactions import SimulateTransactionsHandler
from rms.domain.exceptions import ValidationError
from rms.domain.model.finance import Transaction
from rms.domain.model.value_objects import Money
from rms.domain.service.transaction_processors import ProcessorKind


class TestSimulateTransactionsDefaults:

    def test_sample_run(self):
        dto = SimulateTransactionsHandler().handle("ACC001", "1000")

        assert dto.account_number == "ACC001"
        assert dto.starting_balance == "$1000.00"
        assert [line.status for line in dto.lines] == ["APPLIED", "APPLIED", "REJECTED"]
        assert [line.balance_after for line in dto.lines] == ["$850.00", "$350.00", "$350.00"]
        assert dto.final_balance == "$350.00"

    def test_channels_paired_in_order(self):
        dto = SimulateTransactionsHandler().handle("ACC001", "1000")
        notes = [line.processor_note for line in dto.lines]
        assert notes[0].startswith("[BankTransfer]")
        assert notes[1].startswith("[MobileMoney]")
        assert notes[2].startswith("[CryptoWallet]")

    def test_history_lists_every_transaction(self):
        dto = SimulateTransactionsHandler().handle("ACC001", "1000")
        assert len(dto.history) == 3
        assert dto.history[2].endswith("$400.00 for Online Courses")


class TestSimulateTransactionsCustom:

    def test_single_large_then_small(self):
        now = datetime(2026, 10, 18)
        transactions = [
            Transaction(id=1, date=now, amount=Money.of("1500"), category="Car"),
            Transaction(id=2, date=now, amount=Money.of("500"), category="Rent"),
        ]
        dto = SimulateTransactionsHandler().handle(
            "ACC009", "1000", transactions,
            channels=[ProcessorKind.MOBILE_MONEY, ProcessorKind.MOBILE_MONEY],
        )
        assert [line.status for line in dto.lines] == ["REJECTED", "APPLIED"]
        assert dto.final_balance == "$500.00"

    def test_too_few_channels_rejected(self):
        with pytest.raises(ValidationError, match="only 1 channels"):
            SimulateTransactionsHandler().handle(
                "ACC001", "1000", channels=[ProcessorKind.BANK_TRANSFER]
            )

    def test_negative_balance_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            SimulateTransactionsHandler().handle("ACC001", "-5")
