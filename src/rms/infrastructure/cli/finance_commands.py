"""CLI commands for the finance simulator."""

from __future__ import annotations

import click

from rms.application.simulate_transactions import SimulateTransactionsHandler
from rms.config import settings
from rms.domain.exceptions import DomainException


@click.command("run")
@click.option("--account", default=None, help="Account number (defaults to settings).")
@click.option("--balance", default=None, help="Starting balance, e.g. 1000.")
def finance_run(account: str | None, balance: str | None) -> None:
    """Run the sample transactions against a savings account."""
    handler = SimulateTransactionsHandler()

    try:
        dto = handler.handle(
            account_number=account or settings.ACCOUNT_NUMBER,
            starting_balance=balance or str(settings.STARTING_BALANCE),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Account {dto.account_number}  (opening balance {dto.starting_balance})")
    for line in dto.lines:
        click.echo()
        click.echo(f"-> Processing Transaction #{line.transaction_id}: {line.category}")
        click.echo(f"   {line.processor_note}")
        if line.status == "APPLIED":
            click.echo(f"   Transaction of {line.amount} applied. New balance: {line.balance_after}")
        else:
            click.echo(f"   Transaction failed: Insufficient funds for {line.amount}")

    click.echo()
    click.echo(f"Current Balance: {dto.final_balance}")
    click.echo()
    click.echo("Transaction History:")
    for entry in dto.history:
        click.echo(f" - {entry}")
