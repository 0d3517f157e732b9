import click

from rms.config import settings
from rms.infrastructure.cli.finance_commands import finance_run
from rms.infrastructure.cli.grades_commands import grades_report
from rms.infrastructure.cli.health_commands import health_run
from rms.infrastructure.cli.inventory_commands import (
    inventory_run,
    inventory_seed,
    inventory_show,
)
from rms.infrastructure.cli.warehouse_commands import warehouse_run
from rms.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override RMS_LOG_LEVEL.",
)
def cli(log_level: str | None) -> None:
    """RMS: Records Management Suite"""
    configure_logging(log_level or settings.LOG_LEVEL, json_output=settings.LOG_JSON)


@cli.group()
def warehouse() -> None:
    """Warehouse inventory manager."""


@cli.group()
def health() -> None:
    """Patient and prescription records."""


@cli.group()
def finance() -> None:
    """Finance transaction simulator."""


@cli.group()
def inventory() -> None:
    """Persisted inventory log."""


@cli.group()
def grades() -> None:
    """School grade reports."""


# Register subcommands
warehouse.add_command(warehouse_run)
health.add_command(health_run)
finance.add_command(finance_run)
inventory.add_command(inventory_run)
inventory.add_command(inventory_seed)
inventory.add_command(inventory_show)
grades.add_command(grades_report)
