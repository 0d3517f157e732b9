"""CLI commands for the persisted inventory log."""

from __future__ import annotations

from pathlib import Path

import click

from rms.domain.model.inventory import InventoryRecord
from rms.domain.service.inventory_logger import InventoryLogger, seed_sample_data
from rms.infrastructure.bootstrap import inventory_logger

_file_option = click.option(
    "--file",
    "file_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Inventory JSON file (defaults to settings).",
)


def _show(inventory_log: InventoryLogger[InventoryRecord]) -> None:
    records = inventory_log.list_all()
    if not records:
        click.echo("No inventory records found.")
        return
    click.echo("--- Inventory Items ---")
    for record in records:
        click.echo(str(record))


@click.command("seed")
@_file_option
def inventory_seed(file_path: Path | None) -> None:
    """Write the sample inventory to the log file."""
    inventory_log = inventory_logger(file_path)
    for failure in seed_sample_data(inventory_log):
        click.echo(f"[Seed Error] {failure.message}")

    outcome = inventory_log.save_to_file()
    if not outcome.ok:
        raise click.ClickException(outcome.message)
    click.echo(outcome.message)


@click.command("show")
@_file_option
def inventory_show(file_path: Path | None) -> None:
    """Load the log file and list its records."""
    inventory_log = inventory_logger(file_path)
    outcome = inventory_log.load_from_file()
    if not outcome.ok:
        click.echo(f"Error loading from file: {outcome.message}")
    _show(inventory_log)


@click.command("run")
@_file_option
def inventory_run(file_path: Path | None) -> None:
    """Seed and save, then reload in a fresh session and list."""
    inventory_log = inventory_logger(file_path)
    for failure in seed_sample_data(inventory_log):
        click.echo(f"[Seed Error] {failure.message}")
    click.echo(str(inventory_log.save_to_file()))

    click.echo("Simulating new session...")
    inventory_log.clear()
    outcome = inventory_log.load_from_file()
    click.echo(str(outcome))
    _show(inventory_log)
