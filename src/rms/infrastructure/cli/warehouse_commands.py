"""CLI commands for the warehouse inventory manager."""

from __future__ import annotations

import click

from rms.domain.model.warehouse import Category, ElectronicItem
from rms.infrastructure.bootstrap import warehouse_manager


@click.command("run")
@click.option("--restock-id", default=2, show_default=True, type=int, help="Electronic item to restock.")
@click.option("--restock-by", default=5, show_default=True, type=int, help="Units to add.")
def warehouse_run(restock_id: int, restock_by: int) -> None:
    """Seed the warehouse and exercise every stock operation."""
    manager = warehouse_manager()

    for failure in manager.seed_data():
        click.echo(f"[Seed Error] {failure.message}")

    click.echo("Grocery Items:")
    manager.print_all(Category.GROCERIES, click.echo)
    click.echo()
    click.echo("Electronic Items:")
    manager.print_all(Category.ELECTRONICS, click.echo)

    click.echo()
    click.echo("Try adding duplicate item:")
    duplicate = ElectronicItem(id=1, name="Tablet", quantity=3, brand="Lenovo", warranty_months=18)
    click.echo(str(manager.add_item(Category.ELECTRONICS, duplicate)))

    click.echo()
    click.echo("Try removing non-existent item:")
    click.echo(str(manager.remove_by_id(Category.GROCERIES, 999)))

    click.echo()
    click.echo("Try updating with invalid quantity:")
    click.echo(str(manager.increase_stock(Category.ELECTRONICS, 2, -100)))

    click.echo()
    click.echo(f"Restock electronic item {restock_id} by {restock_by}:")
    click.echo(str(manager.increase_stock(Category.ELECTRONICS, restock_id, restock_by)))
