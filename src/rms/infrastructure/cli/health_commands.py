"""CLI commands for the health records demo."""

from __future__ import annotations

import click

from rms.domain.exceptions import DomainException
from rms.infrastructure.bootstrap import health_records_manager


@click.command("run")
@click.option("--patient", "patient_id", default=2, show_default=True, type=int, help="Patient ID to list prescriptions for.")
def health_run(patient_id: int) -> None:
    """Seed patients and prescriptions, then list them."""
    manager = health_records_manager()
    for failure in manager.seed_data():
        click.echo(f"[Seed Error] {failure.message}")
    manager.build_prescription_map()

    manager.print_all_patients(click.echo)
    click.echo()

    try:
        patient = manager.get_patient(patient_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Patient: {patient.name}")
    manager.print_prescriptions_for_patient(patient_id, click.echo)
