"""CLI commands for the school grade report."""

from __future__ import annotations

from pathlib import Path

import click

from rms.application.generate_grade_report import GenerateGradeReportHandler
from rms.domain.exceptions import DomainException
from rms.infrastructure.bootstrap import student_results_repository


@click.command("report")
@click.option("--input", "input_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Student results file (id,name,score per line).")
@click.option("--output", "output_path", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Where to write the report.")
def grades_report(input_path: Path | None, output_path: Path | None) -> None:
    """Grade every student and write the summary report."""
    repo = student_results_repository(input_path, output_path)
    handler = GenerateGradeReportHandler(results_repo=repo)

    try:
        lines = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for line in lines:
        click.echo(line)
    click.echo(f"Summary report generated ({len(lines)} students).")
