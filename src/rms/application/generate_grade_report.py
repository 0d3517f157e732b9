"""Application service: Generate Grade Report use case.

The whole input is parsed before anything is written, so a malformed
line means no report at all rather than a partial one.
"""

from __future__ import annotations

import structlog

from rms.domain.repository.student_results_repository import StudentResultsRepository

logger = structlog.get_logger(__name__)


class GenerateGradeReportHandler:

    def __init__(self, results_repo: StudentResultsRepository) -> None:
        self._results_repo = results_repo

    def handle(self) -> list[str]:
        """Read every student, grade them and write the report.

        Returns the report lines that were written.
        """
        students = self._results_repo.read_students()
        lines = [student.summary for student in students]
        self._results_repo.write_report(lines)
        logger.info("Grade report written", students=len(lines))
        return lines
