"""Abstract source of student results and sink for the grade report."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rms.domain.model.grading import Student


class StudentResultsRepository(ABC):

    @abstractmethod
    def read_students(self) -> list[Student]:
        """Return every student, or raise on the first malformed line."""

    @abstractmethod
    def write_report(self, lines: list[str]) -> None:
        """Persist the finished report, one line per student."""
