"""In-memory fakes for the file-backed ports.

These implement the same abstract interfaces as the JSON and text
implementations but keep everything in a list. No file I/O.
"""

from __future__ import annotations

from rms.domain.exceptions import LoadError
from rms.domain.model.grading import Student
from rms.domain.repository.record_file import E, RecordFile
from rms.domain.repository.student_results_repository import StudentResultsRepository


class FakeRecordFile(RecordFile[E]):

    def __init__(self, entities: list[E] | None = None) -> None:
        self.stored: list[E] | None = list(entities) if entities is not None else None
        self.fail_read: str | None = None
        self.fail_write: str | None = None
        self.writes = 0

    def read(self) -> list[E]:
        if self.fail_read:
            raise LoadError(self.fail_read)
        return list(self.stored or [])

    def write(self, entities: list[E]) -> None:
        if self.fail_write:
            raise OSError(self.fail_write)
        self.stored = list(entities)
        self.writes += 1


class FakeStudentResultsRepository(StudentResultsRepository):

    def __init__(self, students: list[Student] | None = None, error: Exception | None = None) -> None:
        self._students = students or []
        self._error = error
        self.report: list[str] | None = None

    def read_students(self) -> list[Student]:
        if self._error is not None:
            raise self._error
        return list(self._students)

    def write_report(self, lines: list[str]) -> None:
        self.report = list(lines)
