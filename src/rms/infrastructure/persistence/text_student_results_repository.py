"""Comma-delimited text implementation of StudentResultsRepository.

Input lines look like ``1, Alice, 85``.  Parsing is all-or-nothing: the
first malformed line aborts the read and no students are returned.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rms.domain.exceptions import FormatError, LoadError, MissingFieldError
from rms.domain.model.grading import Student
from rms.domain.repository.student_results_repository import StudentResultsRepository

FIELD_COUNT = 3


def parse_student_lines(lines: Iterable[str]) -> list[Student]:
    students: list[Student] = []
    for line_number, line in enumerate(lines, start=1):
        parts = [part.strip() for part in line.split(",")]
        if len(parts) != FIELD_COUNT:
            raise MissingFieldError(
                f"Expected {FIELD_COUNT} fields, found {len(parts)}", line_number
            )
        raw_id, name, raw_score = parts
        try:
            student_id = int(raw_id)
        except ValueError:
            raise FormatError(
                f"Student ID must be an integer, got {raw_id!r}", line_number
            ) from None
        try:
            score = int(raw_score)
        except ValueError:
            raise FormatError(
                f"Score must be an integer, got {raw_score!r}", line_number
            ) from None
        students.append(Student(id=student_id, full_name=name, score=score))
    return students


class TextStudentResultsRepository(StudentResultsRepository):

    def __init__(self, input_path: Path, output_path: Path) -> None:
        self._input_path = input_path
        self._output_path = output_path

    def read_students(self) -> list[Student]:
        try:
            text = self._input_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise LoadError(f"Input file not found: {self._input_path}") from None
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(f"Cannot read {self._input_path}: {exc}") from exc
        return parse_student_lines(text.splitlines())

    def write_report(self, lines: list[str]) -> None:
        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._output_path.write_text(
            "".join(f"{line}\n" for line in lines), encoding="utf-8"
        )
