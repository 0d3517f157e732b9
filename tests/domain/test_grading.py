"""Unit tests for letter grades and report lines."""

import pytest

from rms.domain.model.grading import Student, grade_for


@pytest.mark.parametrize(
    ("score", "grade"),
    [(100, "A"), (80, "A"), (79, "B"), (70, "B"), (69, "C"), (60, "C"), (59, "D"), (50, "D"), (49, "F"), (0, "F")],
)
def test_grade_boundaries(score, grade):
    assert grade_for(score) == grade


class TestStudentSummary:

    def test_alice(self):
        assert Student(id=1, full_name="Alice", score=85).summary == "Alice (ID: 1): Score = 85, Grade = A"

    def test_bob(self):
        assert Student(id=2, full_name="Bob", score=55).summary == "Bob (ID: 2): Score = 55, Grade = D"
