"""Student results and letter grades."""

from __future__ import annotations

from dataclasses import dataclass

# Lowest score that still earns each grade, best first.
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (50, "D"),
)
FAILING_GRADE = "F"


def grade_for(score: int) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


@dataclass(frozen=True)
class Student:

    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for(self.score)

    @property
    def summary(self) -> str:
        """One report line, e.g. ``Alice (ID: 1): Score = 85, Grade = A``."""
        return (
            f"{self.full_name} (ID: {self.id}): "
            f"Score = {self.score}, Grade = {self.grade}"
        )
