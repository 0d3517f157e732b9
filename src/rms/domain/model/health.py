"""Patient and prescription records for the health-records demo."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Patient:

    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Age: {self.age}, Gender: {self.gender}"


@dataclass(frozen=True)
class Prescription:
    """A medication issued to a patient.

    ``patient_id`` is a foreign key into the patient repository; it is
    not checked on insert, the prescription map simply groups by it.
    """

    id: int
    patient_id: int
    medication_name: str
    date_issued: datetime

    def __str__(self) -> str:
        return (
            f"Prescription ID: {self.id}, Medication: {self.medication_name}, "
            f"Date: {self.date_issued:%Y-%m-%d}"
        )
