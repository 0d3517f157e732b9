"""Domain service: Health Records Manager.

Owns the patient and prescription repositories and a derived index of
prescriptions per patient.  The index is rebuilt on demand from the
prescription repository and is never written to directly.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import structlog

from rms.domain.exceptions import DomainException
from rms.domain.model.health import Patient, Prescription
from rms.domain.model.outcome import Outcome
from rms.domain.repository.repository import Repository

logger = structlog.get_logger(__name__)


def default_patients() -> list[Patient]:
    return [
        Patient(id=1, name="John Doe", age=30, gender="Male"),
        Patient(id=2, name="Jane Smith", age=25, gender="Female"),
        Patient(id=3, name="Alice Brown", age=40, gender="Female"),
    ]


def default_prescriptions(now: datetime | None = None) -> list[Prescription]:
    now = now or datetime.now()
    return [
        Prescription(id=101, patient_id=1, medication_name="Paracetamol", date_issued=now - timedelta(days=5)),
        Prescription(id=102, patient_id=1, medication_name="Ibuprofen", date_issued=now - timedelta(days=2)),
        Prescription(id=103, patient_id=2, medication_name="Amoxicillin", date_issued=now - timedelta(days=10)),
        Prescription(id=104, patient_id=3, medication_name="Cough Syrup", date_issued=now - timedelta(days=1)),
        Prescription(id=105, patient_id=2, medication_name="Vitamin C", date_issued=now - timedelta(days=3)),
    ]


class HealthRecordsManager:

    def __init__(
        self,
        patients: Repository[Patient],
        prescriptions: Repository[Prescription],
    ) -> None:
        self._patients = patients
        self._prescriptions = prescriptions
        self._prescription_map: dict[int, list[Prescription]] = {}

    @property
    def patients(self) -> Repository[Patient]:
        return self._patients

    @property
    def prescriptions(self) -> Repository[Prescription]:
        return self._prescriptions

    def seed_data(
        self,
        patients: list[Patient] | None = None,
        prescriptions: list[Prescription] | None = None,
    ) -> list[Outcome]:
        failures: list[Outcome] = []
        for patient in default_patients() if patients is None else patients:
            failures += self._try_add(self._patients, patient)
        for prescription in default_prescriptions() if prescriptions is None else prescriptions:
            failures += self._try_add(self._prescriptions, prescription)

        logger.info(
            "Health records seeded",
            patients=len(self._patients),
            prescriptions=len(self._prescriptions),
            failures=len(failures),
        )
        return failures

    def build_prescription_map(self) -> None:
        """Group prescriptions by patient ID, keeping repository order."""
        prescription_map: dict[int, list[Prescription]] = {}
        for prescription in self._prescriptions.list_all():
            prescription_map.setdefault(prescription.patient_id, []).append(prescription)
        self._prescription_map = prescription_map
        logger.debug("Prescription map built", patients=len(prescription_map))

    # --- Queries --------------------------------------------------------------

    def get_patient(self, patient_id: int) -> Patient:
        return self._patients.get_by_id(patient_id)

    def prescriptions_for(self, patient_id: int) -> list[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    # --- Presentation ---------------------------------------------------------

    def print_all_patients(self, echo: Callable[[str], None]) -> None:
        echo("All Patients:")
        for patient in self._patients.list_all():
            echo(str(patient))

    def print_prescriptions_for_patient(
        self, patient_id: int, echo: Callable[[str], None]
    ) -> None:
        prescriptions = self.prescriptions_for(patient_id)
        if not prescriptions:
            echo("No prescriptions found for this patient.")
            return
        echo(f"Prescriptions for Patient ID {patient_id}:")
        for prescription in prescriptions:
            echo(str(prescription))

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _try_add(repo: Repository, entity: Patient | Prescription) -> list[Outcome]:
        try:
            repo.add(entity)
        except DomainException as exc:
            logger.warning(
                "Seed record rejected",
                operation="seed",
                entity_id=entity.id,
                reason=str(exc),
            )
            return [Outcome.failure("seed", entity.id, exc)]
        return []
