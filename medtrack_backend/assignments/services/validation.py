"""
Referential validation for new assignments.

The patient is looked up first; a missing patient short-circuits before the
medication is queried, so the error always names the first missing reference.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from medtrack_backend.assignments.exceptions import ReferenceNotFound
from medtrack_backend.medications.models import Medication
from medtrack_backend.patients.models import Patient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedReferences:
    patient: Patient
    medication: Medication


def validate_references(patient_id: int, medication_id: int, *, lock: bool = False) -> ValidatedReferences:
    """Resolve both references or raise ``ReferenceNotFound``.

    Args:
        patient_id: Patient primary key
        medication_id: Medication primary key
        lock: Take row locks on the referenced rows (``SELECT ... FOR UPDATE``).
            Only valid inside ``transaction.atomic()``; ignored by SQLite.

    No side effects besides the optional locks.
    """
    patients = Patient.objects.all()
    medications = Medication.objects.all()
    if lock:
        patients = patients.select_for_update()
        medications = medications.select_for_update()

    patient = patients.filter(pk=patient_id).first()
    if patient is None:
        logger.warning('Assignment rejected: patient %s does not exist', patient_id)
        raise ReferenceNotFound('patient', patient_id)

    medication = medications.filter(pk=medication_id).first()
    if medication is None:
        logger.warning('Assignment rejected: medication %s does not exist', medication_id)
        raise ReferenceNotFound('medication', medication_id)

    return ValidatedReferences(patient=patient, medication=medication)
