"""
Assignment service for MedTrack.

This service layer is the only entry point for treatment assignments. Views
delegate to these functions rather than touching the ORM directly.

Rules:
- ``create_assignment`` always runs referential validation before inserting
- Only ``start_date`` and ``number_of_days`` are writable after creation
- Remaining days are derived from the stored timing fields on every call,
  with "today" fixed once per call
- All exceptions are custom types from ``assignments.exceptions``
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from django.db import transaction
from django.utils import timezone

from medtrack_backend.assignments.exceptions import (
    AssignmentNotFound,
    InvalidAssignmentData,
)
from medtrack_backend.assignments.models import MAX_NUMBER_OF_DAYS, Assignment
from medtrack_backend.assignments.services.remaining_days import (
    TreatmentStatus,
    remaining_days,
    treatment_status,
)
from medtrack_backend.assignments.services.validation import validate_references

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Report rows
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RemainingDaysRow:
    """One line of a remaining-days report."""
    assignment_id: int
    patient_name: str
    medication_name: str
    remaining_days: int
    status: TreatmentStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            'assignmentId': self.assignment_id,
            'patientName': self.patient_name,
            'medicationName': self.medication_name,
            'remainingDays': self.remaining_days,
            'status': self.status.value,
        }


def _build_row(assignment: Assignment, today: date) -> RemainingDaysRow:
    remaining = remaining_days(today, assignment.start_date, assignment.number_of_days)
    return RemainingDaysRow(
        assignment_id=assignment.id,
        patient_name=assignment.patient.name,
        medication_name=assignment.medication.name,
        remaining_days=remaining,
        status=treatment_status(remaining),
    )


# ---------------------------------------------------------------------------
# Input checks (run before any store access)
# ---------------------------------------------------------------------------

def _check_id(value, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAssignmentData(f'{field} must be an integer', field=field)
    if value < 1:
        raise InvalidAssignmentData(f'{field} must be a positive integer', field=field)
    return value


def _check_timing(start_date, number_of_days) -> date:
    if isinstance(start_date, datetime):
        raise InvalidAssignmentData('startDate must be a calendar date without time of day', field='startDate')
    if isinstance(start_date, str):
        try:
            start_date = date.fromisoformat(start_date)
        except ValueError:
            raise InvalidAssignmentData('startDate needs to be a valid ISO date string', field='startDate')
    if not isinstance(start_date, date):
        raise InvalidAssignmentData('startDate needs to be a valid ISO date string', field='startDate')

    if isinstance(number_of_days, bool) or not isinstance(number_of_days, int):
        raise InvalidAssignmentData('numberOfDays must be an integer', field='numberOfDays')
    if number_of_days < 1:
        raise InvalidAssignmentData('numberOfDays must be at least 1', field='numberOfDays')
    if number_of_days > MAX_NUMBER_OF_DAYS:
        raise InvalidAssignmentData(
            f'numberOfDays must not exceed {MAX_NUMBER_OF_DAYS}', field='numberOfDays'
        )
    return start_date


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def create_assignment(
    *,
    patient_id: int,
    medication_id: int,
    start_date: date | str,
    number_of_days: int,
) -> Assignment:
    """
    Create a treatment assignment.

    Steps:
    1. Reject malformed input (``InvalidAssignmentData``)
    2. Resolve patient, then medication (``ReferenceNotFound``)
    3. Insert the assignment

    Steps 2 and 3 share one transaction; the referenced rows are locked on
    backends that support ``SELECT ... FOR UPDATE`` so a concurrent delete
    cannot slip between the check and the insert. Nothing is persisted when
    any step fails.

    Returns:
        The persisted assignment with ``patient`` and ``medication`` populated.
    """
    _check_id(patient_id, 'patientId')
    _check_id(medication_id, 'medicationId')
    start_date = _check_timing(start_date, number_of_days)

    with transaction.atomic():
        refs = validate_references(patient_id, medication_id, lock=True)
        assignment = Assignment.objects.create(
            patient=refs.patient,
            medication=refs.medication,
            start_date=start_date,
            number_of_days=number_of_days,
        )

    logger.info(
        'Assignment %s created (patient=%s, medication=%s, start=%s, days=%s)',
        assignment.id,
        patient_id,
        medication_id,
        start_date.isoformat(),
        number_of_days,
    )
    return assignment


def get_assignment(assignment_id: int) -> Assignment:
    """Fetch one assignment with relations or raise ``AssignmentNotFound``."""
    assignment = Assignment.objects.with_relations().filter(pk=assignment_id).first()
    if assignment is None:
        logger.warning('Assignment %s not found', assignment_id)
        raise AssignmentNotFound(assignment_id)
    return assignment


def list_assignments() -> list[Assignment]:
    """Every assignment with relations, ordered by id. No paging, no filters."""
    return list(Assignment.objects.with_relations())


def update_assignment(assignment_id: int, *, start_date: date | str, number_of_days: int) -> Assignment:
    """
    Overwrite the timing fields of an existing assignment.

    The patient and medication references are never written by this path.

    Raises:
        InvalidAssignmentData: malformed timing input (checked first)
        AssignmentNotFound: no assignment with ``assignment_id``
    """
    start_date = _check_timing(start_date, number_of_days)

    with transaction.atomic():
        exists = Assignment.objects.select_for_update().filter(pk=assignment_id).exists()
        if not exists:
            logger.warning('Update rejected: assignment %s not found', assignment_id)
            raise AssignmentNotFound(assignment_id)
        Assignment.objects.update_timing(assignment_id, start_date, number_of_days)

    logger.info(
        'Assignment %s timing updated (start=%s, days=%s)',
        assignment_id,
        start_date.isoformat(),
        number_of_days,
    )
    return get_assignment(assignment_id)


def delete_assignment(assignment_id: int) -> None:
    """
    Remove an assignment.

    The existence check is authoritative: it runs in the same transaction as
    the delete, and an unknown id aborts with ``AssignmentNotFound``.
    """
    with transaction.atomic():
        assignment = Assignment.objects.select_for_update().filter(pk=assignment_id).first()
        if assignment is None:
            logger.warning('Delete rejected: assignment %s not found', assignment_id)
            raise AssignmentNotFound(assignment_id)
        assignment.delete()

    logger.info('Assignment %s deleted', assignment_id)


def remaining_days_report(*, today: date | None = None) -> list[RemainingDaysRow]:
    """
    Remaining days for every assignment, one row per assignment.

    Args:
        today: Reference date; defaults to the current local date. It is
            resolved once, so every row is computed against the same day.
    """
    today = today or timezone.localdate()
    return [_build_row(a, today) for a in Assignment.objects.with_relations()]


def patient_remaining_days(
    *,
    name: str,
    date_of_birth: date,
    today: date | None = None,
) -> list[RemainingDaysRow]:
    """
    Remaining days for the assignments of the patient(s) identified by
    name and date of birth.

    Both attributes must match exactly. The pair is not unique, so rows from
    several patients may be returned; no match yields an empty list.
    """
    today = today or timezone.localdate()
    assignments = Assignment.objects.with_relations().for_patient_identity(name, date_of_birth)
    return [_build_row(a, today) for a in assignments]
