"""
Assignments Services Module.

This package contains the service-layer logic for treatment assignments:
- remaining_days: Remaining-days calculator and treatment status classifier
- validation: Referential validation of patient/medication ids
- assignments: Assignment lifecycle operations and remaining-days reports
"""

from medtrack_backend.assignments.services.assignments import (
    RemainingDaysRow,
    create_assignment,
    delete_assignment,
    get_assignment,
    list_assignments,
    patient_remaining_days,
    remaining_days_report,
    update_assignment,
)
from medtrack_backend.assignments.services.remaining_days import (
    TreatmentStatus,
    remaining_days,
    to_calendar_date,
    treatment_status,
)
from medtrack_backend.assignments.services.validation import (
    ValidatedReferences,
    validate_references,
)

__all__ = [
    'RemainingDaysRow',
    'TreatmentStatus',
    'ValidatedReferences',
    'create_assignment',
    'delete_assignment',
    'get_assignment',
    'list_assignments',
    'patient_remaining_days',
    'remaining_days',
    'remaining_days_report',
    'to_calendar_date',
    'treatment_status',
    'update_assignment',
    'validate_references',
]
