"""Treatment assignment model and its store queries.

An assignment links exactly one patient and one medication with a start date
and a duration in days. After creation only the timing fields
(``start_date``, ``number_of_days``) may change; the patient and medication
references are fixed for the life of the record.

Remaining days and treatment status are derived on every read
(see ``services.remaining_days``) and never stored.
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from medtrack_backend.medications.models import Medication
from medtrack_backend.patients.models import Patient

# Upper bound of a PositiveIntegerField column on every supported backend.
MAX_NUMBER_OF_DAYS = 2147483647


class AssignmentQuerySet(models.QuerySet):
    """Store operations used by the assignment service."""

    def with_relations(self):
        """Join in the referenced patient and medication rows."""
        return self.select_related('patient', 'medication')

    def for_patient_identity(self, name, date_of_birth):
        """Assignments whose patient matches name AND date of birth exactly."""
        return self.filter(patient__name=name, patient__date_of_birth=date_of_birth)

    def update_timing(self, assignment_id, start_date, number_of_days) -> int:
        """Overwrite the two timing columns of one assignment.

        Returns the number of rows written (0 when the id is unknown).
        """
        return self.filter(pk=assignment_id).update(
            start_date=start_date,
            number_of_days=number_of_days,
            updated_at=timezone.now(),
        )


class Assignment(models.Model):
    """A patient's course of one medication over ``number_of_days`` days."""

    patient = models.ForeignKey(
        Patient,
        on_delete=models.PROTECT,
        related_name='assignments',
    )
    medication = models.ForeignKey(
        Medication,
        on_delete=models.PROTECT,
        related_name='assignments',
    )
    start_date = models.DateField()
    number_of_days = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AssignmentQuerySet.as_manager()

    class Meta:
        db_table = 'assignment'
        ordering = ['id']
        verbose_name = 'Assignment'
        verbose_name_plural = 'Assignments'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(number_of_days__gte=1),
                name='assignment_number_of_days_gte_1',
            ),
        ]

    def __str__(self) -> str:
        return (
            f"Assignment #{self.pk}: patient={self.patient_id} "
            f"medication={self.medication_id} from {self.start_date} for {self.number_of_days}d"
        )
