"""Serializers for treatment assignments.

Field names follow the JSON contract of the frontend (camelCase).
"""

from django.utils import timezone

from rest_framework import serializers

from medtrack_backend.assignments.models import MAX_NUMBER_OF_DAYS, Assignment
from medtrack_backend.assignments.services.remaining_days import remaining_days, treatment_status
from medtrack_backend.medications.serializers import MedicationReadSerializer
from medtrack_backend.patients.serializers import PatientReadSerializer


def _id_field(label: str) -> serializers.IntegerField:
    return serializers.IntegerField(
        min_value=1,
        error_messages={
            'required': f'{label} is required',
            'null': f'{label} is required',
            'invalid': f'{label} Id must be an integer',
            'min_value': f'{label} Id must be a positive integer',
        },
    )


def _start_date_field() -> serializers.DateField:
    return serializers.DateField(
        error_messages={
            'required': 'Start date is required',
            'null': 'Start date is required',
            'invalid': 'Start date needs to be a valid ISO date string',
            'datetime': 'Start date needs to be a valid ISO date string',
        },
    )


def _number_of_days_field() -> serializers.IntegerField:
    return serializers.IntegerField(
        min_value=1,
        max_value=MAX_NUMBER_OF_DAYS,
        error_messages={
            'required': 'Number Of Days is required',
            'null': 'Number Of Days is required',
            'invalid': 'Number Of Days must be an integer',
            'min_value': 'Number Of Days must be at least 1',
            'max_value': f'Number Of Days must not exceed {MAX_NUMBER_OF_DAYS}',
        },
    )


class AssignmentCreateSerializer(serializers.Serializer):
    patientId = _id_field('Patient')
    medicationId = _id_field('Medication')
    startDate = _start_date_field()
    numberOfDays = _number_of_days_field()


class AssignmentUpdateSerializer(serializers.Serializer):
    """Timing fields only; patient/medication keys in the payload are ignored."""

    startDate = _start_date_field()
    numberOfDays = _number_of_days_field()


class PatientIdentitySerializer(serializers.Serializer):
    name = serializers.CharField(
        error_messages={'required': 'Name is required', 'blank': 'Name is required'},
    )
    dateOfBirth = serializers.DateField(
        error_messages={
            'required': 'Date of birth is required',
            'invalid': 'Date of birth needs to be a valid ISO date string',
        },
    )


class AssignmentSerializer(serializers.ModelSerializer):
    """Assignment with patient and medication embedded.

    ``remainingDays`` and ``status`` are derived against ``context['today']``
    (current local date when absent).
    """

    startDate = serializers.DateField(source='start_date', read_only=True)
    numberOfDays = serializers.IntegerField(source='number_of_days', read_only=True)
    patient = PatientReadSerializer(read_only=True)
    medication = MedicationReadSerializer(read_only=True)
    remainingDays = serializers.SerializerMethodField()
    status = serializers.SerializerMethodField()

    class Meta:
        model = Assignment
        fields = [
            'id',
            'startDate',
            'numberOfDays',
            'patient',
            'medication',
            'remainingDays',
            'status',
        ]
        read_only_fields = fields

    def _today(self):
        today = self.context.get('today')
        if today is None:
            today = timezone.localdate()
            self.context['today'] = today
        return today

    def get_remainingDays(self, obj) -> int:
        return remaining_days(self._today(), obj.start_date, obj.number_of_days)

    def get_status(self, obj) -> str:
        return treatment_status(self.get_remainingDays(obj)).value
