from rest_framework import serializers

from medtrack_backend.medications.models import Medication


class MedicationReadSerializer(serializers.ModelSerializer):

    class Meta:
        model = Medication
        fields = [
            'id',
            'name',
            'dosage',
            'frequency',
        ]
        read_only_fields = fields


def _required_text(label: str) -> serializers.CharField:
    return serializers.CharField(
        max_length=255,
        error_messages={
            'required': f'{label} is required',
            'blank': f'{label} is required',
            'invalid': f'{label} must be String Value',
        },
    )


class MedicationWriteSerializer(serializers.ModelSerializer):
    """Create/update payload: every field is a required non-empty string."""

    name = _required_text('Name')
    dosage = _required_text('Dosage')
    frequency = _required_text('Frequency')

    class Meta:
        model = Medication
        fields = [
            'name',
            'dosage',
            'frequency',
        ]
