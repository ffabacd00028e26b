from rest_framework import serializers

from medtrack_backend.patients.models import Patient


class PatientReadSerializer(serializers.ModelSerializer):
    """Read-only serializer with the API field names."""

    dateOfBirth = serializers.DateField(source='date_of_birth', read_only=True)

    class Meta:
        model = Patient
        fields = [
            'id',
            'name',
            'dateOfBirth',
        ]
        read_only_fields = fields


class PatientWriteSerializer(serializers.ModelSerializer):
    """Write serializer for create/update operations."""

    name = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Name is required',
            'blank': 'Name is required',
        },
    )
    dateOfBirth = serializers.DateField(
        source='date_of_birth',
        error_messages={
            'required': 'Date of birth is required',
            'invalid': 'Date of birth needs to be a valid ISO date string',
        },
    )

    class Meta:
        model = Patient
        fields = [
            'name',
            'dateOfBirth',
        ]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name is required')
        return value
