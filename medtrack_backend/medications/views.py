import logging

from django.db import transaction
from django.db.models import ProtectedError

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView

from medtrack_backend.core.responses import failure, success
from medtrack_backend.core.utils import parse_id_param
from medtrack_backend.medications.models import Medication
from medtrack_backend.medications.serializers import (
    MedicationReadSerializer,
    MedicationWriteSerializer,
)

logger = logging.getLogger(__name__)


def _get_medication(medication_id: int) -> Medication:
    medication = Medication.objects.filter(pk=medication_id).first()
    if medication is None:
        raise NotFound('Medication not found')
    return medication


class MedicationCreateView(APIView):
    """POST /medication/create-medication"""

    def post(self, request, *args, **kwargs):
        serializer = MedicationWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        medication = serializer.save()
        logger.info('Medication %s created', medication.pk)
        return success(
            status.HTTP_201_CREATED,
            'Medication Created Successfully',
            MedicationReadSerializer(medication).data,
        )


class MedicationListView(APIView):
    """GET /medication/medication-list"""

    def get(self, request, *args, **kwargs):
        return success(
            status.HTTP_200_OK,
            'Medications list retrieved successfully',
            MedicationReadSerializer(Medication.objects.all(), many=True).data,
        )


class MedicationDetailView(APIView):
    """GET /medication/medication-details?id="""

    def get(self, request, *args, **kwargs):
        medication = _get_medication(parse_id_param(request))
        return success(
            status.HTTP_200_OK,
            'Medication retrieved successfully',
            MedicationReadSerializer(medication).data,
        )


class MedicationUpdateView(APIView):
    """PUT /medication/medication-update?id="""

    def put(self, request, *args, **kwargs):
        medication = _get_medication(parse_id_param(request))
        serializer = MedicationWriteSerializer(medication, data=request.data)
        serializer.is_valid(raise_exception=True)
        medication = serializer.save()
        logger.info('Medication %s updated', medication.pk)
        return success(
            status.HTTP_200_OK,
            'Medication Updated successfully',
            MedicationReadSerializer(medication).data,
        )


class MedicationRemoveView(APIView):
    """DELETE /medication/medication-remove?id="""

    def delete(self, request, *args, **kwargs):
        medication_id = parse_id_param(request)
        with transaction.atomic():
            medication = _get_medication(medication_id)
            try:
                medication.delete()
            except ProtectedError:
                logger.warning(
                    'Refused to delete medication %s: assignments reference it',
                    medication_id,
                )
                return failure(
                    status.HTTP_409_CONFLICT,
                    f'Medication with id {medication_id} is still assigned to patients',
                )
        logger.info('Medication %s deleted', medication_id)
        return success(status.HTTP_204_NO_CONTENT, 'Medication deleted successfully')
