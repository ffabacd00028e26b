import logging

from django.db import transaction
from django.db.models import ProtectedError

from rest_framework import status
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView

from medtrack_backend.core.responses import failure, success
from medtrack_backend.core.utils import parse_id_param
from medtrack_backend.patients.models import Patient
from medtrack_backend.patients.serializers import PatientReadSerializer, PatientWriteSerializer

logger = logging.getLogger(__name__)


def _get_patient(patient_id: int) -> Patient:
    patient = Patient.objects.filter(pk=patient_id).first()
    if patient is None:
        raise NotFound('Patient not found')
    return patient


class PatientCreateView(APIView):
    """POST /patient/create-patient"""

    def post(self, request, *args, **kwargs):
        serializer = PatientWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        patient = serializer.save()
        logger.info('Patient %s created', patient.pk)
        return success(
            status.HTTP_201_CREATED,
            'Patient Created Successfully',
            PatientReadSerializer(patient).data,
        )


class PatientListView(APIView):
    """GET /patient/patient-list"""

    def get(self, request, *args, **kwargs):
        patients = Patient.objects.all()
        return success(
            status.HTTP_200_OK,
            'Patients list retrieved successfully',
            PatientReadSerializer(patients, many=True).data,
        )


class PatientDetailView(APIView):
    """GET /patient/patient-details?id="""

    def get(self, request, *args, **kwargs):
        patient = _get_patient(parse_id_param(request))
        return success(
            status.HTTP_200_OK,
            'Patient retrieved successfully',
            PatientReadSerializer(patient).data,
        )


class PatientUpdateView(APIView):
    """PUT /patient/patient-update?id="""

    def put(self, request, *args, **kwargs):
        patient = _get_patient(parse_id_param(request))
        serializer = PatientWriteSerializer(patient, data=request.data)
        serializer.is_valid(raise_exception=True)
        patient = serializer.save()
        logger.info('Patient %s updated', patient.pk)
        return success(
            status.HTTP_200_OK,
            'Patient Updated successfully',
            PatientReadSerializer(patient).data,
        )


class PatientRemoveView(APIView):
    """DELETE /patient/patient-remove?id=

    Patients that still have treatment assignments cannot be removed.
    """

    def delete(self, request, *args, **kwargs):
        patient_id = parse_id_param(request)
        with transaction.atomic():
            patient = _get_patient(patient_id)
            try:
                patient.delete()
            except ProtectedError:
                logger.warning('Refused to delete patient %s: assignments reference it', patient_id)
                return failure(
                    status.HTTP_409_CONFLICT,
                    f'Patient with id {patient_id} still has treatment assignments',
                )
        logger.info('Patient %s deleted', patient_id)
        return success(status.HTTP_204_NO_CONTENT, 'Patient deleted successfully')
