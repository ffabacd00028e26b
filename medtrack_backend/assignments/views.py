"""
Assignment views.

Each view validates the request shape with a serializer, delegates to the
assignment service and translates service exceptions into enveloped
responses.

Routes (prefix /assignment/):
    POST    create-assignment
    GET     assignment-list
    GET     assignment-details?id=
    PUT     assignment-update?id=
    DELETE  assignment-remove?id=
    GET     remaining-days
    POST    patient-remaining-days
"""

import logging

from django.utils import timezone

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from medtrack_backend.assignments.exceptions import AssignmentError
from medtrack_backend.assignments.serializers import (
    AssignmentCreateSerializer,
    AssignmentSerializer,
    AssignmentUpdateSerializer,
    PatientIdentitySerializer,
)
from medtrack_backend.assignments.services import (
    create_assignment,
    delete_assignment,
    get_assignment,
    list_assignments,
    patient_remaining_days,
    remaining_days_report,
    update_assignment,
)
from medtrack_backend.core.responses import success
from medtrack_backend.core.utils import parse_id_param

logger = logging.getLogger(__name__)


def _error_response(exc: AssignmentError) -> Response:
    return Response(exc.to_dict(), status=exc.status_code)


def _serialize(assignment_or_list, *, many=False):
    context = {'today': timezone.localdate()}
    return AssignmentSerializer(assignment_or_list, many=many, context=context).data


class AssignmentCreateView(APIView):

    def post(self, request, *args, **kwargs):
        serializer = AssignmentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            assignment = create_assignment(
                patient_id=data['patientId'],
                medication_id=data['medicationId'],
                start_date=data['startDate'],
                number_of_days=data['numberOfDays'],
            )
        except AssignmentError as e:
            return _error_response(e)

        return success(
            status.HTTP_201_CREATED,
            'Assignment Created Successfully',
            _serialize(assignment),
        )


class AssignmentListView(APIView):

    def get(self, request, *args, **kwargs):
        return success(
            status.HTTP_200_OK,
            'Assignments list retrieved successfully',
            _serialize(list_assignments(), many=True),
        )


class AssignmentDetailView(APIView):

    def get(self, request, *args, **kwargs):
        assignment_id = parse_id_param(request)
        try:
            assignment = get_assignment(assignment_id)
        except AssignmentError as e:
            return _error_response(e)

        return success(
            status.HTTP_200_OK,
            'Assignment retrieved successfully',
            _serialize(assignment),
        )


class AssignmentUpdateView(APIView):
    """Only startDate and numberOfDays can change; the references are fixed."""

    def put(self, request, *args, **kwargs):
        assignment_id = parse_id_param(request)
        serializer = AssignmentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            assignment = update_assignment(
                assignment_id,
                start_date=data['startDate'],
                number_of_days=data['numberOfDays'],
            )
        except AssignmentError as e:
            return _error_response(e)

        return success(
            status.HTTP_200_OK,
            'Assignment Updated successfully',
            _serialize(assignment),
        )


class AssignmentRemoveView(APIView):

    def delete(self, request, *args, **kwargs):
        assignment_id = parse_id_param(request)
        try:
            delete_assignment(assignment_id)
        except AssignmentError as e:
            return _error_response(e)

        return success(status.HTTP_204_NO_CONTENT, 'Assignment deleted successfully')


class RemainingDaysView(APIView):
    """Remaining treatment days for every assignment."""

    def get(self, request, *args, **kwargs):
        rows = remaining_days_report(today=timezone.localdate())
        return success(
            status.HTTP_200_OK,
            'Remaining treatment days retrieved successfully',
            [row.to_dict() for row in rows],
        )


class PatientRemainingDaysView(APIView):
    """Remaining treatment days for a patient known only by name and date of birth."""

    def post(self, request, *args, **kwargs):
        serializer = PatientIdentitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        name = serializer.validated_data['name']

        rows = patient_remaining_days(
            name=name,
            date_of_birth=serializer.validated_data['dateOfBirth'],
            today=timezone.localdate(),
        )
        if not rows:
            logger.info('No assignments matched patient identity %r', name)
        return success(
            status.HTTP_200_OK,
            f'Remaining treatment days of {name} retrieved successfully',
            [row.to_dict() for row in rows],
        )
