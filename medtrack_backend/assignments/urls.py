"""Assignments App URLs.

Prefix: /assignment/
Routes:
    POST    /assignment/create-assignment          - Create assignment (validates references)
    GET     /assignment/assignment-list            - List assignments with patient/medication
    GET     /assignment/assignment-details?id=     - Retrieve assignment
    PUT     /assignment/assignment-update?id=      - Update start date / number of days
    DELETE  /assignment/assignment-remove?id=      - Delete assignment
    GET     /assignment/remaining-days             - Remaining days for all assignments
    POST    /assignment/patient-remaining-days     - Remaining days for one patient (name + DOB)
"""

from django.urls import path

from medtrack_backend.assignments.views import (
    AssignmentCreateView,
    AssignmentDetailView,
    AssignmentListView,
    AssignmentRemoveView,
    AssignmentUpdateView,
    PatientRemainingDaysView,
    RemainingDaysView,
)

app_name = 'assignments'

urlpatterns = [
    path('create-assignment', AssignmentCreateView.as_view(), name='create'),
    path('assignment-list', AssignmentListView.as_view(), name='list'),
    path('assignment-details', AssignmentDetailView.as_view(), name='detail'),
    path('assignment-update', AssignmentUpdateView.as_view(), name='update'),
    path('assignment-remove', AssignmentRemoveView.as_view(), name='remove'),
    path('remaining-days', RemainingDaysView.as_view(), name='remaining_days'),
    path('patient-remaining-days', PatientRemainingDaysView.as_view(), name='patient_remaining_days'),
]
