"""Patients App URLs.

Prefix: /patient/
Routes:
    POST    /patient/create-patient         - Create patient
    GET     /patient/patient-list           - List patients
    GET     /patient/patient-details?id=    - Retrieve patient
    PUT     /patient/patient-update?id=     - Update patient
    DELETE  /patient/patient-remove?id=     - Delete patient
"""

from django.urls import path

from medtrack_backend.patients.views import (
    PatientCreateView,
    PatientDetailView,
    PatientListView,
    PatientRemoveView,
    PatientUpdateView,
)

app_name = 'patients'

urlpatterns = [
    path('create-patient', PatientCreateView.as_view(), name='create'),
    path('patient-list', PatientListView.as_view(), name='list'),
    path('patient-details', PatientDetailView.as_view(), name='detail'),
    path('patient-update', PatientUpdateView.as_view(), name='update'),
    path('patient-remove', PatientRemoveView.as_view(), name='remove'),
]
