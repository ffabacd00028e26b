"""Medications App URLs.

Prefix: /medication/
Routes:
    POST    /medication/create-medication         - Create medication
    GET     /medication/medication-list           - List medications
    GET     /medication/medication-details?id=    - Retrieve medication
    PUT     /medication/medication-update?id=     - Update medication
    DELETE  /medication/medication-remove?id=     - Delete medication
"""

from django.urls import path

from medtrack_backend.medications.views import (
    MedicationCreateView,
    MedicationDetailView,
    MedicationListView,
    MedicationRemoveView,
    MedicationUpdateView,
)

app_name = 'medications'

urlpatterns = [
    path('create-medication', MedicationCreateView.as_view(), name='create'),
    path('medication-list', MedicationListView.as_view(), name='list'),
    path('medication-details', MedicationDetailView.as_view(), name='detail'),
    path('medication-update', MedicationUpdateView.as_view(), name='update'),
    path('medication-remove', MedicationRemoveView.as_view(), name='remove'),
]
