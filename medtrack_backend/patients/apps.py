"""
Patients App Configuration
"""

from django.apps import AppConfig


class PatientsConfig(AppConfig):
    """Patient record store"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'medtrack_backend.patients'
    verbose_name = 'Patients'
