"""
Medications App Configuration
"""

from django.apps import AppConfig


class MedicationsConfig(AppConfig):
    """Medication record store"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'medtrack_backend.medications'
    verbose_name = 'Medications'
