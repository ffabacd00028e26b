"""
Assignments App Configuration
"""

from django.apps import AppConfig


class AssignmentsConfig(AppConfig):
    """Treatment assignments: patient + medication + start date + duration"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'medtrack_backend.assignments'
    verbose_name = 'Assignments (Treatment Plans)'
