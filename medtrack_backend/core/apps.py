"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Shared API plumbing: health check, response envelope, error handling."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'medtrack_backend.core'
    verbose_name = 'Core'
