"""MedTrack URL Configuration.

Routes:
    /api/health/   - Health check (core)
    /patient/      - Patient records (patients)
    /medication/   - Medication records (medications)
    /assignment/   - Treatment assignments and remaining-days reports (assignments)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text liveness response for the bare host."""
    return HttpResponse("MedTrack backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("medtrack_backend.core.urls")),
    path("patient/", include("medtrack_backend.patients.urls")),
    path("medication/", include("medtrack_backend.medications.urls")),
    path("assignment/", include("medtrack_backend.assignments.urls")),
]
