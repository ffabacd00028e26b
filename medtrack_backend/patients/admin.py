from django.contrib import admin

from medtrack_backend.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "date_of_birth", "created_at")
    search_fields = ("name",)
    ordering = ("id",)
    list_per_page = 50
    readonly_fields = ("id", "created_at", "updated_at")
