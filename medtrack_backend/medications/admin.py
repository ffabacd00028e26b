from django.contrib import admin

from medtrack_backend.medications.models import Medication


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "dosage", "frequency")
    search_fields = ("name",)
    ordering = ("name", "id")
    readonly_fields = ("id", "created_at", "updated_at")
