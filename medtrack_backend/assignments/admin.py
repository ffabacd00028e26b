from django.contrib import admin
from django.utils import timezone

from medtrack_backend.assignments.models import Assignment
from medtrack_backend.assignments.services.remaining_days import remaining_days


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ("id", "patient", "medication", "start_date", "number_of_days", "remaining_display")
    list_filter = ("start_date",)
    search_fields = ("patient__name", "medication__name")
    ordering = ("id",)
    list_select_related = ("patient", "medication")
    readonly_fields = ("id", "created_at", "updated_at")

    def get_readonly_fields(self, request, obj=None):
        # References are fixed once the assignment exists.
        if obj is not None:
            return self.readonly_fields + ("patient", "medication")
        return self.readonly_fields

    def remaining_display(self, obj):
        return remaining_days(timezone.localdate(), obj.start_date, obj.number_of_days)
    remaining_display.short_description = "Remaining days"
