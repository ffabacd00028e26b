from django.db import models


class Medication(models.Model):
    """A prescribable medication.

    ``dosage`` and ``frequency`` are free text ("500mg", "twice daily"),
    not a structured schedule.
    """

    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=255)
    frequency = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'medication'
        ordering = ['id']
        verbose_name = 'Medication'
        verbose_name_plural = 'Medications'

    def __str__(self) -> str:
        return f"{self.name} {self.dosage}"
