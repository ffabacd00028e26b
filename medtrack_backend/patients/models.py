from django.db import models


class Patient(models.Model):
    """Patient master record.

    Assignments reference patients by primary key. The pair
    (name, date_of_birth) is the demographic identity used by the
    remaining-days lookup for callers that do not know the id; it is not
    unique, so that lookup may match several patients.
    """

    name = models.CharField(max_length=255)
    date_of_birth = models.DateField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patient'
        ordering = ['id']
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'
        indexes = [
            models.Index(fields=['name', 'date_of_birth'], name='patient_identity_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.date_of_birth.isoformat()})"
