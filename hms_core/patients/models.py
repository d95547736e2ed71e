# hms_core/patients/models.py
from django.conf import settings
from django.db import models

from hms_core.common.models import ArchivableModel


class Gender(models.TextChoices):
    MALE = "Male", "Male"
    FEMALE = "Female", "Female"
    OTHER = "Other", "Other"


class Patient(ArchivableModel):
    full_name = models.CharField(max_length=255, db_index=True)
    age = models.PositiveIntegerField()
    gender = models.CharField(max_length=16, choices=Gender.choices)
    email = models.EmailField(max_length=255, unique=True, null=True, blank=True)
    phone_number = models.CharField(max_length=20)
    address = models.CharField(max_length=255, blank=True, default="")

    medical_history = models.TextField(blank=True, default="")
    current_symptoms = models.TextField(blank=True, default="")

    # Login account (PATIENT group).
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="patient_profile",
        null=True,
        blank=True,
    )

    image_path = models.CharField(max_length=512, blank=True, default="")

    class Meta:
        db_table = "patients_patient"

    def __str__(self) -> str:
        return self.full_name
