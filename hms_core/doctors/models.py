# hms_core/doctors/models.py
from django.conf import settings
from django.db import models

from hms_core.common.models import ArchivableModel
from hms_core.specializations.models import Specialization


class Weekday(models.TextChoices):
    MONDAY = "Monday", "Monday"
    TUESDAY = "Tuesday", "Tuesday"
    WEDNESDAY = "Wednesday", "Wednesday"
    THURSDAY = "Thursday", "Thursday"
    FRIDAY = "Friday", "Friday"
    SATURDAY = "Saturday", "Saturday"
    SUNDAY = "Sunday", "Sunday"


class Doctor(ArchivableModel):
    doctor_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=255, unique=True, null=True, blank=True)
    qualifications = models.CharField(max_length=255)
    years_of_experience = models.PositiveIntegerField(default=0)
    consultation_fee = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    specialization = models.ForeignKey(
        Specialization,
        on_delete=models.PROTECT,
        related_name="doctors",
    )

    # Login account (DOCTOR group). Optional: doctors can exist without one.
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name="doctor_profile",
        null=True,
        blank=True,
    )

    image_path = models.CharField(max_length=512, blank=True, default="")

    class Meta:
        db_table = "doctors_doctor"
        indexes = [
            models.Index(fields=["specialization", "is_archived"]),
        ]

    def __str__(self) -> str:
        return self.doctor_name

    @property
    def available_day_names(self) -> list[str]:
        return [d.day_of_week for d in self.available_days.all()]


class DoctorAvailableDay(models.Model):
    doctor = models.ForeignKey(Doctor, on_delete=models.CASCADE, related_name="available_days")
    day_of_week = models.CharField(max_length=16, choices=Weekday.choices)
    position = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "doctors_available_day"
        ordering = ("position", "id")
        constraints = [
            models.UniqueConstraint(fields=["doctor", "day_of_week"], name="uq_doctor_available_day"),
        ]

    def __str__(self) -> str:
        return f"{self.doctor_id}:{self.day_of_week}"
