# hms_core/appointments/models.py
from django.db import models
from django.db.models import Q

from hms_core.common.models import ArchivableModel
from hms_core.doctors.models import Doctor
from hms_core.patients.models import Patient


class AppointmentStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    APPROVED = "Approved", "Approved"
    REJECTED = "Rejected", "Rejected"
    COMPLETED = "Completed", "Completed"
    CANCELLED = "Cancelled", "Cancelled"


# Statuses that hold the patient's day.
ACTIVE_STATUSES = (AppointmentStatus.PENDING, AppointmentStatus.APPROVED)


class Appointment(ArchivableModel):
    """
    A booked slot: (doctor, date, time) for one patient.
    Archived rows are kept for detail lookups and free their slot.
    """
    appointment_no = models.CharField(max_length=32, unique=True)

    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="appointments")
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name="appointments")

    appointment_date = models.DateField(db_index=True)
    appointment_time = models.TimeField()

    reason_for_visit = models.CharField(max_length=255)
    notes = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=16,
        choices=AppointmentStatus.choices,
        default=AppointmentStatus.PENDING,
        db_index=True,
    )
    is_paid = models.BooleanField(default=False)

    class Meta:
        db_table = "appointments_appointment"
        indexes = [
            models.Index(fields=["doctor", "appointment_date"]),
            models.Index(fields=["patient", "appointment_date"]),
            models.Index(fields=["status", "is_archived"]),
        ]
        constraints = [
            # One live booking per doctor slot.
            models.UniqueConstraint(
                fields=["doctor", "appointment_date", "appointment_time"],
                condition=Q(is_archived=False),
                name="uq_appointment_doctor_slot_active",
            ),
            # One Pending/Approved booking per patient per day.
            models.UniqueConstraint(
                fields=["patient", "appointment_date"],
                condition=Q(is_archived=False, status__in=["Pending", "Approved"]),
                name="uq_appointment_patient_day_active",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.appointment_no} ({self.status})"


class AppointmentSequence(models.Model):
    """
    Counter row for appointment numbers. Always read with SELECT ... FOR UPDATE.
    """
    name = models.CharField(max_length=64, unique=True)
    last_value = models.BigIntegerField(default=0)

    class Meta:
        db_table = "appointments_sequence"

    def __str__(self) -> str:
        return f"{self.name}={self.last_value}"
