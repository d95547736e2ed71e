# hms_core/medical_records/models.py
from django.db import models

from hms_core.appointments.models import Appointment
from hms_core.common.models import ArchivableModel
from hms_core.doctors.models import Doctor
from hms_core.patients.models import Patient


class MedicalRecord(ArchivableModel):
    """
    Clinical notes for one appointment. Patient and doctor mirror the appointment.
    """
    appointment = models.OneToOneField(Appointment, on_delete=models.PROTECT, related_name="medical_record")
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="medical_records")
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name="medical_records")

    # Vitals (free text: "120/80", "37.2 C")
    blood_pressure = models.CharField(max_length=50, blank=True, default="")
    temperature = models.CharField(max_length=50, blank=True, default="")
    heart_rate = models.CharField(max_length=50, blank=True, default="")
    weight = models.CharField(max_length=50, blank=True, default="")

    chief_complaint = models.TextField(blank=True, default="")
    diagnosis = models.TextField()
    treatment = models.TextField(blank=True, default="")
    treatment_plan = models.TextField(blank=True, default="")
    prescription = models.TextField(blank=True, default="")
    notes = models.TextField(blank=True, default="")

    follow_up_required = models.BooleanField(default=False)
    record_date = models.DateField(db_index=True)

    class Meta:
        db_table = "medical_records_record"
        indexes = [
            models.Index(fields=["patient", "record_date"]),
            models.Index(fields=["doctor", "record_date"]),
        ]

    def __str__(self) -> str:
        return f"MedicalRecord({self.appointment_id})"
