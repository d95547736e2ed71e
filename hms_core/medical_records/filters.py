from __future__ import annotations

import django_filters

from hms_core.common.filters import ArchivableFilterSet
from hms_core.medical_records.models import MedicalRecord


class MedicalRecordFilter(ArchivableFilterSet):
    patient = django_filters.NumberFilter(field_name="patient_id")
    doctor = django_filters.NumberFilter(field_name="doctor_id")

    search_fields = ("patient__full_name", "doctor__doctor_name", "diagnosis", "appointment__appointment_no")

    class Meta:
        model = MedicalRecord
        fields = ["archived", "search", "patient", "doctor"]
