from __future__ import annotations

from django.contrib import admin

from hms_core.medical_records.models import MedicalRecord


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ("id", "appointment", "patient", "doctor", "record_date", "follow_up_required", "is_archived")
    list_filter = ("is_archived", "follow_up_required", "record_date")
    search_fields = ("diagnosis", "patient__full_name", "doctor__doctor_name", "appointment__appointment_no")
    raw_id_fields = ("appointment", "patient", "doctor")
    ordering = ("-record_date",)
