from __future__ import annotations

from django.contrib import admin

from hms_core.appointments.models import Appointment, AppointmentSequence


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = (
        "appointment_no",
        "patient",
        "doctor",
        "appointment_date",
        "appointment_time",
        "status",
        "is_paid",
        "is_archived",
    )
    list_filter = ("status", "is_paid", "is_archived", "appointment_date")
    search_fields = ("appointment_no", "patient__full_name", "doctor__doctor_name")
    raw_id_fields = ("patient", "doctor")
    readonly_fields = ("appointment_no", "created_at", "updated_at")
    ordering = ("-appointment_date", "-id")


@admin.register(AppointmentSequence)
class AppointmentSequenceAdmin(admin.ModelAdmin):
    list_display = ("name", "last_value")
    readonly_fields = ("name", "last_value")
