# hms_core/appointments/filters.py
from __future__ import annotations

import django_filters
from django.db.models import CharField
from django.db.models.functions import Cast

from hms_core.appointments.models import Appointment, AppointmentStatus
from hms_core.common.filters import ArchivableFilterSet


class AppointmentFilter(ArchivableFilterSet):
    status = django_filters.ChoiceFilter(choices=AppointmentStatus.choices)
    doctor = django_filters.NumberFilter(field_name="doctor_id")
    patient = django_filters.NumberFilter(field_name="patient_id")
    date = django_filters.DateFilter(field_name="appointment_date")

    # search: patient name, doctor name, date string (YYYY-MM-DD), status
    search_fields = ("patient__full_name", "doctor__doctor_name", "date_text", "status")

    class Meta:
        model = Appointment
        fields = ["archived", "search", "status", "doctor", "patient", "date"]

    def search_queryset(self, queryset):
        return queryset.annotate(date_text=Cast("appointment_date", output_field=CharField()))
