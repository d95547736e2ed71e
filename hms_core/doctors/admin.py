from __future__ import annotations

from django.contrib import admin

from hms_core.doctors.models import Doctor, DoctorAvailableDay


class DoctorAvailableDayInline(admin.TabularInline):
    model = DoctorAvailableDay
    extra = 0


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ("id", "doctor_name", "email", "specialization", "consultation_fee", "is_archived")
    list_filter = ("is_archived", "specialization")
    search_fields = ("doctor_name", "email", "qualifications")
    raw_id_fields = ("user",)
    inlines = [DoctorAvailableDayInline]
    ordering = ("doctor_name",)
