from __future__ import annotations

from django.contrib import admin

from hms_core.patients.models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("id", "full_name", "gender", "age", "email", "phone_number", "is_archived")
    list_filter = ("is_archived", "gender")
    search_fields = ("full_name", "email", "phone_number")
    raw_id_fields = ("user",)
    ordering = ("full_name",)
