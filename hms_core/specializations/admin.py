from __future__ import annotations

from django.contrib import admin

from hms_core.specializations.models import Specialization


@admin.register(Specialization)
class SpecializationAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "is_archived", "created_at")
    list_filter = ("is_archived",)
    search_fields = ("name", "description")
    ordering = ("name",)
