from __future__ import annotations

from django.apps import AppConfig


class SpecializationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hms_core.specializations"
