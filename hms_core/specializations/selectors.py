# hms_core/specializations/selectors.py
from __future__ import annotations

from django.db.models import QuerySet
from rest_framework.exceptions import NotFound

from hms_core.specializations.models import Specialization


def specializations_qs() -> QuerySet[Specialization]:
    return Specialization.objects.all().order_by("-created_at", "-id")


def get_specialization(*, specialization_id: int) -> Specialization:
    spec = Specialization.objects.filter(id=specialization_id).first()
    if spec is None:
        raise NotFound("Specialization not found.")
    return spec


def specialization_options() -> QuerySet[Specialization]:
    return Specialization.objects.active().only("id", "name").order_by("name")
