# hms_core/doctors/selectors.py
from __future__ import annotations

from django.db.models import QuerySet
from rest_framework.exceptions import NotFound

from hms_core.doctors.models import Doctor


def doctors_qs() -> QuerySet[Doctor]:
    return (
        Doctor.objects.select_related("specialization")
        .prefetch_related("available_days")
        .order_by("-created_at", "-id")
    )


def get_doctor(*, doctor_id: int) -> Doctor:
    doctor = doctors_qs().filter(id=doctor_id).first()
    if doctor is None:
        raise NotFound("Doctor not found.")
    return doctor


def doctor_options(*, specialization_id: int | None = None) -> QuerySet[Doctor]:
    qs = Doctor.objects.active().only("id", "doctor_name", "specialization_id").order_by("doctor_name", "id")
    if specialization_id is not None:
        qs = qs.filter(specialization_id=specialization_id)
    return qs
