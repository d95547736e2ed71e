# hms_core/patients/selectors.py
from __future__ import annotations

from django.db.models import QuerySet
from rest_framework.exceptions import NotFound

from hms_core.patients.models import Patient


def patients_qs() -> QuerySet[Patient]:
    return Patient.objects.all().order_by("-created_at", "-id")


def get_patient(*, patient_id: int) -> Patient:
    patient = Patient.objects.filter(id=patient_id).first()
    if patient is None:
        raise NotFound("Patient not found.")
    return patient


def patient_options() -> QuerySet[Patient]:
    return Patient.objects.active().only("id", "full_name").order_by("full_name", "id")
