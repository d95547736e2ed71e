# hms_core/medical_records/selectors.py
from __future__ import annotations

from django.db.models import QuerySet
from rest_framework.exceptions import NotFound

from hms_core.medical_records.models import MedicalRecord


def medical_records_qs() -> QuerySet[MedicalRecord]:
    return (
        MedicalRecord.objects.select_related("appointment", "patient", "doctor")
        .order_by("-record_date", "-id")
    )


def get_medical_record(*, record_id: int) -> MedicalRecord:
    record = medical_records_qs().filter(id=record_id).first()
    if record is None:
        raise NotFound("Medical record not found.")
    return record
