# hms_core/medical_records/services.py
from __future__ import annotations

from datetime import date

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from hms_core.appointments.models import Appointment
from hms_core.audit.services import AuditService
from hms_core.common.api.exceptions import ConflictError
from hms_core.common.db import conflict_on_integrity
from hms_core.medical_records.models import MedicalRecord

DUPLICATE_RECORD_MSG = "A medical record already exists for this appointment."

CLINICAL_FIELDS = (
    "blood_pressure",
    "temperature",
    "heart_rate",
    "weight",
    "chief_complaint",
    "diagnosis",
    "treatment",
    "treatment_plan",
    "prescription",
    "notes",
    "follow_up_required",
    "record_date",
)


class MedicalRecordService:
    @staticmethod
    @transaction.atomic
    def create(
        *,
        appointment_id: int,
        patient_id: int,
        doctor_id: int,
        diagnosis: str,
        record_date: date,
        actor_user_id: int | None = None,
        **clinical,
    ) -> MedicalRecord:
        appt = Appointment.objects.filter(id=appointment_id).first()
        if appt is None:
            raise ValidationError({"appointment_id": "Appointment does not exist."})

        errors = {}
        if appt.patient_id != patient_id:
            errors["patient_id"] = "Patient does not match the appointment."
        if appt.doctor_id != doctor_id:
            errors["doctor_id"] = "Doctor does not match the appointment."
        if errors:
            raise ValidationError(errors)

        if MedicalRecord.objects.filter(appointment_id=appointment_id).exists():
            raise ConflictError(DUPLICATE_RECORD_MSG)

        with conflict_on_integrity(DUPLICATE_RECORD_MSG):
            record = MedicalRecord.objects.create(
                appointment=appt,
                patient_id=patient_id,
                doctor_id=doctor_id,
                diagnosis=diagnosis,
                record_date=record_date,
                **{k: v for k, v in clinical.items() if k in CLINICAL_FIELDS},
            )

        AuditService.log(
            event_code="medical_record.created",
            entity_type="MedicalRecord",
            entity_id=record.id,
            actor_user_id=actor_user_id,
            metadata={"appointment_id": appt.id},
        )
        return record

    @staticmethod
    @transaction.atomic
    def update(*, record_id: int, actor_user_id: int | None = None, **changes) -> MedicalRecord:
        record = MedicalRecord.objects.select_for_update().filter(id=record_id, is_archived=False).first()
        if record is None:
            raise NotFound("Medical record not found.")

        fields = [k for k in CLINICAL_FIELDS if k in changes]
        for k in fields:
            setattr(record, k, changes[k])

        if fields:
            record.save(update_fields=fields + ["updated_at"])

        AuditService.log(
            event_code="medical_record.updated",
            entity_type="MedicalRecord",
            entity_id=record.id,
            actor_user_id=actor_user_id,
            metadata={"fields": fields},
        )
        return record
