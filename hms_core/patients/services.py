# hms_core/patients/services.py
from __future__ import annotations

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from hms_core.audit.services import AuditService
from hms_core.common.db import conflict_on_integrity
from hms_core.common.permissions import ROLE_PATIENT
from hms_core.iam.services import IdentityService
from hms_core.patients.models import Patient

DUPLICATE_EMAIL_MSG = "A patient with this email already exists."

PROFILE_FIELDS = (
    "full_name",
    "age",
    "gender",
    "phone_number",
    "address",
    "medical_history",
    "current_symptoms",
)


class PatientService:
    @staticmethod
    def _sync_login(patient: Patient, password: str | None) -> None:
        if not password:
            return
        if patient.user_id:
            IdentityService.set_password(patient.user, password)
            return
        if not patient.email:
            raise ValidationError({"email": "An email is required to create a login account."})

        patient.user = IdentityService.create_login_user(email=patient.email, password=password, role=ROLE_PATIENT)
        patient.save(update_fields=["user", "updated_at"])

    @staticmethod
    @transaction.atomic
    def register(
        *,
        email: str | None = None,
        password: str | None = None,
        image_path: str = "",
        actor_user_id: int | None = None,
        **profile,
    ) -> Patient:
        with conflict_on_integrity(DUPLICATE_EMAIL_MSG):
            patient = Patient.objects.create(
                email=email.lower() if email else None,
                image_path=image_path or "",
                **{k: v for k, v in profile.items() if k in PROFILE_FIELDS},
            )

        PatientService._sync_login(patient, password)

        AuditService.log(
            event_code="patient.registered",
            entity_type="Patient",
            entity_id=patient.id,
            actor_user_id=actor_user_id,
        )
        return patient

    @staticmethod
    @transaction.atomic
    def update(
        *,
        patient_id: int,
        email: str | None = None,
        password: str | None = None,
        image_path: str | None = None,
        actor_user_id: int | None = None,
        **profile,
    ) -> Patient:
        patient = Patient.objects.select_for_update().filter(id=patient_id, is_archived=False).first()
        if patient is None:
            raise NotFound("Patient not found.")

        for field in PROFILE_FIELDS:
            if field in profile:
                setattr(patient, field, profile[field])
        if email is not None:
            patient.email = email.lower() or None
        if image_path is not None:
            patient.image_path = image_path

        with conflict_on_integrity(DUPLICATE_EMAIL_MSG):
            patient.save()

        if patient.user_id and patient.email and patient.user.email != patient.email:
            patient.user.email = patient.email
            patient.user.username = patient.email
            with conflict_on_integrity("A login account with this email already exists."):
                patient.user.save(update_fields=["email", "username"])

        PatientService._sync_login(patient, password)

        AuditService.log(
            event_code="patient.updated",
            entity_type="Patient",
            entity_id=patient.id,
            actor_user_id=actor_user_id,
            metadata={"fields": sorted(k for k in profile if k in PROFILE_FIELDS)},
        )
        return patient
