# hms_core/doctors/services.py
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from django.db import transaction
from rest_framework.exceptions import NotFound, ValidationError

from hms_core.audit.services import AuditService
from hms_core.common.db import conflict_on_integrity
from hms_core.common.permissions import ROLE_DOCTOR
from hms_core.doctors.models import Doctor, DoctorAvailableDay, Weekday
from hms_core.iam.services import IdentityService
from hms_core.specializations.models import Specialization

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MSG = "A doctor with this email already exists."

_WEEKDAYS = {w.value.lower(): w.value for w in Weekday}


def normalize_days(days: Iterable[str]) -> list[str]:
    """
    Title-cases weekday names and drops duplicates, keeping first-seen order.
    """
    out: list[str] = []
    bad: list[str] = []
    for raw in days or []:
        key = str(raw).strip().lower()
        name = _WEEKDAYS.get(key)
        if name is None:
            bad.append(str(raw))
        elif name not in out:
            out.append(name)

    if bad:
        raise ValidationError({"available_days": [f"Unknown weekday: {b}" for b in bad]})
    if not out:
        raise ValidationError({"available_days": "At least one available day is required."})
    return out


class DoctorService:
    @staticmethod
    def _specialization(specialization_id: int) -> Specialization:
        spec = Specialization.objects.filter(id=specialization_id).first()
        if spec is None:
            raise ValidationError({"specialization_id": "Specialization does not exist."})
        return spec

    @staticmethod
    def _sync_days(doctor: Doctor, days: list[str]) -> None:
        DoctorAvailableDay.objects.filter(doctor=doctor).delete()
        DoctorAvailableDay.objects.bulk_create(
            [DoctorAvailableDay(doctor=doctor, day_of_week=d, position=i) for i, d in enumerate(days)]
        )

    @staticmethod
    def _sync_login(doctor: Doctor, password: str | None) -> None:
        if not password:
            return
        if doctor.user_id:
            IdentityService.set_password(doctor.user, password)
            return
        if not doctor.email:
            raise ValidationError({"email": "An email is required to create a login account."})

        doctor.user = IdentityService.create_login_user(email=doctor.email, password=password, role=ROLE_DOCTOR)
        doctor.save(update_fields=["user", "updated_at"])

    @staticmethod
    @transaction.atomic
    def create(
        *,
        doctor_name: str,
        specialization_id: int,
        qualifications: str,
        years_of_experience: int = 0,
        consultation_fee: Decimal = Decimal("0.00"),
        available_days: Iterable[str] = (),
        email: str | None = None,
        password: str | None = None,
        image_path: str = "",
        actor_user_id: int | None = None,
    ) -> Doctor:
        spec = DoctorService._specialization(specialization_id)
        days = normalize_days(available_days)

        with conflict_on_integrity(DUPLICATE_EMAIL_MSG):
            doctor = Doctor.objects.create(
                doctor_name=doctor_name,
                email=(email or None) and email.lower(),
                specialization=spec,
                qualifications=qualifications,
                years_of_experience=years_of_experience,
                consultation_fee=consultation_fee,
                image_path=image_path or "",
            )

        DoctorService._sync_days(doctor, days)
        DoctorService._sync_login(doctor, password)

        AuditService.log(
            event_code="doctor.created",
            entity_type="Doctor",
            entity_id=doctor.id,
            actor_user_id=actor_user_id,
            metadata={"specialization_id": spec.id, "available_days": days},
        )
        return doctor

    @staticmethod
    @transaction.atomic
    def update(
        *,
        doctor_id: int,
        doctor_name: str,
        specialization_id: int,
        qualifications: str,
        years_of_experience: int = 0,
        consultation_fee: Decimal = Decimal("0.00"),
        available_days: Iterable[str] = (),
        email: str | None = None,
        password: str | None = None,
        image_path: str | None = None,
        actor_user_id: int | None = None,
    ) -> Doctor:
        doctor = Doctor.objects.select_for_update().filter(id=doctor_id, is_archived=False).first()
        if doctor is None:
            raise NotFound("Doctor not found.")

        spec = DoctorService._specialization(specialization_id)
        days = normalize_days(available_days)

        doctor.doctor_name = doctor_name
        doctor.specialization = spec
        doctor.qualifications = qualifications
        doctor.years_of_experience = years_of_experience
        doctor.consultation_fee = consultation_fee
        if email is not None:
            doctor.email = email.lower() or None
        if image_path is not None:
            doctor.image_path = image_path

        with conflict_on_integrity(DUPLICATE_EMAIL_MSG):
            doctor.save()

        if doctor.user_id and doctor.email and doctor.user.email != doctor.email:
            doctor.user.email = doctor.email
            doctor.user.username = doctor.email
            with conflict_on_integrity("A login account with this email already exists."):
                doctor.user.save(update_fields=["email", "username"])

        DoctorService._sync_days(doctor, days)
        DoctorService._sync_login(doctor, password)

        AuditService.log(
            event_code="doctor.updated",
            entity_type="Doctor",
            entity_id=doctor.id,
            actor_user_id=actor_user_id,
            metadata={"available_days": days},
        )
        return doctor
