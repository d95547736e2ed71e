# hms_core/appointments/services.py
from __future__ import annotations

import logging
from datetime import date, time
from typing import Iterable

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from hms_core.appointments.models import Appointment, AppointmentStatus
from hms_core.appointments.numbering import next_appointment_no
from hms_core.appointments.selectors import patient_has_active_booking, slot_taken
from hms_core.audit.services import AuditService
from hms_core.common.api.exceptions import ConflictError
from hms_core.common.archive import ArchiveService, RestoreResult
from hms_core.common.db import conflict_on_integrity
from hms_core.common.permissions import ROLE_DOCTOR, ROLE_PATIENT
from hms_core.doctors.models import Doctor
from hms_core.iam.identity import Identity
from hms_core.patients.models import Patient

logger = logging.getLogger(__name__)

SLOT_TAKEN_MSG = "This time slot is already booked for the selected doctor."
PATIENT_BUSY_MSG = "The patient already has a pending or approved appointment on this date."
BOOKING_CONFLICT_MSG = "The appointment conflicts with an existing booking."

DEFAULT_REJECT_REASON = "No reason provided"

# Allowed source statuses per target status. Nothing moves back to Pending.
TRANSITIONS: dict[str, tuple[str, ...]] = {
    AppointmentStatus.APPROVED: (AppointmentStatus.PENDING,),
    AppointmentStatus.REJECTED: (AppointmentStatus.PENDING, AppointmentStatus.APPROVED),
    AppointmentStatus.COMPLETED: (AppointmentStatus.APPROVED,),
    AppointmentStatus.CANCELLED: (AppointmentStatus.PENDING, AppointmentStatus.APPROVED),
}


def _audit(appt: Appointment, event_code: str, actor_user_id: int | None, **metadata) -> None:
    AuditService.log(
        event_code=event_code,
        entity_type="Appointment",
        entity_id=appt.id,
        actor_user_id=actor_user_id,
        metadata={"appointment_no": appt.appointment_no, **metadata},
    )


class AppointmentService:
    @staticmethod
    def _check_conflicts(*, patient_id: int, doctor_id: int, appointment_date: date, appointment_time: time) -> None:
        """
        Application-level pre-check for friendly messages. The partial unique
        constraints on Appointment are the actual guarantee.
        """
        if slot_taken(doctor_id=doctor_id, appointment_date=appointment_date, appointment_time=appointment_time):
            raise ConflictError(SLOT_TAKEN_MSG)
        if patient_has_active_booking(patient_id=patient_id, appointment_date=appointment_date):
            raise ConflictError(PATIENT_BUSY_MSG)

    @staticmethod
    def _locked(appointment_id: int) -> Appointment:
        appt = Appointment.objects.select_for_update().filter(id=appointment_id).first()
        if appt is None:
            raise NotFound("Appointment not found.")
        return appt

    @staticmethod
    @transaction.atomic
    def create(
        *,
        patient_id: int,
        doctor_id: int,
        appointment_date: date,
        appointment_time: time,
        reason_for_visit: str,
        notes: str = "",
        actor_user_id: int | None = None,
    ) -> Appointment:
        errors = {}
        if not Patient.objects.filter(id=patient_id).exists():
            errors["patient_id"] = "Patient does not exist."
        if not Doctor.objects.filter(id=doctor_id).exists():
            errors["doctor_id"] = "Doctor does not exist."
        if appointment_date < timezone.localdate():
            errors["appointment_date"] = "Appointment date must be today or later."
        if errors:
            raise ValidationError(errors)

        AppointmentService._check_conflicts(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
        )

        with conflict_on_integrity(BOOKING_CONFLICT_MSG):
            appt = Appointment.objects.create(
                appointment_no=next_appointment_no(),
                patient_id=patient_id,
                doctor_id=doctor_id,
                appointment_date=appointment_date,
                appointment_time=appointment_time,
                reason_for_visit=reason_for_visit,
                notes=notes or "",
                status=AppointmentStatus.PENDING,
                is_archived=False,
            )

        _audit(
            appt,
            "appointment.created",
            actor_user_id,
            doctor_id=doctor_id,
            patient_id=patient_id,
            slot=f"{appointment_date.isoformat()} {appointment_time.strftime('%H:%M')}",
        )
        logger.info("Appointment %s booked doctor=%s patient=%s", appt.appointment_no, doctor_id, patient_id)
        return appt

    @staticmethod
    @transaction.atomic
    def update_details(
        *,
        appointment_id: int,
        appointment_date: date,
        appointment_time: time,
        reason_for_visit: str,
        notes: str = "",
        actor_user_id: int | None = None,
    ) -> Appointment:
        """
        Reschedule / edit. Pre-checks are not re-run; the storage constraints
        still reject a collision with ConflictError.
        """
        appt = AppointmentService._locked(appointment_id)
        if appt.is_archived:
            raise NotFound("Appointment not found or archived.")

        previous = {
            "appointment_date": appt.appointment_date.isoformat(),
            "appointment_time": appt.appointment_time.strftime("%H:%M"),
        }

        appt.appointment_date = appointment_date
        appt.appointment_time = appointment_time
        appt.reason_for_visit = reason_for_visit
        appt.notes = notes or ""

        with conflict_on_integrity(BOOKING_CONFLICT_MSG):
            appt.save(
                update_fields=[
                    "appointment_date",
                    "appointment_time",
                    "reason_for_visit",
                    "notes",
                    "updated_at",
                ]
            )

        _audit(appt, "appointment.updated", actor_user_id, previous=previous)
        return appt

    @staticmethod
    def _ensure_owner(appt: Appointment, identity: Identity, *, roles: Iterable[str]) -> None:
        if identity.is_admin:
            return
        roles = set(roles)
        if identity.is_doctor and ROLE_DOCTOR in roles and appt.doctor_id == identity.doctor_id:
            return
        if identity.is_patient and ROLE_PATIENT in roles and appt.patient_id == identity.patient_id:
            return
        raise PermissionDenied("You can only act on your own appointments.")

    @staticmethod
    def _transition(
        *,
        appointment_id: int,
        identity: Identity,
        target: str,
        owner_roles: Iterable[str],
        notes: str | None = None,
    ) -> Appointment:
        appt = AppointmentService._locked(appointment_id)
        AppointmentService._ensure_owner(appt, identity, roles=owner_roles)

        if appt.is_archived:
            raise ConflictError("Archived appointments cannot change status.")

        allowed = TRANSITIONS[target]
        if appt.status not in allowed:
            raise ConflictError(f"Cannot change status from {appt.status} to {target}.")

        previous = appt.status
        appt.status = target
        fields = ["status", "updated_at"]
        if notes is not None:
            appt.notes = notes
            fields.append("notes")

        with conflict_on_integrity(BOOKING_CONFLICT_MSG):
            appt.save(update_fields=fields)

        _audit(
            appt,
            f"appointment.{target.lower()}",
            identity.user_id,
            previous_status=previous,
        )
        return appt

    @staticmethod
    @transaction.atomic
    def approve(*, appointment_id: int, identity: Identity) -> Appointment:
        return AppointmentService._transition(
            appointment_id=appointment_id,
            identity=identity,
            target=AppointmentStatus.APPROVED,
            owner_roles=(ROLE_DOCTOR,),
        )

    @staticmethod
    @transaction.atomic
    def reject(*, appointment_id: int, identity: Identity, reason: str | None = None) -> Appointment:
        return AppointmentService._transition(
            appointment_id=appointment_id,
            identity=identity,
            target=AppointmentStatus.REJECTED,
            owner_roles=(ROLE_DOCTOR,),
            notes=(reason or "").strip() or DEFAULT_REJECT_REASON,
        )

    @staticmethod
    @transaction.atomic
    def complete(*, appointment_id: int, identity: Identity) -> Appointment:
        return AppointmentService._transition(
            appointment_id=appointment_id,
            identity=identity,
            target=AppointmentStatus.COMPLETED,
            owner_roles=(ROLE_DOCTOR,),
        )

    @staticmethod
    @transaction.atomic
    def cancel(*, appointment_id: int, identity: Identity) -> Appointment:
        return AppointmentService._transition(
            appointment_id=appointment_id,
            identity=identity,
            target=AppointmentStatus.CANCELLED,
            owner_roles=(ROLE_PATIENT,),
        )

    @staticmethod
    def archive(*, appointment_id: int, actor_user_id: int | None = None) -> Appointment:
        return ArchiveService.archive(
            model=Appointment,
            pk=appointment_id,
            actor_user_id=actor_user_id,
            label="Appointment",
        )

    @staticmethod
    def restore(*, appointment_id: int, actor_user_id: int | None = None) -> RestoreResult:
        return ArchiveService.restore(
            model=Appointment,
            pk=appointment_id,
            actor_user_id=actor_user_id,
            label="Appointment",
        )

    @staticmethod
    @transaction.atomic
    def mark_paid(*, appointment_id: int, actor_user_id: int | None = None) -> Appointment:
        appt = AppointmentService._locked(appointment_id)
        if not appt.is_paid:
            appt.is_paid = True
            appt.save(update_fields=["is_paid", "updated_at"])
            _audit(appt, "appointment.paid", actor_user_id)
        return appt

    @staticmethod
    @transaction.atomic
    def clear_paid(*, appointment_id: int, actor_user_id: int | None = None) -> Appointment:
        appt = AppointmentService._locked(appointment_id)
        if appt.is_paid:
            appt.is_paid = False
            appt.save(update_fields=["is_paid", "updated_at"])
            _audit(appt, "appointment.unpaid", actor_user_id)
        return appt
