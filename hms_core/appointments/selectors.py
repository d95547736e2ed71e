# hms_core/appointments/selectors.py
from __future__ import annotations

from datetime import date, time

from django.db.models import QuerySet
from rest_framework.exceptions import NotFound

from hms_core.appointments.models import ACTIVE_STATUSES, Appointment
from hms_core.iam.identity import Identity


def appointments_qs() -> QuerySet[Appointment]:
    return (
        Appointment.objects.select_related("patient", "doctor", "doctor__specialization")
        .order_by("-appointment_date", "-id")
    )


def get_appointment(*, appointment_id: int) -> Appointment:
    """
    Detail lookup. Not archive-filtered: archived appointments stay reachable by id.
    """
    appt = (
        appointments_qs()
        .prefetch_related("payments")
        .select_related("medical_record")
        .filter(id=appointment_id)
        .first()
    )
    if appt is None:
        raise NotFound("Appointment not found.")
    return appt


def appointments_for_identity(*, identity: Identity) -> QuerySet[Appointment]:
    qs = appointments_qs().filter(is_archived=False)
    if identity.is_doctor:
        return qs.filter(doctor_id=identity.doctor_id)
    if identity.is_patient:
        return qs.filter(patient_id=identity.patient_id)
    return qs


def slot_taken(*, doctor_id: int, appointment_date: date, appointment_time: time, exclude_id: int | None = None) -> bool:
    qs = Appointment.objects.active().filter(
        doctor_id=doctor_id,
        appointment_date=appointment_date,
        appointment_time=appointment_time,
    )
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    return qs.exists()


def patient_has_active_booking(*, patient_id: int, appointment_date: date, exclude_id: int | None = None) -> bool:
    qs = Appointment.objects.active().filter(
        patient_id=patient_id,
        appointment_date=appointment_date,
        status__in=ACTIVE_STATUSES,
    )
    if exclude_id is not None:
        qs = qs.exclude(id=exclude_id)
    return qs.exists()


def appointment_options() -> QuerySet[Appointment]:
    return (
        Appointment.objects.active()
        .only("id", "appointment_no", "appointment_date", "appointment_time", "status")
        .order_by("-appointment_date", "-id")
    )
