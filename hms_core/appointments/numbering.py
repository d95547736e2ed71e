# hms_core/appointments/numbering.py
from __future__ import annotations

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import Max

from hms_core.appointments.models import Appointment, AppointmentSequence

SEQUENCE_NAME = "appointment_no"


def format_appointment_no(value: int) -> str:
    prefix = getattr(settings, "HMS_APPOINTMENT_NUMBER_PREFIX", "PATIENT")
    width = int(getattr(settings, "HMS_APPOINTMENT_NUMBER_WIDTH", 2))
    return f"{prefix}{value:0{width}d}"


def _locked_sequence() -> AppointmentSequence:
    seq = AppointmentSequence.objects.select_for_update().filter(name=SEQUENCE_NAME).first()
    if seq is not None:
        return seq

    # First use: continue after the highest existing appointment id.
    seed = Appointment.objects.aggregate(m=Max("id"))["m"] or 0
    try:
        with transaction.atomic():
            return AppointmentSequence.objects.create(name=SEQUENCE_NAME, last_value=seed)
    except IntegrityError:
        # Another transaction seeded it first.
        return AppointmentSequence.objects.select_for_update().get(name=SEQUENCE_NAME)


def next_appointment_no() -> str:
    """
    Must run inside the transaction that inserts the appointment, so the
    counter lock is held until the row is committed.
    """
    if not transaction.get_connection().in_atomic_block:
        raise RuntimeError("next_appointment_no() requires an open transaction.")

    seq = _locked_sequence()
    seq.last_value += 1
    seq.save(update_fields=["last_value"])
    return format_appointment_no(seq.last_value)
