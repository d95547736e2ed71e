# hms_core/dashboard/selectors.py
"""
Read-only aggregations behind the admin and doctor dashboards.
Nothing here writes; everything is derived from Appointment and Payment state.
"""
from __future__ import annotations

from decimal import Decimal

from django.db.models import Count, Q, Sum

from hms_core.appointments.models import Appointment, AppointmentStatus
from hms_core.doctors.models import Doctor
from hms_core.patients.models import Patient
from hms_core.payments.models import Payment, PaymentStatus

LATEST_LIMIT = 5
TOP_DOCTORS_LIMIT = 5


def _money(value) -> str:
    return str((value or Decimal("0")).quantize(Decimal("0.01")))


def paid_earnings(*, doctor_id: int | None = None) -> Decimal:
    qs = Payment.objects.active().filter(payment_status=PaymentStatus.PAID)
    if doctor_id is not None:
        qs = qs.filter(appointment__doctor_id=doctor_id)
    return qs.aggregate(total=Sum("amount"))["total"] or Decimal("0")


def latest_appointments(*, doctor_id: int | None = None, limit: int = LATEST_LIMIT):
    qs = (
        Appointment.objects.active()
        .select_related("patient", "doctor")
        .order_by("-appointment_date", "-appointment_time", "-id")
    )
    if doctor_id is not None:
        qs = qs.filter(doctor_id=doctor_id)
    return list(qs[:limit])


def top_doctors(*, limit: int = TOP_DOCTORS_LIMIT):
    return list(
        Doctor.objects.active()
        .select_related("specialization")
        .annotate(completed=Count("appointments", filter=Q(appointments__status=AppointmentStatus.COMPLETED)))
        .order_by("-completed", "id")[:limit]
    )


def admin_summary() -> dict:
    return {
        "summary": {
            "doctors": Doctor.objects.active().count(),
            "patients": Patient.objects.active().count(),
            "appointments": Appointment.objects.active().count(),
            "earnings": _money(paid_earnings()),
        },
        "latestAppointments": [
            {
                "id": a.id,
                "appointment_no": a.appointment_no,
                "patient_name": a.patient.full_name if a.patient_id else "Unknown",
                "doctor_name": a.doctor.doctor_name if a.doctor_id else "Unknown",
                "appointment_date": a.appointment_date.isoformat(),
                "status": a.status,
            }
            for a in latest_appointments()
        ],
        "topDoctors": [
            {
                "id": d.id,
                "doctor_name": d.doctor_name,
                "specialization": d.specialization.name if d.specialization_id else "N/A",
                "appointments_completed": d.completed,
            }
            for d in top_doctors()
        ],
    }


def doctor_summary(*, doctor_id: int) -> dict:
    appts = Appointment.objects.active().filter(doctor_id=doctor_id)
    return {
        "summary": {
            "earnings": _money(paid_earnings(doctor_id=doctor_id)),
            "appointments": appts.count(),
            "patients": appts.values("patient_id").distinct().count(),
        },
        "latestBookings": [
            {
                "id": a.id,
                "appointment_no": a.appointment_no,
                "patient_name": a.patient.full_name if a.patient_id else "Unknown",
                "appointment_date": a.appointment_date.isoformat(),
                "status": a.status,
            }
            for a in latest_appointments(doctor_id=doctor_id)
        ],
    }
