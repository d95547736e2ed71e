# hms_core/dashboard/tests/test_dashboard_api.py
from datetime import time, timedelta
from decimal import Decimal

import pytest

from hms_core.appointments.services import AppointmentService
from hms_core.common.archive import ArchiveService
from hms_core.iam.identity import resolve_identity
from hms_core.payments.models import Payment, PaymentStatus
from hms_core.payments.services import PaymentService

pytestmark = pytest.mark.django_db


def _paid(patient, amount, appointment=None):
    return PaymentService.record(
        patient_id=patient.id,
        appointment_id=appointment.id if appointment else None,
        amount=Decimal(amount),
        payment_status=PaymentStatus.PAID,
    )


def test_admin_dashboard_summary_counts_and_earnings(admin_client, make_appointment, patient, other_patient, doctor):
    appt = make_appointment()
    make_appointment(patient_id=other_patient.id, at=time(10, 0))

    _paid(patient, "100.00", appt)
    _paid(other_patient, "50.00")
    PaymentService.record(patient_id=patient.id, amount=Decimal("999.00"))
    archived = _paid(patient, "75.00")
    ArchiveService.archive(model=Payment, pk=archived.id, actor_user_id=None)

    r = admin_client.get("/api/admindashboard")
    assert r.status_code == 200, r.data
    summary = r.data["data"]["summary"]
    assert summary == {"doctors": 1, "patients": 2, "appointments": 2, "earnings": "150.00"}


def test_earnings_ignore_appointment_status(admin_client, make_appointment, patient, doctor):
    appt = make_appointment()
    _paid(patient, "40.00", appt)
    AppointmentService.cancel(appointment_id=appt.id, identity=resolve_identity(patient.user))

    r = admin_client.get("/api/admindashboard")
    assert r.data["data"]["summary"]["earnings"] == "40.00"


def test_admin_dashboard_latest_and_top_doctors(
    admin_client, admin_user, make_appointment, make_patient, doctor, other_doctor, visit_date
):
    admin = resolve_identity(admin_user)
    for offset in range(6):
        p = make_patient(name=f"Patient {offset}")
        make_appointment(patient_id=p.id, doctor_id=other_doctor.id, on=visit_date + timedelta(days=offset))
    done = make_appointment(on=visit_date - timedelta(days=1))
    AppointmentService.approve(appointment_id=done.id, identity=admin)
    AppointmentService.complete(appointment_id=done.id, identity=admin)

    data = admin_client.get("/api/admindashboard").data["data"]

    latest = data["latestAppointments"]
    assert len(latest) == 5
    dates = [row["appointment_date"] for row in latest]
    assert dates == sorted(dates, reverse=True)
    assert dates[0] == (visit_date + timedelta(days=5)).isoformat()

    top = data["topDoctors"]
    assert [d["id"] for d in top] == [doctor.id, other_doctor.id]
    assert top[0]["appointments_completed"] == 1
    assert top[0]["specialization"] == "Cardiology"
    assert top[1]["appointments_completed"] == 0


def test_admin_dashboard_access(api_client, doctor_client, admin_client):
    assert api_client.get("/api/admindashboard").status_code == 401
    assert doctor_client.get("/api/admindashboard").status_code == 403
    assert admin_client.get("/api/admindashboard").status_code == 200


def test_doctor_dashboard_is_scoped_to_caller(doctor_client, make_appointment, other_doctor, other_patient, patient):
    mine = make_appointment()
    theirs = make_appointment(doctor_id=other_doctor.id, patient_id=other_patient.id)
    _paid(patient, "30.00", mine)
    _paid(other_patient, "70.00", theirs)

    r = doctor_client.get("/api/doctordashboard")
    assert r.status_code == 200, r.data
    data = r.data["data"]
    assert data["summary"] == {"earnings": "30.00", "appointments": 1, "patients": 1}
    assert [row["id"] for row in data["latestBookings"]] == [mine.id]


def test_doctor_dashboard_denies_admin_and_patient(admin_client, patient_client):
    assert admin_client.get("/api/doctordashboard").status_code == 403
    assert patient_client.get("/api/doctordashboard").status_code == 403


def test_archived_rows_stay_off_the_admin_dashboard(admin_client, make_appointment, doctor, other_doctor, other_patient):
    from hms_core.doctors.models import Doctor

    keep = make_appointment()
    gone = make_appointment(doctor_id=other_doctor.id, patient_id=other_patient.id)
    AppointmentService.archive(appointment_id=gone.id)
    ArchiveService.archive(model=Doctor, pk=other_doctor.id, actor_user_id=None)

    data = admin_client.get("/api/admindashboard").data["data"]
    assert [row["id"] for row in data["latestAppointments"]] == [keep.id]
    assert [row["id"] for row in data["topDoctors"]] == [doctor.id]
