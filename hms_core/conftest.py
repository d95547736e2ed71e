# hms_core/conftest.py
from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.utils import timezone
from rest_framework.test import APIClient

from hms_core.common.permissions import ALL_ROLES, ROLE_ADMIN

DOCTOR_PASSWORD = "doctor-pass-123"
PATIENT_PASSWORD = "patient-pass-123"
ADMIN_PASSWORD = "admin-pass-123"


@pytest.fixture
def roles(db):
    return {name: Group.objects.get_or_create(name=name)[0] for name in ALL_ROLES}


@pytest.fixture
def admin_user(db, roles):
    User = get_user_model()
    user = User.objects.create_user(username="admin", password=ADMIN_PASSWORD, is_active=True)
    user.groups.add(roles[ROLE_ADMIN])
    return user


@pytest.fixture
def specialization(db):
    from hms_core.specializations.services import SpecializationService

    return SpecializationService.create(
        name="Cardiology",
        description="Heart and blood vessels",
        common_conditions=["Hypertension", "Arrhythmia"],
    )


@pytest.fixture
def make_doctor(db, roles, specialization):
    from hms_core.doctors.services import DoctorService

    def _make(name="Dr. House", email=None, password=None, days=("Monday", "Wednesday")):
        return DoctorService.create(
            doctor_name=name,
            specialization_id=specialization.id,
            qualifications="MD",
            years_of_experience=10,
            consultation_fee=Decimal("500.00"),
            available_days=list(days),
            email=email,
            password=password,
        )

    return _make


@pytest.fixture
def doctor(make_doctor):
    return make_doctor(name="Dr. Gregory House", email="house@example.com", password=DOCTOR_PASSWORD)


@pytest.fixture
def other_doctor(make_doctor):
    return make_doctor(name="Dr. James Wilson", email="wilson@example.com", password=DOCTOR_PASSWORD)


@pytest.fixture
def make_patient(db, roles):
    from hms_core.patients.services import PatientService

    def _make(name="Jane Doe", email=None, password=None, gender="Female"):
        return PatientService.register(
            full_name=name,
            age=34,
            gender=gender,
            email=email,
            password=password,
            phone_number="555-0100",
            address="1 Main St",
            current_symptoms="Chest pain",
        )

    return _make


@pytest.fixture
def patient(make_patient):
    return make_patient(name="Jane Doe", email="jane@example.com", password=PATIENT_PASSWORD)


@pytest.fixture
def other_patient(make_patient):
    return make_patient(name="John Roe", email="john@example.com", password=PATIENT_PASSWORD, gender="Male")


@pytest.fixture
def visit_date():
    return timezone.localdate() + timedelta(days=7)


@pytest.fixture
def make_appointment(db, doctor, patient, visit_date):
    from datetime import time

    from hms_core.appointments.services import AppointmentService

    def _make(*, doctor_id=None, patient_id=None, on=None, at=time(9, 0), reason="Checkup", notes=""):
        return AppointmentService.create(
            patient_id=patient_id or patient.id,
            doctor_id=doctor_id or doctor.id,
            appointment_date=on or visit_date,
            appointment_time=at,
            reason_for_visit=reason,
            notes=notes,
        )

    return _make


@pytest.fixture
def api_client():
    return APIClient()


def _client_for(user):
    c = APIClient()
    c.force_authenticate(user=user)
    return c


@pytest.fixture
def admin_client(admin_user):
    return _client_for(admin_user)


@pytest.fixture
def doctor_client(doctor):
    return _client_for(doctor.user)


@pytest.fixture
def other_doctor_client(other_doctor):
    return _client_for(other_doctor.user)


@pytest.fixture
def patient_client(patient):
    return _client_for(patient.user)


@pytest.fixture
def other_patient_client(other_patient):
    return _client_for(other_patient.user)
