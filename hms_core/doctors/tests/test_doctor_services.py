# hms_core/doctors/tests/test_doctor_services.py
from decimal import Decimal

import pytest
from rest_framework.exceptions import ValidationError

from hms_core.common.api.exceptions import ConflictError
from hms_core.common.permissions import ROLE_DOCTOR
from hms_core.doctors.models import DoctorAvailableDay
from hms_core.doctors.services import DoctorService, normalize_days
from hms_core.iam.identity import resolve_identity


def test_normalize_days_title_cases_and_dedupes():
    assert normalize_days(["monday", "FRIDAY", "Monday"]) == ["Monday", "Friday"]


def test_normalize_days_rejects_unknown_and_empty():
    with pytest.raises(ValidationError):
        normalize_days(["Funday"])
    with pytest.raises(ValidationError):
        normalize_days([])


@pytest.mark.django_db
def test_create_with_password_links_doctor_login(doctor):
    assert doctor.user is not None
    assert doctor.user.username == "house@example.com"
    assert doctor.user.check_password("doctor-pass-123")

    identity = resolve_identity(doctor.user)
    assert identity.role == ROLE_DOCTOR
    assert identity.doctor_id == doctor.id


@pytest.mark.django_db
def test_available_days_keep_order_and_sync_on_update(make_doctor, specialization):
    doc = make_doctor(days=("Friday", "Monday"))
    assert doc.available_day_names == ["Friday", "Monday"]

    DoctorService.update(
        doctor_id=doc.id,
        doctor_name=doc.doctor_name,
        specialization_id=specialization.id,
        qualifications="MD, PhD",
        years_of_experience=12,
        consultation_fee=Decimal("750.00"),
        available_days=["tuesday"],
    )
    doc.refresh_from_db()
    assert doc.available_day_names == ["Tuesday"]
    assert doc.qualifications == "MD, PhD"
    assert DoctorAvailableDay.objects.filter(doctor=doc).count() == 1


@pytest.mark.django_db
def test_password_without_email_is_rejected(make_doctor):
    with pytest.raises(ValidationError):
        make_doctor(password="secret-123")


@pytest.mark.django_db
def test_duplicate_email_is_conflict(make_doctor):
    make_doctor(email="same@example.com")
    with pytest.raises(ConflictError):
        make_doctor(name="Dr. Copy", email="SAME@example.com")


@pytest.mark.django_db
def test_unknown_specialization_is_validation_error(roles):
    with pytest.raises(ValidationError):
        DoctorService.create(
            doctor_name="Dr. Nobody",
            specialization_id=12345,
            qualifications="MD",
            available_days=["Monday"],
        )
