# hms_core/iam/tests/test_login_api.py
import pytest
from rest_framework.test import APIClient

from hms_core.conftest import ADMIN_PASSWORD, DOCTOR_PASSWORD, PATIENT_PASSWORD

pytestmark = pytest.mark.django_db


def test_admin_login_by_username_sets_cookies(api_client, admin_user):
    r = api_client.post("/api/login", {"username": "admin", "password": ADMIN_PASSWORD}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["isSuccess"] is True
    assert r.data["role"] == "ADMIN"
    assert r.data["user"] == {"id": admin_user.id, "username": "admin", "role": "ADMIN"}
    assert r.data["token"]
    assert r.data["refresh"]

    assert r.cookies["hms_access"].value == r.data["token"]
    assert r.cookies["hms_access"]["httponly"]
    assert r.cookies["hms_refresh"].value == r.data["refresh"]


def test_doctor_login_by_email(api_client, doctor):
    r = api_client.post("/api/login", {"email": "HOUSE@example.com", "password": DOCTOR_PASSWORD}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["role"] == "DOCTOR"
    assert r.data["user"]["id"] == doctor.id
    assert r.data["user"]["specialization_id"] == doctor.specialization_id


def test_patient_login_by_email(api_client, patient):
    r = api_client.post("/api/login", {"email": patient.email, "password": PATIENT_PASSWORD}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["role"] == "PATIENT"
    assert r.data["user"]["full_name"] == patient.full_name


def test_wrong_password_is_401(api_client, doctor):
    r = api_client.post("/api/login", {"email": doctor.email, "password": "nope"}, format="json")
    assert r.status_code == 401
    assert r.data["message"] == "Invalid credentials."
    assert "hms_access" not in r.cookies


def test_login_requires_username_or_email(api_client, db):
    r = api_client.post("/api/login", {"password": "x"}, format="json")
    assert r.status_code == 422


def test_cookie_session_resolves_identity_and_logout_clears_it(api_client, patient):
    api_client.post("/api/login", {"email": patient.email, "password": PATIENT_PASSWORD}, format="json")

    r = api_client.get("/api/me")
    assert r.status_code == 200, r.data
    assert r.data["data"] == {
        "role": "PATIENT",
        "user_id": patient.user_id,
        "doctor_id": None,
        "patient_id": patient.id,
    }

    r = api_client.post("/api/logout")
    assert r.status_code == 200
    assert r.cookies["hms_access"].value == ""
    assert r.cookies["hms_refresh"].value == ""

    assert api_client.get("/api/me").status_code == 401


def test_bearer_header_authenticates(api_client, doctor):
    token = api_client.post(
        "/api/login", {"email": doctor.email, "password": DOCTOR_PASSWORD}, format="json"
    ).data["token"]

    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    r = client.get("/api/me")
    assert r.status_code == 200, r.data
    assert r.data["data"]["doctor_id"] == doctor.id
