# hms_core/patients/tests/test_patient_api.py
import pytest

from hms_core.common.permissions import ROLE_PATIENT
from hms_core.iam.identity import resolve_identity
from hms_core.patients.models import Patient

pytestmark = pytest.mark.django_db


def _patient_payload(**extra):
    body = {
        "full_name": "Lisa Simpson",
        "age": 8,
        "gender": "Female",
        "email": "lisa@example.com",
        "phone_number": "555-0199",
        "address": "742 Evergreen Terrace",
        "current_symptoms": "Cough",
    }
    body.update(extra)
    return body


def test_register_patient_with_login(api_client, roles):
    r = api_client.post("/api/createpatient", _patient_payload(password="s3cret-pass"), format="json")
    assert r.status_code == 201, r.data
    assert r.data["message"] == "Patient registered successfully!"
    assert "password" not in r.data["data"]

    patient = Patient.objects.get(id=r.data["data"]["id"])
    identity = resolve_identity(patient.user)
    assert identity.role == ROLE_PATIENT
    assert identity.patient_id == patient.id


def test_gender_must_be_known(api_client):
    r = api_client.post("/api/createpatient", _patient_payload(gender="Unknown"), format="json")
    assert r.status_code == 422
    assert "gender" in r.data["details"]


def test_duplicate_email_is_conflict(api_client, patient):
    r = api_client.post("/api/createpatient", _patient_payload(email=patient.email), format="json")
    assert r.status_code == 409, r.data


def test_update_patient(api_client, patient):
    r = api_client.post(
        f"/api/updatepatient/{patient.id}",
        _patient_payload(full_name="Jane Q. Doe", email=patient.email, age=35),
        format="json",
    )
    assert r.status_code == 200, r.data
    patient.refresh_from_db()
    assert patient.full_name == "Jane Q. Doe"
    assert patient.age == 35


def test_list_search_gender_filter_and_archive(api_client, make_patient):
    make_patient(name="Homer Simpson", gender="Male")
    marge = make_patient(name="Marge Simpson", gender="Female")

    r = api_client.get("/api/getpatients", {"search": "simpson", "gender": "Female"})
    assert [p["id"] for p in r.data["data"]] == [marge.id]

    api_client.post(f"/api/deletepatient/{marge.id}")
    r = api_client.get("/api/getpatients", {"search": "simpson"})
    assert [p["full_name"] for p in r.data["data"]] == ["Homer Simpson"]

    r = api_client.get("/api/dropdown/getpatients")
    assert [p["full_name"] for p in r.data["data"]] == ["Homer Simpson"]
