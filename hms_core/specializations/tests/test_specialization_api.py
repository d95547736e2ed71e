# hms_core/specializations/tests/test_specialization_api.py
import pytest

from hms_core.specializations.models import Specialization

pytestmark = pytest.mark.django_db


def test_create_stores_conditions_as_list(api_client):
    r = api_client.post(
        "/api/createspecialization",
        {
            "name": "Neurology",
            "description": "Brain and nerves",
            "common_conditions": ["Migraine", " Epilepsy ", "Migraine"],
        },
        format="json",
    )
    assert r.status_code == 201, r.data
    assert r.data["data"]["common_conditions"] == ["Migraine", "Epilepsy"]

    spec = Specialization.objects.get(name="Neurology")
    assert spec.common_conditions == ["Migraine", "Epilepsy"]


def test_duplicate_name_is_conflict(api_client, specialization):
    r = api_client.post(
        "/api/createspecialization",
        {"name": specialization.name, "common_conditions": ["x"]},
        format="json",
    )
    assert r.status_code == 409, r.data


def test_conditions_are_required(api_client):
    r = api_client.post("/api/createspecialization", {"name": "Empty", "common_conditions": []}, format="json")
    assert r.status_code == 422
    assert "common_conditions" in r.data["details"]


def test_update_archive_restore(api_client, specialization):
    r = api_client.post(
        f"/api/updatespecialization/{specialization.id}",
        {"name": "Cardiology", "description": "Updated", "common_conditions": ["Heart failure"]},
        format="json",
    )
    assert r.status_code == 200, r.data
    assert r.data["data"]["common_conditions"] == ["Heart failure"]

    assert api_client.post(f"/api/deletespecialization/{specialization.id}").status_code == 200
    listing = api_client.get("/api/getspecializations")
    assert listing.data["data"] == []
    assert listing.data["message"] == "No specializations found."

    # Archived rows can't be edited until restored.
    r = api_client.post(
        f"/api/updatespecialization/{specialization.id}",
        {"name": "Cardiology", "common_conditions": ["x"]},
        format="json",
    )
    assert r.status_code == 404

    assert api_client.post(f"/api/restorespecialization/{specialization.id}").status_code == 200
    assert [s["id"] for s in api_client.get("/api/getspecializations").data["data"]] == [specialization.id]


def test_dropdown_doctors_by_specialization(api_client, specialization, make_doctor):
    d1 = make_doctor(name="Dr. A")
    make_doctor(name="Dr. B")
    archived = make_doctor(name="Dr. C")
    api_client.post(f"/api/deletedoctor/{archived.id}")

    r = api_client.get(f"/api/dropdown/getdoctorsbyspecialization/{specialization.id}")
    assert r.status_code == 200
    names = [d["doctor_name"] for d in r.data["data"]]
    assert names == ["Dr. A", "Dr. B"]
    assert r.data["data"][0] == {"id": d1.id, "doctor_name": "Dr. A"}

    assert api_client.get("/api/dropdown/getdoctorsbyspecialization/9999").status_code == 404

    r = api_client.get("/api/dropdown/getspecializations")
    assert r.data["data"] == [{"id": specialization.id, "name": "Cardiology"}]
