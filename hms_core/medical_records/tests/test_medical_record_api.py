# hms_core/medical_records/tests/test_medical_record_api.py
import pytest

from hms_core.medical_records.models import MedicalRecord

pytestmark = pytest.mark.django_db


def _record_payload(appt, **extra):
    body = {
        "appointment_id": appt.id,
        "patient_id": appt.patient_id,
        "doctor_id": appt.doctor_id,
        "blood_pressure": "120/80",
        "diagnosis": "Seasonal flu",
        "treatment": "Rest and fluids",
        "follow_up_required": True,
        "record_date": appt.appointment_date.isoformat(),
    }
    body.update(extra)
    return body


def test_create_record_and_show_it_on_appointment(api_client, make_appointment):
    appt = make_appointment()

    r = api_client.post("/api/createmedicalrecord", _record_payload(appt), format="json")
    assert r.status_code == 201, r.data
    record = r.data["data"]
    assert record["appointment_no"] == appt.appointment_no
    assert record["follow_up_required"] is True

    detail = api_client.get(f"/api/getappointments/{appt.id}").data["data"]
    assert detail["medical_record"]["id"] == record["id"]
    assert detail["medical_record"]["diagnosis"] == "Seasonal flu"


def test_second_record_for_appointment_is_conflict(api_client, make_appointment):
    appt = make_appointment()
    assert api_client.post("/api/createmedicalrecord", _record_payload(appt), format="json").status_code == 201

    r = api_client.post("/api/createmedicalrecord", _record_payload(appt), format="json")
    assert r.status_code == 409
    assert MedicalRecord.objects.count() == 1


def test_patient_and_doctor_must_match_appointment(api_client, make_appointment, other_patient, other_doctor):
    appt = make_appointment()

    r = api_client.post(
        "/api/createmedicalrecord",
        _record_payload(appt, patient_id=other_patient.id, doctor_id=other_doctor.id),
        format="json",
    )
    assert r.status_code == 422
    assert set(r.data["details"]) == {"patient_id", "doctor_id"}


def test_diagnosis_is_required(api_client, make_appointment):
    appt = make_appointment()
    r = api_client.post("/api/createmedicalrecord", _record_payload(appt, diagnosis=""), format="json")
    assert r.status_code == 422


def test_partial_update_and_archive(api_client, make_appointment):
    appt = make_appointment()
    record_id = api_client.post("/api/createmedicalrecord", _record_payload(appt), format="json").data["data"]["id"]

    r = api_client.post(f"/api/updatemedicalrecord/{record_id}", {"notes": "Improving"}, format="json")
    assert r.status_code == 200, r.data
    assert r.data["data"]["notes"] == "Improving"
    assert r.data["data"]["diagnosis"] == "Seasonal flu"

    api_client.post(f"/api/deletemedicalrecord/{record_id}")
    assert api_client.get("/api/getmedicalrecords").data["pagination"]["total"] == 0
    assert api_client.get("/api/getmedicalrecords", {"archived": "true"}).data["pagination"]["total"] == 1
