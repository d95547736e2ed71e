# hms_core/payments/tests/test_payment_api.py
import pytest

pytestmark = pytest.mark.django_db


def _create(api_client, patient, appt=None, **extra):
    body = {"patient_id": patient.id, "amount": "250.00", "payment_method": "Cash"}
    if appt is not None:
        body["appointment_id"] = appt.id
    body.update(extra)
    r = api_client.post("/api/createpayment", body, format="json")
    assert r.status_code == 201, r.data
    return r.data["data"]


def test_create_confirm_and_reconfirm(api_client, patient, make_appointment):
    appt = make_appointment()
    payment = _create(api_client, patient, appt)
    assert payment["payment_status"] == "Pending"
    assert payment["appointment_no"] == appt.appointment_no

    r = api_client.post(f"/api/confirmpayment/{payment['id']}")
    assert r.status_code == 200, r.data
    assert r.data["data"]["payment_status"] == "Paid"
    assert r.data["data"]["payment_date"] is not None

    detail = api_client.get(f"/api/getappointments/{appt.id}").data["data"]
    assert detail["is_paid"] is True
    assert detail["payments"][0]["payment_status"] == "Paid"

    r = api_client.post(f"/api/confirmpayment/{payment['id']}")
    assert r.status_code == 409
    assert r.data["message"] == "This payment has already been confirmed as Paid."


def test_invalid_method_and_amount_are_422(api_client, patient):
    r = api_client.post(
        "/api/createpayment",
        {"patient_id": patient.id, "amount": "0", "payment_method": "Bitcoin"},
        format="json",
    )
    assert r.status_code == 422
    assert {"amount", "payment_method"} <= set(r.data["details"])


def test_search_by_patient_name_and_status(api_client, patient, other_patient):
    _create(api_client, patient)
    _create(api_client, other_patient, payment_status="Failed")

    r = api_client.get("/api/getpayments", {"search": "jane"})
    assert [p["patient_name"] for p in r.data["data"]] == [patient.full_name]

    r = api_client.get("/api/getpayments", {"search": "fail"})
    assert [p["patient_name"] for p in r.data["data"]] == [other_patient.full_name]

    r = api_client.get("/api/getpayments", {"payment_status": "Pending"})
    assert r.data["pagination"]["total"] == 1


def test_confirm_missing_payment_is_404(api_client, db):
    assert api_client.post("/api/confirmpayment/77").status_code == 404
