# hms_core/common/tests/test_error_envelope.py
import pytest

pytestmark = pytest.mark.django_db


def test_incoming_request_id_is_echoed(api_client):
    r = api_client.get("/api/getappointments/12345", HTTP_X_REQUEST_ID="trace-abc-123")
    assert r.status_code == 404
    assert r["X-Request-Id"] == "trace-abc-123"
    assert r.data["request_id"] == "trace-abc-123"


def test_malformed_request_id_is_replaced(api_client):
    r = api_client.get("/api/getspecializations", HTTP_X_REQUEST_ID="bad id!")
    assert r.status_code == 200
    assert r["X-Request-Id"] != "bad id!"


def test_validation_error_is_422_with_details(api_client):
    r = api_client.post("/api/createspecialization", {}, format="json")
    assert r.status_code == 422
    assert r.data["isSuccess"] is False
    assert r.data["error"] == "validation_error"
    assert r.data["message"] == "Validation failed."
    assert "name" in r.data["details"]


def test_unhandled_error_is_generic_500(admin_client, monkeypatch):
    def boom():
        raise RuntimeError("database exploded")

    monkeypatch.setattr("hms_core.dashboard.api.views.admin_summary", boom)

    r = admin_client.get("/api/admindashboard")
    assert r.status_code == 500
    assert r.data["message"] == "Unexpected server error."
    assert r.data["error"] == "server_error"
    assert "exploded" not in str(r.data)


def test_success_envelope_shape(api_client, specialization):
    r = api_client.get(f"/api/getspecializations/{specialization.id}")
    assert r.status_code == 200
    assert r.data["isSuccess"] is True
    assert r.data["data"]["name"] == "Cardiology"
    assert "pagination" not in r.data
