import uuid

import pytest
from django.db import DatabaseError

from hospital_core.common.api.exceptions import api_exception_handler


@pytest.mark.django_db
def test_not_found_uses_envelope_and_request_id(api_client):
    resp = api_client.delete(f"/api/v1/medicines/{uuid.uuid4()}/")
    assert resp.status_code == 404

    err = resp.data["error"]
    assert err["code"] == "not_found"
    assert err["message"] == "Medicine not found."
    assert err["details"] is None
    assert err["request_id"] == resp["X-Request-Id"]


@pytest.mark.django_db
def test_incoming_request_id_is_echoed(api_client):
    resp = api_client.get("/api/v1/medicines/", HTTP_X_REQUEST_ID="trace-abc-12345")
    assert resp.status_code == 200
    assert resp["X-Request-Id"] == "trace-abc-12345"


@pytest.mark.django_db
def test_malformed_request_id_is_replaced(api_client):
    resp = api_client.get("/api/v1/medicines/", HTTP_X_REQUEST_ID="bad id!")
    assert resp["X-Request-Id"] != "bad id!"
    assert len(resp["X-Request-Id"]) == 32


@pytest.mark.django_db
def test_validation_error_lists_fields(api_client):
    resp = api_client.post("/api/v1/appointments/", {}, format="json")
    assert resp.status_code == 400

    err = resp.data["error"]
    assert err["code"] == "validation_error"
    assert err["message"] == "Request failed."
    assert {"patient_id", "doctor_id", "appointment_date", "appointment_time"} <= set(err["details"])


def test_store_error_does_not_leak_driver_message():
    resp = api_exception_handler(DatabaseError('relation "billing_bill" does not exist'), {"request": None})
    assert resp.status_code == 400

    err = resp.data["error"]
    assert err["code"] == "store_error"
    assert "billing_bill" not in err["message"]
    assert err["request_id"]


def test_unhandled_exception_is_opaque_500():
    resp = api_exception_handler(RuntimeError("boom"), {"request": None})
    assert resp.status_code == 500
    assert resp.data["error"]["code"] == "server_error"
    assert resp.data["error"]["message"] == "Internal server error."


@pytest.mark.django_db
def test_schema_documents_versioned_routes_only(api_client):
    resp = api_client.get("/api/schema/?format=json")
    assert resp.status_code == 200

    paths = resp.json()["paths"]
    assert "/api/v1/appointments/" in paths
    assert "/api/appointments/" not in paths
