import pytest

from hospital_core.accounts.models import Doctor, Patient, User

pytestmark = pytest.mark.django_db


def test_register_patient_creates_user_and_patient(api_client):
    resp = api_client.post(
        "/api/v1/users/",
        {
            "id": "auth-7f3c",
            "email": "leela@example.com",
            "role": "patient",
            "full_name": "Leela Iyer",
            "phone": "9000000001",
            "age": 41,
        },
        format="json",
    )
    assert resp.status_code == 201

    user = resp.data["user"]
    assert user["id"] == "auth-7f3c"
    assert user["role"] == "patient"
    assert user["doctor"] is None
    assert user["patient"]["blood_group"] == "O+"
    # emergency contact defaults to the phone number
    assert user["patient"]["emergency_contact"] == "9000000001"
    assert Patient.objects.filter(user_id="auth-7f3c").exists()


def test_register_doctor_applies_defaults(api_client):
    resp = api_client.post(
        "/api/v1/users/",
        {"id": "auth-d001", "email": "dr.k@example.com", "role": "doctor", "full_name": "Dr. Kiran"},
        format="json",
    )
    assert resp.status_code == 201

    doctor = resp.data["user"]["doctor"]
    assert doctor["specialization"] == "General Medicine"
    assert doctor["department"] == "General"
    assert doctor["license_number"].startswith("LIC")
    assert Doctor.objects.get(user_id="auth-d001").experience_years == 0


def test_register_duplicate_email_rejected(api_client, patient_user):
    resp = api_client.post(
        "/api/v1/users/",
        {"id": "auth-new", "email": patient_user.email.upper(), "role": "patient", "full_name": "Someone"},
        format="json",
    )
    assert resp.status_code == 400
    assert resp.data["error"]["code"] == "validation_error"
    assert "email" in resp.data["error"]["details"]
    assert not User.objects.filter(id="auth-new").exists()


def test_get_user_profile(api_client, doctor_user):
    resp = api_client.get(f"/api/v1/users/{doctor_user.id}/")
    assert resp.status_code == 200
    assert resp.data["user"]["full_name"] == "Dr. Neha Mehta"
    assert resp.data["user"]["doctor"]["license_number"] == "LIC-TEST-0001"


def test_get_unknown_user_is_404(api_client):
    resp = api_client.get("/api/v1/users/nobody/")
    assert resp.status_code == 404
    assert resp.data["error"]["code"] == "not_found"


def test_doctor_directory(api_client, doctor_user, patient_user):
    resp = api_client.get("/api/v1/doctors/")
    assert resp.status_code == 200

    doctors = resp.data["doctors"]
    assert len(doctors) == 1
    assert doctors[0]["user_id"] == doctor_user.id
    assert doctors[0]["user"] == {
        "full_name": "Dr. Neha Mehta",
        "email": "dr.mehta@example.com",
        "phone": "9876500101",
    }

    resp = api_client.get("/api/v1/doctors/", {"department": "surgery"})
    assert resp.data["doctors"] == []
