# hospital_core/tests/test_dashboard_paths.py
from decimal import Decimal

import pytest

from hospital_core.appointments.models import Appointment
from hospital_core.billing.models import Bill
from hospital_core.pharmacy.models import Medicine

pytestmark = pytest.mark.django_db


def test_delete_medicine_without_trailing_slash(api_client, medicine):
    resp = api_client.delete(f"/api/medicines/{medicine.id}")
    assert resp.status_code == 200
    assert not Medicine.objects.filter(id=medicine.id).exists()


def test_create_bill_without_trailing_slash(api_client, patient_user):
    resp = api_client.post(
        "/api/billing",
        {"patient_user_id": patient_user.id, "consultation_fee": 300, "other_charges": 50},
        format="json",
    )
    assert resp.status_code == 201
    assert resp.data["bill"]["total_amount"] == Decimal("350.00")
    assert Bill.objects.filter(patient=patient_user.patient).count() == 1


def test_update_appointment_without_trailing_slash(api_client, appointment):
    resp = api_client.put(
        "/api/appointments",
        {"id": str(appointment.id), "status": "confirmed"},
        format="json",
    )
    assert resp.status_code == 200
    assert Appointment.objects.get(id=appointment.id).status == "confirmed"


def test_complete_consultation_without_trailing_slash(api_client, appointment):
    resp = api_client.post(
        f"/api/v1/appointments/{appointment.id}/complete",
        {"notes": "Rest for two days."},
        format="json",
    )
    assert resp.status_code == 200
    assert resp.data["appointment"]["status"] == "completed"


def test_list_doctors_without_trailing_slash(api_client, doctor_user):
    resp = api_client.get("/api/doctors")
    assert resp.status_code == 200
    assert [d["user_id"] for d in resp.data["doctors"]] == [doctor_user.id]


@pytest.mark.parametrize("path", ["/api/medicines/not-a-uuid", "/api/rooms/assignments/123/discharge"])
def test_malformed_ids_do_not_route(api_client, db, path):
    assert api_client.delete(path).status_code == 404
