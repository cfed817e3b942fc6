import uuid

import pytest
from rest_framework.exceptions import ValidationError

from hospital_core.appointments.models import AppointmentStatus
from hospital_core.appointments.services import AppointmentService
from hospital_core.common.api.exceptions import UnresolvedReferenceError
from hospital_core.pharmacy.models import Medicine
from hospital_core.prescriptions.models import Prescription
from hospital_core.prescriptions.services import PrescriptionService

pytestmark = pytest.mark.django_db


def _prescribe(appointment_id, medicine_id, **extra):
    return PrescriptionService.create(
        appointment_id=appointment_id,
        medicine_id=medicine_id,
        dosage="500mg",
        frequency="three times a day",
        duration="5 days",
        **extra,
    )


def test_create_during_consultation(in_progress_appointment, medicine):
    rx = _prescribe(in_progress_appointment.id, medicine.id, instructions="after food")
    rx.refresh_from_db()

    assert rx.appointment_id == in_progress_appointment.id
    assert rx.medicine_id == medicine.id
    assert rx.instructions == "after food"


def test_create_does_not_touch_stock(in_progress_appointment, medicine):
    _prescribe(in_progress_appointment.id, medicine.id)
    assert Medicine.objects.get(id=medicine.id).stock_quantity == 100


def test_create_blank_instructions_stored_as_null(in_progress_appointment, medicine):
    rx = _prescribe(in_progress_appointment.id, medicine.id, instructions="")
    assert rx.instructions is None


def test_create_on_pending_appointment(appointment, medicine):
    assert appointment.status == AppointmentStatus.PENDING

    rx = _prescribe(appointment.id, medicine.id)
    assert Prescription.objects.filter(id=rx.id, appointment_id=appointment.id).exists()

    # saving the consultation afterwards keeps the prescription attached
    AppointmentService.complete_consultation(appointment_id=appointment.id, notes="fever, paracetamol")
    assert Prescription.objects.filter(appointment_id=appointment.id).count() == 1


def test_create_on_cancelled_appointment_rejected(appointment, medicine):
    AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.CANCELLED)

    with pytest.raises(ValidationError) as exc:
        _prescribe(appointment.id, medicine.id)
    assert "appointment_id" in exc.value.detail
    assert not Prescription.objects.exists()


def test_create_unknown_appointment(medicine):
    with pytest.raises(UnresolvedReferenceError) as exc:
        _prescribe(uuid.uuid4(), medicine.id)
    assert exc.value.detail["field"] == "appointment_id"


def test_create_unknown_medicine(in_progress_appointment):
    with pytest.raises(UnresolvedReferenceError) as exc:
        _prescribe(in_progress_appointment.id, uuid.uuid4())
    assert exc.value.detail["field"] == "medicine_id"


def test_create_requires_dosage_fields(in_progress_appointment, medicine):
    with pytest.raises(ValidationError) as exc:
        PrescriptionService.create(
            appointment_id=in_progress_appointment.id,
            medicine_id=medicine.id,
            dosage="",
            frequency=" ",
            duration="3 days",
        )
    assert set(exc.value.detail) == {"dosage", "frequency"}
