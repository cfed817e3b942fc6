import uuid
from datetime import date, time

import pytest
from rest_framework.exceptions import ValidationError

from hospital_core.appointments.models import Appointment, AppointmentStatus
from hospital_core.appointments.services import AppointmentService
from hospital_core.common.api.exceptions import NotFoundError, UnresolvedReferenceError

pytestmark = pytest.mark.django_db


def test_create_is_pending_and_keeps_input(patient_user, doctor_user):
    appt = AppointmentService.create(
        patient_user_id=patient_user.id,
        doctor_user_id=doctor_user.id,
        appointment_date=date(2025, 3, 4),
        appointment_time=time(15, 30),
        symptoms="persistent cough",
    )
    appt.refresh_from_db()

    assert appt.status == AppointmentStatus.PENDING
    assert appt.appointment_date == date(2025, 3, 4)
    assert appt.appointment_time == time(15, 30)
    assert appt.symptoms == "persistent cough"
    assert appt.patient_id == patient_user.patient.id
    assert appt.doctor_id == doctor_user.doctor.id
    assert appt.notes is None


def test_create_missing_symptoms_becomes_empty(patient_user, doctor_user):
    appt = AppointmentService.create(
        patient_user_id=patient_user.id,
        doctor_user_id=doctor_user.id,
        appointment_date=date(2025, 3, 4),
        appointment_time=time(9, 0),
        symptoms=None,
    )
    assert appt.symptoms == ""


def test_create_requires_date_and_time(patient_user, doctor_user):
    with pytest.raises(ValidationError) as exc:
        AppointmentService.create(
            patient_user_id=patient_user.id,
            doctor_user_id=doctor_user.id,
            appointment_date=None,
            appointment_time=None,
        )
    assert set(exc.value.detail) == {"appointment_date", "appointment_time"}


def test_create_with_unresolved_doctor_writes_nothing(patient_user):
    with pytest.raises(UnresolvedReferenceError):
        AppointmentService.create(
            patient_user_id=patient_user.id,
            doctor_user_id="ghost-doctor",
            appointment_date=date(2025, 3, 4),
            appointment_time=time(9, 0),
        )
    assert Appointment.objects.count() == 0


def test_create_with_patient_id_in_doctor_slot_is_unresolved(patient_user):
    with pytest.raises(UnresolvedReferenceError):
        AppointmentService.create(
            patient_user_id=patient_user.id,
            doctor_user_id=patient_user.id,
            appointment_date=date(2025, 3, 4),
            appointment_time=time(9, 0),
        )


def test_update_walks_lifecycle(appointment):
    for status in (AppointmentStatus.CONFIRMED, AppointmentStatus.IN_PROGRESS, AppointmentStatus.COMPLETED):
        appt = AppointmentService.update(appointment_id=appointment.id, status=status)
        assert appt.status == status


def test_update_rejects_skipping_states(appointment):
    with pytest.raises(ValidationError):
        AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.COMPLETED)

    appointment.refresh_from_db()
    assert appointment.status == AppointmentStatus.PENDING


def test_update_rejects_reopening_completed(in_progress_appointment):
    AppointmentService.update(appointment_id=in_progress_appointment.id, status=AppointmentStatus.COMPLETED)

    with pytest.raises(ValidationError):
        AppointmentService.update(appointment_id=in_progress_appointment.id, status=AppointmentStatus.PENDING)


def test_update_notes_only_when_passed(appointment):
    AppointmentService.update(
        appointment_id=appointment.id,
        status=AppointmentStatus.CONFIRMED,
        notes="bring previous reports",
    )
    appt = AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.IN_PROGRESS)
    assert appt.notes == "bring previous reports"

    # same status, notes only
    appt = AppointmentService.update(
        appointment_id=appointment.id,
        status=AppointmentStatus.IN_PROGRESS,
        notes="BP 130/85",
    )
    appt.refresh_from_db()
    assert appt.status == AppointmentStatus.IN_PROGRESS
    assert appt.notes == "BP 130/85"


def test_update_stamps_updated_at(appointment):
    before = appointment.updated_at
    appt = AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.CONFIRMED)
    appt.refresh_from_db()
    assert appt.updated_at >= before


def test_update_unknown_appointment_is_not_found(db):
    with pytest.raises(NotFoundError):
        AppointmentService.update(appointment_id=uuid.uuid4(), status=AppointmentStatus.CONFIRMED)


def test_complete_consultation_from_pending(appointment):
    appt = AppointmentService.complete_consultation(appointment_id=appointment.id, notes="viral fever, rest")
    appt.refresh_from_db()

    assert appt.status == AppointmentStatus.COMPLETED
    assert appt.notes == "viral fever, rest"


def test_complete_consultation_rejects_cancelled(appointment):
    AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.CANCELLED)

    with pytest.raises(ValidationError):
        AppointmentService.complete_consultation(appointment_id=appointment.id, notes="x")

    appointment.refresh_from_db()
    assert appointment.status == AppointmentStatus.CANCELLED
    assert appointment.notes is None


def test_complete_consultation_twice_rejected(in_progress_appointment):
    AppointmentService.complete_consultation(appointment_id=in_progress_appointment.id, notes="done")
    with pytest.raises(ValidationError):
        AppointmentService.complete_consultation(appointment_id=in_progress_appointment.id, notes="again")
