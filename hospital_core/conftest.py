# hospital_core/conftest.py
from datetime import date, time
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from hospital_core.accounts.models import UserRole
from hospital_core.accounts.services import AccountService
from hospital_core.appointments.models import AppointmentStatus
from hospital_core.appointments.services import AppointmentService
from hospital_core.pharmacy.services import MedicineService
from hospital_core.rooms.models import Room


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def patient_user(db):
    return AccountService.register(
        user_id="usr-patient-0001",
        email="asha.rao@example.com",
        role=UserRole.PATIENT,
        full_name="Asha Rao",
        phone="9876500001",
        age=34,
        blood_group="B+",
    )


@pytest.fixture
def other_patient_user(db):
    return AccountService.register(
        user_id="usr-patient-0002",
        email="vikram.shah@example.com",
        role=UserRole.PATIENT,
        full_name="Vikram Shah",
        phone="9876500002",
    )


@pytest.fixture
def doctor_user(db):
    return AccountService.register(
        user_id="usr-doctor-0001",
        email="dr.mehta@example.com",
        role=UserRole.DOCTOR,
        full_name="Dr. Neha Mehta",
        phone="9876500101",
        specialization="Internal Medicine",
        license_number="LIC-TEST-0001",
        department="Medicine",
    )


@pytest.fixture
def appointment(patient_user, doctor_user):
    return AppointmentService.create(
        patient_user_id=patient_user.id,
        doctor_user_id=doctor_user.id,
        appointment_date=date(2025, 1, 10),
        appointment_time=time(10, 0),
        symptoms="fever",
    )


@pytest.fixture
def in_progress_appointment(appointment):
    AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.CONFIRMED)
    return AppointmentService.update(appointment_id=appointment.id, status=AppointmentStatus.IN_PROGRESS)


@pytest.fixture
def medicine(db):
    return MedicineService.create(
        name="Paracetamol 500mg",
        category="Analgesic",
        stock_quantity=100,
        price_per_unit="10.50",
        manufacturer="Cipla",
    )


@pytest.fixture
def room(db):
    return Room.objects.create(
        room_number="101",
        room_type="General Ward",
        floor=1,
        daily_rate=Decimal("1500.00"),
    )
