import pytest
from rest_framework.exceptions import ValidationError

from hospital_core.appointments.models import APPOINTMENT_TRANSITIONS, AppointmentStatus
from hospital_core.billing.models import BILL_TRANSITIONS, PaymentStatus
from hospital_core.common.transitions import TransitionTable


def test_table_states_and_terminals():
    table = TransitionTable(field="state", transitions={"a": {"b"}, "b": {"c"}, "c": set()})
    assert table.states == frozenset({"a", "b", "c"})
    assert table.is_terminal("c") is True
    assert table.is_terminal("a") is False


def test_same_state_allowed_only_when_not_terminal():
    table = TransitionTable(field="state", transitions={"a": {"b"}, "b": set()})
    assert table.allowed("a", "a") is True
    assert table.allowed("b", "b") is False


def test_check_rejects_unknown_target():
    table = TransitionTable(field="state", transitions={"a": {"b"}, "b": set()})
    with pytest.raises(ValidationError) as exc:
        table.check("a", "zzz")
    assert "state" in exc.value.detail


@pytest.mark.parametrize(
    "current,target",
    [
        (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED),
        (AppointmentStatus.PENDING, AppointmentStatus.CANCELLED),
        (AppointmentStatus.CONFIRMED, AppointmentStatus.IN_PROGRESS),
        (AppointmentStatus.IN_PROGRESS, AppointmentStatus.COMPLETED),
        (AppointmentStatus.IN_PROGRESS, AppointmentStatus.CANCELLED),
    ],
)
def test_appointment_legal_transitions(current, target):
    APPOINTMENT_TRANSITIONS.check(current, target)


@pytest.mark.parametrize(
    "current,target",
    [
        (AppointmentStatus.PENDING, AppointmentStatus.COMPLETED),
        (AppointmentStatus.COMPLETED, AppointmentStatus.PENDING),
        (AppointmentStatus.CANCELLED, AppointmentStatus.CONFIRMED),
        (AppointmentStatus.COMPLETED, AppointmentStatus.COMPLETED),
    ],
)
def test_appointment_illegal_transitions(current, target):
    with pytest.raises(ValidationError):
        APPOINTMENT_TRANSITIONS.check(current, target)


def test_bill_paid_is_terminal():
    BILL_TRANSITIONS.check(PaymentStatus.PENDING, PaymentStatus.PAID)
    with pytest.raises(ValidationError):
        BILL_TRANSITIONS.check(PaymentStatus.PAID, PaymentStatus.PENDING)
