# hospital_core/appointments/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.appointments.models import Appointment


def appointments_qs() -> QuerySet[Appointment]:
    return Appointment.objects.select_related("patient__user", "doctor__user")


def appointments_for_users(
    *,
    patient_user_id: str | None = None,
    doctor_user_id: str | None = None,
    resolver: IdentityResolver | None = None,
) -> QuerySet[Appointment]:
    """
    Filters are external user ids. A filter that does not resolve to a
    patient/doctor record yields an empty result, not an error.
    """
    resolver = resolver or IdentityResolver()
    qs = appointments_qs()

    if patient_user_id:
        patient_id = resolver.patient_id(patient_user_id)
        if patient_id is None:
            return Appointment.objects.none()
        qs = qs.filter(patient_id=patient_id)

    if doctor_user_id:
        doctor_id = resolver.doctor_id(doctor_user_id)
        if doctor_id is None:
            return Appointment.objects.none()
        qs = qs.filter(doctor_id=doctor_id)

    return qs.order_by("appointment_date", "appointment_time", "created_at")


def appointment_ids_for_patient(*, patient_id) -> list:
    return list(
        Appointment.objects.filter(patient_id=patient_id).values_list("id", flat=True)
    )
