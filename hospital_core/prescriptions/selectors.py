# hospital_core/prescriptions/selectors.py
from __future__ import annotations

from uuid import UUID

from django.db.models import QuerySet

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.appointments.selectors import appointment_ids_for_patient
from hospital_core.prescriptions.models import Prescription


def prescriptions_qs() -> QuerySet[Prescription]:
    return Prescription.objects.select_related("medicine", "appointment__doctor__user")


def _fully_resolved(rx: Prescription) -> bool:
    appt = rx.appointment
    if appt is None or rx.medicine is None:
        return False
    doctor = appt.doctor
    return doctor is not None and doctor.user is not None


def prescriptions_for(
    *,
    patient_user_id: str | None = None,
    appointment_id: UUID | None = None,
    resolver: IdentityResolver | None = None,
) -> list[Prescription]:
    """
    patient_user_id is resolved user -> patient -> appointment ids before the
    prescription table is read. No patient, or a patient without appointments,
    returns [] without touching prescriptions.
    """
    qs = prescriptions_qs()

    if patient_user_id:
        resolver = resolver or IdentityResolver()
        patient_id = resolver.patient_id(patient_user_id)
        if patient_id is None:
            return []

        appt_ids = appointment_ids_for_patient(patient_id=patient_id)
        if not appt_ids:
            return []

        qs = qs.filter(appointment_id__in=appt_ids)

    if appointment_id:
        qs = qs.filter(appointment_id=appointment_id)

    return [rx for rx in qs.order_by("-created_at") if _fully_resolved(rx)]
