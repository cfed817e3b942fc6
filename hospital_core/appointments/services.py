# hospital_core/appointments/services.py
from __future__ import annotations

import logging
from datetime import date, time
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import ValidationError

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.appointments.models import APPOINTMENT_TRANSITIONS, Appointment, AppointmentStatus
from hospital_core.common.api.exceptions import NotFoundError

logger = logging.getLogger(__name__)


_NOTSET = object()


class AppointmentService:
    """
    Appointment write-model.

    Lifecycle (APPOINTMENT_TRANSITIONS):
      pending -> confirmed -> in_progress -> completed
      any non-terminal -> cancelled
    completed / cancelled are terminal.
    """

    # Path walked by complete_consultation(); each hop is still checked against the table.
    CONSULTATION_PATH = (
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.IN_PROGRESS,
        AppointmentStatus.COMPLETED,
    )

    @staticmethod
    def _get_locked(appointment_id: UUID) -> Appointment:
        appt = Appointment.objects.select_for_update().filter(id=appointment_id).first()
        if appt is None:
            raise NotFoundError("Appointment not found.")
        return appt

    @staticmethod
    @transaction.atomic
    def create(
        *,
        patient_user_id: str,
        doctor_user_id: str,
        appointment_date: date | None,
        appointment_time: time | None,
        symptoms: str | None = "",
        resolver: IdentityResolver | None = None,
    ) -> Appointment:
        missing = {}
        if not patient_user_id:
            missing["patient_id"] = "This field is required."
        if not doctor_user_id:
            missing["doctor_id"] = "This field is required."
        if not appointment_date:
            missing["appointment_date"] = "This field is required."
        if not appointment_time:
            missing["appointment_time"] = "This field is required."
        if missing:
            raise ValidationError(missing)

        resolver = resolver or IdentityResolver()
        patient_id = resolver.require_patient(patient_user_id, field="patient_id")
        doctor_id = resolver.require_doctor(doctor_user_id, field="doctor_id")

        appt = Appointment.objects.create(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
            symptoms=symptoms or "",
            status=AppointmentStatus.PENDING,
        )

        logger.info(
            "Appointment %s booked: patient=%s doctor=%s on %s %s",
            appt.id, patient_id, doctor_id, appointment_date, appointment_time,
        )
        return appt

    @staticmethod
    @transaction.atomic
    def update(*, appointment_id: UUID, status: str, notes=_NOTSET) -> Appointment:
        """
        Moves the appointment to `status` (validated against the lifecycle) and,
        when `notes` is passed, overwrites the consultation notes.
        """
        appt = AppointmentService._get_locked(appointment_id)

        APPOINTMENT_TRANSITIONS.check(appt.status, status)

        prev_status = appt.status
        appt.status = status
        update_fields = ["status", "updated_at"]

        if notes is not _NOTSET:
            appt.notes = notes
            update_fields.append("notes")

        appt.save(update_fields=update_fields)

        if prev_status != appt.status:
            logger.info("Appointment %s: %s -> %s", appt.id, prev_status, appt.status)
        return appt

    @staticmethod
    @transaction.atomic
    def complete_consultation(*, appointment_id: UUID, notes: str) -> Appointment:
        """
        Doctor saves a consultation in one step: walks the appointment forward
        to COMPLETED along CONSULTATION_PATH and records the notes.
        All hops commit together or not at all.
        """
        appt = AppointmentService._get_locked(appointment_id)

        if appt.status == AppointmentStatus.CANCELLED:
            raise ValidationError({"status": "Cannot complete a cancelled appointment."})
        if appt.status == AppointmentStatus.COMPLETED:
            raise ValidationError({"status": "Appointment is already completed."})

        prev_status = appt.status
        start = 0
        if appt.status in AppointmentService.CONSULTATION_PATH:
            start = AppointmentService.CONSULTATION_PATH.index(appt.status) + 1

        for target in AppointmentService.CONSULTATION_PATH[start:]:
            APPOINTMENT_TRANSITIONS.check(appt.status, target)
            appt.status = target

        appt.notes = notes
        appt.save(update_fields=["status", "notes", "updated_at"])

        logger.info("Appointment %s consultation saved: %s -> %s", appt.id, prev_status, appt.status)
        return appt
