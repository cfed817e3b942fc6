# hospital_core/prescriptions/services.py
from __future__ import annotations

import logging
from uuid import UUID

from django.db import transaction
from rest_framework.exceptions import ValidationError

from hospital_core.appointments.models import Appointment, AppointmentStatus
from hospital_core.common.api.exceptions import UnresolvedReferenceError
from hospital_core.pharmacy.models import Medicine
from hospital_core.prescriptions.models import Prescription

logger = logging.getLogger(__name__)


# Prescribing happens inside the consultation form, before it is saved;
# only a cancelled visit is closed to new prescriptions.
CLOSED_STATUSES = {AppointmentStatus.CANCELLED.value}


class PrescriptionService:
    @staticmethod
    @transaction.atomic
    def create(
        *,
        appointment_id: UUID,
        medicine_id: UUID,
        dosage: str,
        frequency: str,
        duration: str,
        instructions: str | None = None,
    ) -> Prescription:
        """
        Stock is not touched here; inventory is maintained through MedicineService.update().
        """
        missing = {}
        for field, value in (("dosage", dosage), ("frequency", frequency), ("duration", duration)):
            if not (value or "").strip():
                missing[field] = "This field is required."
        if missing:
            raise ValidationError(missing)

        appt = Appointment.objects.filter(id=appointment_id).only("id", "status").first()
        if appt is None:
            raise UnresolvedReferenceError({"detail": "Appointment not found.", "field": "appointment_id"})

        if not Medicine.objects.filter(id=medicine_id).exists():
            raise UnresolvedReferenceError({"detail": "Medicine not found.", "field": "medicine_id"})

        if appt.status in CLOSED_STATUSES:
            raise ValidationError({"appointment_id": "Cannot prescribe for a cancelled appointment."})

        rx = Prescription.objects.create(
            appointment_id=appt.id,
            medicine_id=medicine_id,
            dosage=dosage.strip(),
            frequency=frequency.strip(),
            duration=duration.strip(),
            instructions=(instructions or "").strip() or None,
        )

        logger.info("Prescription %s written: appointment=%s medicine=%s", rx.id, appt.id, medicine_id)
        return rx
