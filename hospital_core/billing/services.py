# hospital_core/billing/services.py
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from uuid import UUID

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.appointments.models import Appointment
from hospital_core.billing.models import BILL_TRANSITIONS, Bill, PaymentStatus
from hospital_core.common.api.exceptions import NotFoundError, UnresolvedReferenceError

logger = logging.getLogger(__name__)


CHARGE_FIELDS = ("consultation_fee", "medicine_cost", "room_charges", "other_charges")


def _charge(value, field: str) -> Decimal:
    if value is None or value == "":
        return Decimal("0.00")
    try:
        amount = Decimal(str(value)).quantize(Decimal("0.01"))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: "Must be a number."})
    if amount < 0:
        raise ValidationError({field: "Must be >= 0."})
    return amount


class BillingService:
    @staticmethod
    @transaction.atomic
    def create(
        *,
        patient_user_id: str,
        appointment_id: UUID | None = None,
        consultation_fee=None,
        medicine_cost=None,
        room_charges=None,
        other_charges=None,
        resolver: IdentityResolver | None = None,
    ) -> Bill:
        """
        Missing charges count as 0. total_amount = sum of the four charges.
        """
        resolver = resolver or IdentityResolver()
        patient_id = resolver.require_patient(patient_user_id, field="patient_user_id")

        charges = {
            "consultation_fee": _charge(consultation_fee, "consultation_fee"),
            "medicine_cost": _charge(medicine_cost, "medicine_cost"),
            "room_charges": _charge(room_charges, "room_charges"),
            "other_charges": _charge(other_charges, "other_charges"),
        }
        total = sum(charges.values(), Decimal("0.00")).quantize(Decimal("0.01"))

        if appointment_id:
            appt_patient_id = (
                Appointment.objects.filter(id=appointment_id).values_list("patient_id", flat=True).first()
            )
            if appt_patient_id is None:
                raise UnresolvedReferenceError({"detail": "Appointment not found.", "field": "appointment_id"})
            if appt_patient_id != patient_id:
                raise ValidationError({"appointment_id": "Appointment does not belong to this patient."})

        bill = Bill.objects.create(
            patient_id=patient_id,
            appointment_id=appointment_id or None,
            total_amount=total,
            payment_status=PaymentStatus.PENDING,
            **charges,
        )

        logger.info("Bill %s created for patient %s: total=%s", bill.id, patient_id, total)
        return bill

    @staticmethod
    @transaction.atomic
    def update(*, bill_id: UUID, payment_status: str) -> Bill:
        bill = Bill.objects.select_for_update().filter(id=bill_id).first()
        if bill is None:
            raise NotFoundError("Bill not found.")

        # Re-sending the current status changes nothing (payment_date included).
        if bill.payment_status == payment_status:
            return bill

        BILL_TRANSITIONS.check(bill.payment_status, payment_status)

        prev_status = bill.payment_status
        bill.payment_status = payment_status
        update_fields = ["payment_status", "updated_at"]

        if payment_status == PaymentStatus.PAID:
            bill.payment_date = timezone.now()
            update_fields.append("payment_date")

        bill.save(update_fields=update_fields)

        logger.info("Bill %s: %s -> %s", bill.id, prev_status, bill.payment_status)
        return bill
