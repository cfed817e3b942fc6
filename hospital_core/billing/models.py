# hospital_core/billing/models.py
from __future__ import annotations

from decimal import Decimal

from django.db import models

from hospital_core.accounts.models import Patient
from hospital_core.appointments.models import Appointment
from hospital_core.common.models import BaseModel
from hospital_core.common.transitions import TransitionTable


class PaymentStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"


BILL_TRANSITIONS = TransitionTable(
    field="payment_status",
    transitions={
        PaymentStatus.PENDING: {PaymentStatus.PAID},
        PaymentStatus.PAID: set(),
    },
)


class Bill(BaseModel):
    """
    Invoice for a patient, optionally tied to one appointment.
    total_amount is always computed in BillingService, never taken from input.
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="bills")
    appointment = models.ForeignKey(
        Appointment,
        on_delete=models.PROTECT,
        related_name="bills",
        null=True,
        blank=True,
    )

    consultation_fee = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    medicine_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    room_charges = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    other_charges = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    payment_status = models.CharField(
        max_length=16,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
        db_index=True,
    )
    payment_date = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "billing_bill"
        indexes = [
            models.Index(fields=["patient", "created_at"]),
        ]

    def __str__(self) -> str:
        return f"Bill {self.id} {self.total_amount} ({self.payment_status})"
