# hospital_core/prescriptions/models.py
from __future__ import annotations

from django.db import models

from hospital_core.appointments.models import Appointment
from hospital_core.common.models import BaseModel
from hospital_core.pharmacy.models import Medicine


class Prescription(BaseModel):
    """
    One medicine prescribed during a consultation. Immutable once written.
    """
    appointment = models.ForeignKey(Appointment, on_delete=models.PROTECT, related_name="prescriptions")
    medicine = models.ForeignKey(Medicine, on_delete=models.PROTECT, related_name="prescriptions")

    dosage = models.CharField(max_length=128)
    frequency = models.CharField(max_length=128)
    duration = models.CharField(max_length=128)
    instructions = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "prescriptions_prescription"
        indexes = [
            models.Index(fields=["appointment", "created_at"]),
        ]

    def __str__(self) -> str:
        return f"{self.medicine_id} {self.dosage} {self.frequency}"
