# hospital_core/appointments/models.py
from __future__ import annotations

from django.db import models

from hospital_core.accounts.models import Doctor, Patient
from hospital_core.common.models import BaseModel
from hospital_core.common.transitions import TransitionTable


class AppointmentStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    CONFIRMED = "confirmed", "Confirmed"
    IN_PROGRESS = "in_progress", "In Progress"
    COMPLETED = "completed", "Completed"
    CANCELLED = "cancelled", "Cancelled"


APPOINTMENT_TRANSITIONS = TransitionTable(
    field="status",
    transitions={
        AppointmentStatus.PENDING: {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED},
        AppointmentStatus.CONFIRMED: {AppointmentStatus.IN_PROGRESS, AppointmentStatus.CANCELLED},
        AppointmentStatus.IN_PROGRESS: {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED},
        AppointmentStatus.COMPLETED: set(),
        AppointmentStatus.CANCELLED: set(),
    },
)


class Appointment(BaseModel):
    """
    Booked by a patient, progressed by the doctor. Never deleted.
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="appointments")
    doctor = models.ForeignKey(Doctor, on_delete=models.PROTECT, related_name="appointments")

    appointment_date = models.DateField(db_index=True)
    appointment_time = models.TimeField()
    symptoms = models.TextField(blank=True)

    status = models.CharField(
        max_length=32,
        choices=AppointmentStatus.choices,
        default=AppointmentStatus.PENDING,
        db_index=True,
    )
    notes = models.TextField(null=True, blank=True)

    class Meta:
        db_table = "appointments_appointment"
        indexes = [
            models.Index(fields=["patient", "appointment_date"]),
            models.Index(fields=["doctor", "appointment_date"]),
        ]

    def __str__(self) -> str:
        return f"{self.appointment_date} {self.appointment_time} ({self.status})"
