# hospital_core/rooms/models.py
from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q

from hospital_core.accounts.models import Patient
from hospital_core.common.models import BaseModel


class RoomStatus(models.TextChoices):
    AVAILABLE = "available", "Available"
    OCCUPIED = "occupied", "Occupied"
    MAINTENANCE = "maintenance", "Maintenance"


class AssignmentStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    DISCHARGED = "discharged", "Discharged"


class Room(BaseModel):
    room_number = models.CharField(max_length=16, unique=True)
    room_type = models.CharField(max_length=64)
    floor = models.IntegerField(default=1)
    daily_rate = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    status = models.CharField(
        max_length=16,
        choices=RoomStatus.choices,
        default=RoomStatus.AVAILABLE,
        db_index=True,
    )

    class Meta:
        db_table = "rooms_room"
        ordering = ["room_number"]

    def __str__(self) -> str:
        return f"Room {self.room_number} ({self.status})"


class RoomAssignment(BaseModel):
    """
    An admission. The room is OCCUPIED exactly while it has an ACTIVE assignment.
    """
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="room_assignments")
    room = models.ForeignKey(Room, on_delete=models.PROTECT, related_name="assignments")

    admission_date = models.DateField()
    discharge_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=16,
        choices=AssignmentStatus.choices,
        default=AssignmentStatus.ACTIVE,
        db_index=True,
    )

    class Meta:
        db_table = "rooms_assignment"
        constraints = [
            models.UniqueConstraint(
                fields=["room"],
                condition=Q(status="active"),
                name="uq_room_single_active_assignment",
            )
        ]
        indexes = [
            models.Index(fields=["patient", "status"]),
        ]

    def __str__(self) -> str:
        return f"{self.room_id} / {self.patient_id} ({self.status})"
