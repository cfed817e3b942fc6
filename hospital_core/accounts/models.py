# hospital_core/accounts/models.py
from __future__ import annotations

from django.db import models

from hospital_core.common.models import BaseModel, TimeStampedModel


class UserRole(models.TextChoices):
    DOCTOR = "doctor", "Doctor"
    PATIENT = "patient", "Patient"


class User(TimeStampedModel):
    """
    Profile of an identity issued by the external identity provider.
    The primary key IS the provider's user id; role never changes after creation.
    """
    id = models.CharField(primary_key=True, max_length=128)
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=16, choices=UserRole.choices, db_index=True)
    full_name = models.CharField(max_length=255)
    phone = models.CharField(max_length=32, blank=True)
    age = models.PositiveSmallIntegerField(null=True, blank=True)

    class Meta:
        db_table = "accounts_user"

    def __str__(self) -> str:
        return f"{self.full_name} <{self.email}> ({self.role})"


class Patient(BaseModel):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="patient")
    blood_group = models.CharField(max_length=8, default="O+")
    emergency_contact = models.CharField(max_length=64, blank=True)

    class Meta:
        db_table = "accounts_patient"

    def __str__(self) -> str:
        return f"Patient {self.user.full_name}"


class Doctor(BaseModel):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="doctor")
    specialization = models.CharField(max_length=128, default="General Medicine")
    license_number = models.CharField(max_length=64, unique=True)
    department = models.CharField(max_length=128, default="General")
    experience_years = models.PositiveSmallIntegerField(default=0)

    class Meta:
        db_table = "accounts_doctor"
        indexes = [
            models.Index(fields=["department"]),
        ]

    def __str__(self) -> str:
        return f"Dr. {self.user.full_name} ({self.specialization})"
