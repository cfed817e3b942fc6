# hospital_core/appointments/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hospital_core.accounts.api.serializers import (
    DoctorNameSerializer,
    DoctorNestedSerializer,
    PatientNestedSerializer,
)
from hospital_core.appointments.models import Appointment, AppointmentStatus


class AppointmentSerializer(serializers.ModelSerializer):
    """
    Flat record (as returned by create/update).
    """
    patient_id = serializers.UUIDField(read_only=True)
    doctor_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Appointment
        fields = [
            "id",
            "patient_id",
            "doctor_id",
            "appointment_date",
            "appointment_time",
            "symptoms",
            "status",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class AppointmentDetailSerializer(serializers.ModelSerializer):
    """
    Dashboard listing shape: patient and doctor nested with their user profile.
    """
    patient = PatientNestedSerializer(read_only=True)
    doctor = DoctorNestedSerializer(read_only=True)

    class Meta:
        model = Appointment
        fields = [
            "id",
            "appointment_date",
            "appointment_time",
            "symptoms",
            "status",
            "notes",
            "created_at",
            "patient",
            "doctor",
        ]
        read_only_fields = fields


class AppointmentBriefSerializer(serializers.ModelSerializer):
    """
    Used when an appointment hangs off a prescription or a bill.
    """
    doctor = DoctorNameSerializer(read_only=True)

    class Meta:
        model = Appointment
        fields = ["appointment_date", "doctor"]
        read_only_fields = fields


class AppointmentCreateSerializer(serializers.Serializer):
    # External user ids of the patient / doctor
    patient_id = serializers.CharField(max_length=128)
    doctor_id = serializers.CharField(max_length=128)
    appointment_date = serializers.DateField()
    appointment_time = serializers.TimeField()
    symptoms = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")


class AppointmentUpdateSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    status = serializers.ChoiceField(choices=AppointmentStatus.choices)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class ConsultationSerializer(serializers.Serializer):
    notes = serializers.CharField()
