# hospital_core/prescriptions/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hospital_core.appointments.api.serializers import AppointmentBriefSerializer
from hospital_core.pharmacy.api.serializers import MedicineBriefSerializer
from hospital_core.prescriptions.models import Prescription


class PrescriptionSerializer(serializers.ModelSerializer):
    appointment_id = serializers.UUIDField(read_only=True)
    medicine_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Prescription
        fields = [
            "id",
            "appointment_id",
            "medicine_id",
            "dosage",
            "frequency",
            "duration",
            "instructions",
            "created_at",
        ]
        read_only_fields = fields


class PrescriptionDetailSerializer(serializers.ModelSerializer):
    appointment_id = serializers.UUIDField(read_only=True)
    medicine = MedicineBriefSerializer(read_only=True)
    appointment = AppointmentBriefSerializer(read_only=True)

    class Meta:
        model = Prescription
        fields = [
            "id",
            "appointment_id",
            "dosage",
            "frequency",
            "duration",
            "instructions",
            "created_at",
            "medicine",
            "appointment",
        ]
        read_only_fields = fields


class PrescriptionCreateSerializer(serializers.Serializer):
    appointment_id = serializers.UUIDField()
    medicine_id = serializers.UUIDField()
    dosage = serializers.CharField(max_length=128)
    frequency = serializers.CharField(max_length=128)
    duration = serializers.CharField(max_length=128)
    instructions = serializers.CharField(required=False, allow_blank=True, allow_null=True)
