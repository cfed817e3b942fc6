# hospital_core/rooms/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hospital_core.accounts.api.serializers import PatientNameSerializer, PatientUserRefSerializer
from hospital_core.rooms.models import Room, RoomAssignment


class RoomAssignmentSerializer(serializers.ModelSerializer):
    patient_id = serializers.UUIDField(read_only=True)
    room_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = RoomAssignment
        fields = [
            "id",
            "patient_id",
            "room_id",
            "admission_date",
            "discharge_date",
            "status",
            "created_at",
        ]
        read_only_fields = fields


class ActiveAssignmentSerializer(serializers.ModelSerializer):
    patient = PatientNameSerializer(read_only=True)

    class Meta:
        model = RoomAssignment
        fields = ["id", "admission_date", "status", "patient"]
        read_only_fields = fields


class RoomSerializer(serializers.ModelSerializer):
    room_assignments = ActiveAssignmentSerializer(source="active_assignments", many=True, read_only=True)

    class Meta:
        model = Room
        fields = [
            "id",
            "room_number",
            "room_type",
            "floor",
            "daily_rate",
            "status",
            "room_assignments",
        ]
        read_only_fields = fields


class RoomAssignSerializer(PatientUserRefSerializer):
    room_id = serializers.UUIDField()
    admission_date = serializers.DateField()


class DischargeSerializer(serializers.Serializer):
    discharge_date = serializers.DateField(required=False, allow_null=True)
