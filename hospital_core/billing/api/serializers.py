# hospital_core/billing/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hospital_core.accounts.api.serializers import PatientNameSerializer, PatientUserRefSerializer
from hospital_core.appointments.api.serializers import AppointmentBriefSerializer
from hospital_core.billing.models import Bill, PaymentStatus


class BillSerializer(serializers.ModelSerializer):
    patient_id = serializers.UUIDField(read_only=True)
    appointment_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = Bill
        fields = [
            "id",
            "patient_id",
            "appointment_id",
            "consultation_fee",
            "medicine_cost",
            "room_charges",
            "other_charges",
            "total_amount",
            "payment_status",
            "payment_date",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BillDetailSerializer(BillSerializer):
    patient = PatientNameSerializer(read_only=True)
    appointment = AppointmentBriefSerializer(read_only=True, allow_null=True)

    class Meta(BillSerializer.Meta):
        fields = [*BillSerializer.Meta.fields, "patient", "appointment"]
        read_only_fields = fields


def _charge_field():
    return serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        required=False,
        allow_null=True,
    )


class BillCreateSerializer(PatientUserRefSerializer):
    # no total_amount: it is always computed
    appointment_id = serializers.UUIDField(required=False, allow_null=True)
    consultation_fee = _charge_field()
    medicine_cost = _charge_field()
    room_charges = _charge_field()
    other_charges = _charge_field()


class BillUpdateSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices)
