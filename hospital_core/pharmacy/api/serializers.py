# hospital_core/pharmacy/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from hospital_core.pharmacy.models import Medicine


class MedicineSerializer(serializers.ModelSerializer):
    class Meta:
        model = Medicine
        fields = [
            "id",
            "name",
            "category",
            "stock_quantity",
            "price_per_unit",
            "description",
            "manufacturer",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class MedicineBriefSerializer(serializers.ModelSerializer):
    class Meta:
        model = Medicine
        fields = ["name", "category"]
        read_only_fields = fields


class MedicineCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    category = serializers.CharField(max_length=128)
    stock_quantity = serializers.IntegerField(min_value=0)
    price_per_unit = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    manufacturer = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True, default=None)


class MedicineUpdateSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    stock_quantity = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    price_per_unit = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
