from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_core.pharmacy.api.serializers import (
    MedicineCreateSerializer,
    MedicineSerializer,
    MedicineUpdateSerializer,
)
from hospital_core.pharmacy.selectors import medicines_filtered
from hospital_core.pharmacy.services import MedicineService


class MedicinesView(APIView):
    """
    /medicines/
    - GET: catalog ordered by name (optional category / q / low_stock filters)
    - POST: add a medicine
    - PUT: update stock_quantity / price_per_unit of the medicine given by body `id`
    """

    @extend_schema(
        tags=["Inventory"],
        responses={200: MedicineSerializer(many=True)},
        parameters=[
            OpenApiParameter(name="category", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
            OpenApiParameter(
                name="q",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Case-insensitive match on name or manufacturer.",
            ),
            OpenApiParameter(
                name="low_stock",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only medicines with stock_quantity <= this value.",
            ),
        ],
    )
    def get(self, request):
        qs = medicines_filtered(params=request.query_params)
        return Response({"medicines": MedicineSerializer(qs, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(tags=["Inventory"], request=MedicineCreateSerializer, responses={201: MedicineSerializer})
    def post(self, request):
        ser = MedicineCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        med = MedicineService.create(**ser.validated_data)
        return Response({"medicine": MedicineSerializer(med).data}, status=status.HTTP_201_CREATED)

    @extend_schema(tags=["Inventory"], request=MedicineUpdateSerializer, responses={200: MedicineSerializer})
    def put(self, request):
        ser = MedicineUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        med = MedicineService.update(
            medicine_id=ser.validated_data["id"],
            stock_quantity=ser.validated_data.get("stock_quantity"),
            price_per_unit=ser.validated_data.get("price_per_unit"),
        )
        return Response({"medicine": MedicineSerializer(med).data}, status=status.HTTP_200_OK)


class MedicineDetailView(APIView):
    @extend_schema(tags=["Inventory"], responses={200: OpenApiTypes.OBJECT})
    def delete(self, request, medicine_id: str):
        MedicineService.delete(medicine_id=medicine_id)
        return Response({"message": "Medicine deleted successfully"}, status=status.HTTP_200_OK)
