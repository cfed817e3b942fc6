from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.billing.api.serializers import (
    BillCreateSerializer,
    BillDetailSerializer,
    BillSerializer,
    BillUpdateSerializer,
)
from hospital_core.billing.selectors import bills_filtered
from hospital_core.billing.services import BillingService


class BillsView(APIView):
    """
    /billing/
    - GET: bills, newest first, optionally for one patient (external user id)
    - POST: raise a bill; total is computed server-side
    - PUT: record payment for the bill given by body `id`
    """

    @extend_schema(
        tags=["Billing"],
        responses={200: BillDetailSerializer(many=True)},
        parameters=[
            OpenApiParameter(
                name="patient_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="External user id of the patient.",
            ),
        ],
    )
    def get(self, request):
        qs = bills_filtered(patient_user_id=request.query_params.get("patient_id"))
        return Response({"bills": BillDetailSerializer(qs, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(tags=["Billing"], request=BillCreateSerializer, responses={201: BillSerializer})
    def post(self, request):
        ser = BillCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        data = dict(ser.validated_data)
        bill = BillingService.create(
            patient_user_id=data.pop("patient_user_id"),
            resolver=IdentityResolver(),
            **data,
        )
        return Response({"bill": BillSerializer(bill).data}, status=status.HTTP_201_CREATED)

    @extend_schema(tags=["Billing"], request=BillUpdateSerializer, responses={200: BillSerializer})
    def put(self, request):
        ser = BillUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        bill = BillingService.update(
            bill_id=ser.validated_data["id"],
            payment_status=ser.validated_data["payment_status"],
        )
        return Response({"bill": BillSerializer(bill).data}, status=status.HTTP_200_OK)
