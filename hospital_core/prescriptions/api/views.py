from __future__ import annotations

from uuid import UUID

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.prescriptions.api.serializers import (
    PrescriptionCreateSerializer,
    PrescriptionDetailSerializer,
    PrescriptionSerializer,
)
from hospital_core.prescriptions.selectors import prescriptions_for
from hospital_core.prescriptions.services import PrescriptionService


def _uuid_or_none(value: str | None, field_name: str) -> UUID | None:
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        raise DRFValidationError({field_name: "Invalid UUID"})


class PrescriptionsView(APIView):
    """
    /prescriptions/
    - GET: prescriptions for a patient (external user id) and/or one appointment
    - POST: doctor prescribes a medicine during a consultation
    """

    @extend_schema(
        tags=["Prescriptions"],
        responses={200: PrescriptionDetailSerializer(many=True)},
        parameters=[
            OpenApiParameter(
                name="patient_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="External user id of the patient.",
            ),
            OpenApiParameter(
                name="appointment_id",
                type=OpenApiTypes.UUID,
                location=OpenApiParameter.QUERY,
                required=False,
            ),
        ],
    )
    def get(self, request):
        items = prescriptions_for(
            patient_user_id=request.query_params.get("patient_id"),
            appointment_id=_uuid_or_none(request.query_params.get("appointment_id"), "appointment_id"),
            resolver=IdentityResolver(),
        )
        return Response({"prescriptions": PrescriptionDetailSerializer(items, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(tags=["Prescriptions"], request=PrescriptionCreateSerializer, responses={201: PrescriptionSerializer})
    def post(self, request):
        ser = PrescriptionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        rx = PrescriptionService.create(**ser.validated_data)
        return Response({"prescription": PrescriptionSerializer(rx).data}, status=status.HTTP_201_CREATED)
