from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.appointments.api.serializers import (
    AppointmentCreateSerializer,
    AppointmentDetailSerializer,
    AppointmentSerializer,
    AppointmentUpdateSerializer,
    ConsultationSerializer,
)
from hospital_core.appointments.selectors import appointments_for_users
from hospital_core.appointments.services import AppointmentService


class AppointmentsView(APIView):
    """
    /appointments/
    - GET: list, optionally filtered by patient_id / doctor_id (external user ids)
    - POST: patient books an appointment (status=pending)
    - PUT: doctor moves status / records notes for the appointment given by body `id`
    """

    @extend_schema(
        tags=["Appointments"],
        responses={200: AppointmentDetailSerializer(many=True)},
        parameters=[
            OpenApiParameter(
                name="patient_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="External user id of the patient.",
            ),
            OpenApiParameter(
                name="doctor_id",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=False,
                description="External user id of the doctor.",
            ),
        ],
    )
    def get(self, request):
        qs = appointments_for_users(
            patient_user_id=request.query_params.get("patient_id"),
            doctor_user_id=request.query_params.get("doctor_id"),
            resolver=IdentityResolver(),
        )
        return Response({"appointments": AppointmentDetailSerializer(qs, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(tags=["Appointments"], request=AppointmentCreateSerializer, responses={201: AppointmentSerializer})
    def post(self, request):
        ser = AppointmentCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        appt = AppointmentService.create(
            patient_user_id=ser.validated_data["patient_id"],
            doctor_user_id=ser.validated_data["doctor_id"],
            appointment_date=ser.validated_data["appointment_date"],
            appointment_time=ser.validated_data["appointment_time"],
            symptoms=ser.validated_data.get("symptoms"),
            resolver=IdentityResolver(),
        )
        return Response({"appointment": AppointmentSerializer(appt).data}, status=status.HTTP_201_CREATED)

    @extend_schema(tags=["Appointments"], request=AppointmentUpdateSerializer, responses={200: AppointmentSerializer})
    def put(self, request):
        ser = AppointmentUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        kwargs = {}
        if "notes" in ser.validated_data:
            kwargs["notes"] = ser.validated_data["notes"]

        appt = AppointmentService.update(
            appointment_id=ser.validated_data["id"],
            status=ser.validated_data["status"],
            **kwargs,
        )
        return Response({"appointment": AppointmentSerializer(appt).data}, status=status.HTTP_200_OK)


class AppointmentCompleteView(APIView):
    """
    /appointments/<id>/complete/
    One-step "save consultation": advances to completed and stores the notes.
    """

    @extend_schema(tags=["Appointments"], request=ConsultationSerializer, responses={200: AppointmentSerializer})
    def post(self, request, appointment_id: str):
        ser = ConsultationSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        appt = AppointmentService.complete_consultation(
            appointment_id=appointment_id,
            notes=ser.validated_data["notes"],
        )
        return Response({"appointment": AppointmentSerializer(appt).data}, status=status.HTTP_200_OK)
