from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.rooms.api.serializers import (
    DischargeSerializer,
    RoomAssignmentSerializer,
    RoomAssignSerializer,
    RoomSerializer,
)
from hospital_core.rooms.selectors import rooms_with_active_assignments
from hospital_core.rooms.services import RoomAssignmentService


class RoomsView(APIView):
    """
    /rooms/
    - GET: all rooms with their active assignment (if any)
    - POST: admit a patient into an available room
    """

    @extend_schema(tags=["Rooms"], responses={200: RoomSerializer(many=True)})
    def get(self, request):
        qs = rooms_with_active_assignments()
        return Response({"rooms": RoomSerializer(qs, many=True).data}, status=status.HTTP_200_OK)

    @extend_schema(tags=["Rooms"], request=RoomAssignSerializer, responses={201: RoomAssignmentSerializer})
    def post(self, request):
        ser = RoomAssignSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        assignment = RoomAssignmentService.assign(
            patient_user_id=ser.validated_data["patient_user_id"],
            room_id=ser.validated_data["room_id"],
            admission_date=ser.validated_data["admission_date"],
            resolver=IdentityResolver(),
        )
        return Response({"assignment": RoomAssignmentSerializer(assignment).data}, status=status.HTTP_201_CREATED)


class RoomDischargeView(APIView):
    """
    /rooms/assignments/<id>/discharge/
    """

    @extend_schema(tags=["Rooms"], request=DischargeSerializer, responses={200: RoomAssignmentSerializer})
    def post(self, request, assignment_id: str):
        ser = DischargeSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        assignment = RoomAssignmentService.discharge(
            assignment_id=assignment_id,
            discharge_date=ser.validated_data.get("discharge_date"),
        )
        return Response({"assignment": RoomAssignmentSerializer(assignment).data}, status=status.HTTP_200_OK)
