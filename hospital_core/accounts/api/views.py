from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from hospital_core.accounts.api.serializers import (
    DoctorDirectorySerializer,
    UserProfileSerializer,
    UserRegisterSerializer,
)
from hospital_core.accounts.selectors import get_user, list_doctors
from hospital_core.accounts.services import AccountService


class UsersView(APIView):
    """
    /users/
    - POST: create the profile (+ patient/doctor record) for a provider-issued identity
    """

    @extend_schema(tags=["Accounts"], request=UserRegisterSerializer, responses={201: UserProfileSerializer})
    def post(self, request):
        ser = UserRegisterSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        data = dict(ser.validated_data)
        user = AccountService.register(user_id=data.pop("id"), **data)

        user = get_user(user_id=user.id)
        return Response({"user": UserProfileSerializer(user).data}, status=status.HTTP_201_CREATED)


class UserDetailView(APIView):
    @extend_schema(tags=["Accounts"], responses={200: UserProfileSerializer})
    def get(self, request, user_id: str):
        user = get_user(user_id=user_id)
        return Response({"user": UserProfileSerializer(user).data}, status=status.HTTP_200_OK)


class DoctorsView(APIView):
    @extend_schema(
        tags=["Accounts"],
        responses={200: DoctorDirectorySerializer(many=True)},
        parameters=[
            OpenApiParameter(name="department", type=OpenApiTypes.STR, location=OpenApiParameter.QUERY, required=False),
        ],
    )
    def get(self, request):
        qs = list_doctors(department=request.query_params.get("department"))
        return Response({"doctors": DoctorDirectorySerializer(qs, many=True).data}, status=status.HTTP_200_OK)
