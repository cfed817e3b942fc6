# hospital_core/accounts/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from hospital_core.accounts.models import Doctor, User
from hospital_core.common.api.exceptions import NotFoundError


def get_user(*, user_id: str) -> User:
    user = User.objects.select_related("patient", "doctor").filter(id=user_id).first()
    if user is None:
        raise NotFoundError("User not found.")
    return user


def list_doctors(*, department: str | None = None) -> QuerySet[Doctor]:
    qs = Doctor.objects.select_related("user")

    if department:
        qs = qs.filter(department__iexact=department)

    return qs.order_by("user__full_name")
