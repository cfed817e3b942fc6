# hospital_core/billing/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from hospital_core.billing.models import Bill


def bills_qs() -> QuerySet[Bill]:
    return Bill.objects.select_related("patient__user", "appointment__doctor__user")


def bills_filtered(*, patient_user_id: str | None = None) -> QuerySet[Bill]:
    qs = bills_qs().order_by("-created_at")

    if patient_user_id:
        qs = qs.filter(patient__user_id=patient_user_id)

    return qs
