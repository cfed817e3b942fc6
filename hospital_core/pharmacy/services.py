# hospital_core/pharmacy/services.py
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from rest_framework.exceptions import ValidationError

from hospital_core.common.api.exceptions import ConflictError, NotFoundError
from hospital_core.pharmacy.models import Medicine

logger = logging.getLogger(__name__)


def _to_quantity(value, field: str = "stock_quantity") -> int:
    try:
        qty = int(Decimal(str(value)))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: "Must be a whole number."})
    if qty < 0:
        raise ValidationError({field: "Must be >= 0."})
    return qty


def _to_price(value, field: str = "price_per_unit") -> Decimal:
    try:
        price = Decimal(str(value)).quantize(Decimal("0.01"))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: "Must be a number."})
    if price < 0:
        raise ValidationError({field: "Must be >= 0."})
    return price


def _blank_to_none(value: str | None) -> str | None:
    value = (value or "").strip()
    return value or None


class MedicineService:
    @staticmethod
    def _get(medicine_id: UUID, *, for_update: bool = False) -> Medicine:
        qs = Medicine.objects.select_for_update() if for_update else Medicine.objects
        med = qs.filter(id=medicine_id).first()
        if med is None:
            raise NotFoundError("Medicine not found.")
        return med

    @staticmethod
    @transaction.atomic
    def create(
        *,
        name: str,
        category: str,
        stock_quantity,
        price_per_unit,
        description: str | None = None,
        manufacturer: str | None = None,
    ) -> Medicine:
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": "This field is required."})

        if Medicine.objects.filter(name__iexact=name).exists():
            raise ValidationError({"name": "A medicine with this name already exists."})

        try:
            with transaction.atomic():
                med = Medicine.objects.create(
                    name=name,
                    category=(category or "").strip(),
                    stock_quantity=_to_quantity(stock_quantity),
                    price_per_unit=_to_price(price_per_unit),
                    description=_blank_to_none(description),
                    manufacturer=_blank_to_none(manufacturer),
                )
        except IntegrityError:
            raise ValidationError({"name": "A medicine with this name already exists."})

        logger.info("Medicine %s created: %s (stock=%s)", med.id, med.name, med.stock_quantity)
        return med

    @staticmethod
    @transaction.atomic
    def update(*, medicine_id: UUID, stock_quantity=None, price_per_unit=None) -> Medicine:
        """
        Partial update of stock and price only. Omitted fields are left alone.
        """
        med = MedicineService._get(medicine_id, for_update=True)

        update_fields = []
        if stock_quantity is not None:
            med.stock_quantity = _to_quantity(stock_quantity)
            update_fields.append("stock_quantity")
        if price_per_unit is not None:
            med.price_per_unit = _to_price(price_per_unit)
            update_fields.append("price_per_unit")

        if not update_fields:
            raise ValidationError({"detail": "Provide stock_quantity and/or price_per_unit."})

        med.save(update_fields=[*update_fields, "updated_at"])

        logger.info("Medicine %s updated: %s", med.id, ", ".join(update_fields))
        return med

    @staticmethod
    @transaction.atomic
    def delete(*, medicine_id: UUID) -> None:
        med = MedicineService._get(medicine_id, for_update=True)

        try:
            with transaction.atomic():
                med.delete()
        except ProtectedError:
            raise ConflictError("Medicine is referenced by prescriptions and cannot be deleted.")

        logger.info("Medicine %s deleted", medicine_id)
