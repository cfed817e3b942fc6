# hospital_core/pharmacy/models.py
from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from hospital_core.common.models import BaseModel


class Medicine(BaseModel):
    """
    Stock record in the medicine catalog.
    Stock is adjusted through inventory updates only (prescribing does not decrement it).
    """
    name = models.CharField(max_length=255, unique=True)
    category = models.CharField(max_length=128, db_index=True)

    stock_quantity = models.PositiveIntegerField(default=0)
    price_per_unit = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )

    description = models.TextField(null=True, blank=True)
    manufacturer = models.CharField(max_length=255, null=True, blank=True)

    class Meta:
        db_table = "pharmacy_medicine"
        indexes = [
            models.Index(fields=["category", "name"]),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.stock_quantity} in stock)"
