# hospital_core/pharmacy/selectors.py
from __future__ import annotations

import django_filters
from django.db.models import Q, QuerySet
from rest_framework.exceptions import ValidationError

from hospital_core.pharmacy.models import Medicine


class MedicineFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    q = django_filters.CharFilter(method="filter_q")
    low_stock = django_filters.NumberFilter(field_name="stock_quantity", lookup_expr="lte")

    class Meta:
        model = Medicine
        fields = ["category"]

    def filter_q(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(Q(name__icontains=value) | Q(manufacturer__icontains=value))


def medicines_qs() -> QuerySet[Medicine]:
    return Medicine.objects.order_by("name")


def medicines_filtered(*, params=None) -> QuerySet[Medicine]:
    """
    Full catalog ordered by name; `params` (query dict) narrows it via MedicineFilter.
    Invalid filter values raise ValidationError.
    """
    qs = medicines_qs()
    if not params:
        return qs

    fs = MedicineFilter(data=params, queryset=qs)
    if not fs.is_valid():
        raise ValidationError(fs.errors)
    return fs.qs
