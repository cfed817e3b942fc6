from __future__ import annotations

from django.contrib import admin

from hospital_core.billing.models import Bill


@admin.register(Bill)
class BillAdmin(admin.ModelAdmin):
    list_display = ("id", "patient", "appointment", "total_amount", "payment_status", "payment_date", "created_at")
    list_filter = ("payment_status",)
    readonly_fields = ("total_amount", "payment_date", "created_at", "updated_at")
