from django.contrib import admin

from hospital_core.pharmacy.models import Medicine


@admin.register(Medicine)
class MedicineAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "stock_quantity", "price_per_unit", "manufacturer", "updated_at")
    list_filter = ("category",)
    search_fields = ("name", "manufacturer")
    readonly_fields = ("created_at", "updated_at")
    ordering = ("name",)
