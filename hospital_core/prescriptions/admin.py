from __future__ import annotations

from django.contrib import admin

from hospital_core.prescriptions.models import Prescription


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ("id", "appointment", "medicine", "dosage", "frequency", "duration", "created_at")
    search_fields = ("id", "medicine__name")
    readonly_fields = ("created_at", "updated_at")
