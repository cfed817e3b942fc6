from __future__ import annotations

from django.contrib import admin

from hospital_core.rooms.models import Room, RoomAssignment


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("room_number", "room_type", "floor", "daily_rate", "status")
    list_filter = ("status", "room_type", "floor")
    search_fields = ("room_number",)


@admin.register(RoomAssignment)
class RoomAssignmentAdmin(admin.ModelAdmin):
    list_display = ("id", "room", "patient", "admission_date", "discharge_date", "status")
    list_filter = ("status",)
    readonly_fields = ("created_at", "updated_at")
