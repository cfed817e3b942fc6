# hospital_core/rooms/selectors.py
from __future__ import annotations

from django.db.models import Prefetch, QuerySet

from hospital_core.rooms.models import AssignmentStatus, Room, RoomAssignment


def rooms_with_active_assignments() -> QuerySet[Room]:
    """
    Every room by room number; `active_assignments` holds only ACTIVE rows
    (empty list for a free room).
    """
    active = RoomAssignment.objects.filter(status=AssignmentStatus.ACTIVE).select_related("patient__user")
    return Room.objects.order_by("room_number").prefetch_related(
        Prefetch("assignments", queryset=active, to_attr="active_assignments")
    )
