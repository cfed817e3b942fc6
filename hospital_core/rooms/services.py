# hospital_core/rooms/services.py
from __future__ import annotations

import logging
from datetime import date
from uuid import UUID

from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from hospital_core.accounts.resolver import IdentityResolver
from hospital_core.common.api.exceptions import ConflictError, NotFoundError, UnresolvedReferenceError
from hospital_core.rooms.models import AssignmentStatus, Room, RoomAssignment, RoomStatus

logger = logging.getLogger(__name__)


class RoomAssignmentService:
    @staticmethod
    @transaction.atomic
    def assign(
        *,
        patient_user_id: str,
        room_id: UUID,
        admission_date: date,
        resolver: IdentityResolver | None = None,
    ) -> RoomAssignment:
        """
        Admits a patient: room -> OCCUPIED and a new ACTIVE assignment.
        The room row is locked for the duration, so two concurrent admissions
        to the same room cannot both succeed.
        """
        if not admission_date:
            raise ValidationError({"admission_date": "This field is required."})

        resolver = resolver or IdentityResolver()
        patient_id = resolver.require_patient(patient_user_id, field="patient_user_id")

        room = Room.objects.select_for_update().filter(id=room_id).first()
        if room is None:
            raise UnresolvedReferenceError({"detail": "Room not found.", "field": "room_id"})

        if room.status != RoomStatus.AVAILABLE:
            raise ConflictError(f"Room {room.room_number} is not available (status: {room.status}).")

        room.status = RoomStatus.OCCUPIED
        room.save(update_fields=["status", "updated_at"])

        try:
            with transaction.atomic():
                assignment = RoomAssignment.objects.create(
                    patient_id=patient_id,
                    room=room,
                    admission_date=admission_date,
                    status=AssignmentStatus.ACTIVE,
                )
        except IntegrityError:
            raise ConflictError(f"Room {room.room_number} already has an active assignment.")

        logger.info("Room %s assigned to patient %s (assignment %s)", room.room_number, patient_id, assignment.id)
        return assignment

    @staticmethod
    @transaction.atomic
    def discharge(*, assignment_id: UUID, discharge_date: date | None = None) -> RoomAssignment:
        assignment = (
            RoomAssignment.objects.select_for_update()
            .select_related("room")
            .filter(id=assignment_id)
            .first()
        )
        if assignment is None:
            raise NotFoundError("Room assignment not found.")

        if assignment.status != AssignmentStatus.ACTIVE:
            raise ValidationError({"status": "Only active assignments can be discharged."})

        discharge_date = discharge_date or timezone.localdate()
        if discharge_date < assignment.admission_date:
            raise ValidationError({"discharge_date": "Discharge date cannot be before admission date."})

        assignment.status = AssignmentStatus.DISCHARGED
        assignment.discharge_date = discharge_date
        assignment.save(update_fields=["status", "discharge_date", "updated_at"])

        room = Room.objects.select_for_update().get(id=assignment.room_id)
        room.status = RoomStatus.AVAILABLE
        room.save(update_fields=["status", "updated_at"])

        logger.info("Assignment %s discharged; room %s available", assignment.id, room.room_number)
        return assignment
