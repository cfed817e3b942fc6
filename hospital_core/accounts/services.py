# hospital_core/accounts/services.py
from __future__ import annotations

import logging
import time
import uuid

from django.db import IntegrityError, transaction
from rest_framework.exceptions import ValidationError

from hospital_core.accounts.models import Doctor, Patient, User, UserRole

logger = logging.getLogger(__name__)


class AccountService:
    """
    Profile records for identities created by the external identity provider.
    Sign-in / passwords are not handled here.
    """

    @staticmethod
    def _default_license_number() -> str:
        # suffix keeps same-millisecond registrations unique
        return f"LIC{int(time.time() * 1000)}{uuid.uuid4().hex[:4].upper()}"

    @staticmethod
    @transaction.atomic
    def register(
        *,
        user_id: str,
        email: str,
        role: str,
        full_name: str,
        phone: str = "",
        age: int | None = None,
        specialization: str = "",
        license_number: str = "",
        department: str = "",
        blood_group: str = "",
        emergency_contact: str = "",
    ) -> User:
        """
        Creates the User row and its role-specific record as one unit.
        """
        if role not in UserRole.values:
            raise ValidationError({"role": f"Role must be one of {', '.join(UserRole.values)}."})

        if User.objects.filter(id=user_id).exists():
            raise ValidationError({"id": "A user with this id already exists."})
        if User.objects.filter(email__iexact=email).exists():
            raise ValidationError({"email": "A user with this email already exists."})

        try:
            with transaction.atomic():
                user = User.objects.create(
                    id=user_id,
                    email=email,
                    role=role,
                    full_name=full_name,
                    phone=phone or "",
                    age=age,
                )

                if role == UserRole.DOCTOR:
                    Doctor.objects.create(
                        user=user,
                        specialization=specialization or "General Medicine",
                        license_number=license_number or AccountService._default_license_number(),
                        department=department or "General",
                        experience_years=0,
                    )
                else:
                    Patient.objects.create(
                        user=user,
                        blood_group=blood_group or "O+",
                        emergency_contact=emergency_contact or phone or "",
                    )
        except IntegrityError:
            # Raced with a concurrent registration or a duplicate licence number.
            raise ValidationError({"detail": "User or licence number already registered."})

        logger.info("Registered %s user %s", role, user.id)
        return user
