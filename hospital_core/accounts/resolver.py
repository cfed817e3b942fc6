# hospital_core/accounts/resolver.py
from __future__ import annotations

import logging
from uuid import UUID

from hospital_core.accounts.models import Doctor, Patient, UserRole
from hospital_core.common.api.exceptions import UnresolvedReferenceError

logger = logging.getLogger(__name__)


class IdentityResolver:
    """
    Translates an external user id into the internal Patient/Doctor id.

    One instance per request: answers are memoised on the instance, so a
    workflow that resolves the same user twice hits the database once, and
    nothing leaks between requests.

    - lookup()  -> UUID | None    (reads: caller short-circuits to an empty result)
    - require_*() -> UUID          (writes: raises UnresolvedReferenceError)
    """

    _MODELS = {
        UserRole.PATIENT: Patient,
        UserRole.DOCTOR: Doctor,
    }

    def __init__(self) -> None:
        self._cache: dict[tuple[str, str], UUID | None] = {}

    def lookup(self, user_id: str | None, role: str) -> UUID | None:
        if role not in self._MODELS:
            raise ValueError(f"Unknown role '{role}'.")

        key = (role, str(user_id or "").strip())
        if not key[1]:
            return None

        if key not in self._cache:
            model = self._MODELS[role]
            self._cache[key] = (
                model.objects.filter(user_id=key[1]).values_list("id", flat=True).first()
            )
            if self._cache[key] is None:
                logger.info("No %s record for user %s", role, key[1])

        return self._cache[key]

    def require(self, user_id: str | None, role: str, *, field: str) -> UUID:
        record_id = self.lookup(user_id, role)
        if record_id is None:
            raise UnresolvedReferenceError(
                {"detail": f"No {role} record found for user '{user_id}'.", "field": field}
            )
        return record_id

    def patient_id(self, user_id: str | None) -> UUID | None:
        return self.lookup(user_id, UserRole.PATIENT)

    def doctor_id(self, user_id: str | None) -> UUID | None:
        return self.lookup(user_id, UserRole.DOCTOR)

    def require_patient(self, user_id: str | None, *, field: str = "patient_id") -> UUID:
        return self.require(user_id, UserRole.PATIENT, field=field)

    def require_doctor(self, user_id: str | None, *, field: str = "doctor_id") -> UUID:
        return self.require(user_id, UserRole.DOCTOR, field=field)
