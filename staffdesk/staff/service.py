"""Staff record service.

Sits between the API routes and :class:`StaffRepository`.  Every record
that reaches the store has passed through the field normalizers:

* ``nic_number`` — canonical 12-digit form (``NICError`` propagates with
  its kind)
* ``contact_number`` — E.164
* ``email`` — lowercased
* ``increment_date`` — zero-padded ``dd-MM``
* ``date_of_retirement`` — derived from the birth date and the configured
  retirement age

The service flushes but never commits; the session owner decides.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from staffdesk.core.constants import MAX_STAFF_AGE, MIN_STAFF_AGE
from staffdesk.core.settings import Settings, get_settings
from staffdesk.db.models import Staff
from staffdesk.db.repositories import StaffRepository
from staffdesk.normalization.date_normalizer import (
    calculate_age,
    calculate_retirement_date,
    normalize_increment_date,
)
from staffdesk.normalization.email_normalizer import is_valid_email, normalize_email
from staffdesk.normalization.nic_codec import derive_nic_info
from staffdesk.normalization.phone_normalizer import normalize_phone
from staffdesk.staff.schemas import StaffIn, StaffSearch, StaffStatistics

logger = logging.getLogger(__name__)


class StaffNotFoundError(LookupError):
    """Raised when no staff record has the requested id."""


class DuplicateAppointmentError(ValueError):
    """Raised when another record already uses the appointment number."""


class StaffValidationError(ValueError):
    """Raised when a field fails normalization or a cross-field rule."""


class StaffService:
    def __init__(self, db: Session, settings: Settings | None = None) -> None:
        self.db = db
        self.settings = settings or get_settings()
        self.repo = StaffRepository(db)

    def _today(self) -> date:
        return date.today()

    def _prepare(self, payload: StaffIn) -> dict[str, Any]:
        info = derive_nic_info(payload.nic_number)
        if info.sex.value != payload.gender:
            logger.warning(
                "Gender on record %s does not match the NIC sex marker", payload.appointment_number
            )

        contact_number = normalize_phone(
            payload.contact_number, default_region=self.settings.phone_default_region
        )
        if contact_number is None:
            raise StaffValidationError("contact_number is not a valid phone number")

        email = None
        if payload.email is not None:
            email = normalize_email(payload.email)
            if not is_valid_email(email):
                raise StaffValidationError("email is not a valid email address")

        increment_date = normalize_increment_date(payload.increment_date)
        if increment_date is None:
            raise StaffValidationError("increment_date must be a valid dd-MM date")

        age = calculate_age(payload.date_of_birth, self._today())
        if not MIN_STAFF_AGE <= age <= MAX_STAFF_AGE:
            raise StaffValidationError(f"Age must be between {MIN_STAFF_AGE} and {MAX_STAFF_AGE}")

        if payload.date_of_first_appointment < payload.date_of_birth:
            raise StaffValidationError("date_of_first_appointment cannot precede date_of_birth")

        fields = payload.model_dump()
        fields.update(
            nic_number=info.canonical_form,
            contact_number=contact_number,
            email=email,
            increment_date=increment_date,
            date_of_retirement=calculate_retirement_date(
                payload.date_of_birth, self.settings.retirement_age
            ),
        )
        return fields

    def _ensure_unique_appointment(self, appointment_number: str, *, exclude_id: int | None = None) -> None:
        existing = self.repo.get_by_appointment_number(appointment_number)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateAppointmentError(f"Appointment number {appointment_number!r} already exists")

    # -----------------------------------------------------------------------
    # Operations
    # -----------------------------------------------------------------------

    def create(self, payload: StaffIn) -> Staff:
        fields = self._prepare(payload)
        self._ensure_unique_appointment(payload.appointment_number)
        staff = self.repo.create(**fields)
        logger.info("Staff record created (id=%d)", staff.id)
        return staff

    def get(self, staff_id: int) -> Staff:
        staff = self.repo.get(staff_id)
        if staff is None:
            raise StaffNotFoundError(f"Staff record {staff_id} not found")
        return staff

    def list_all(self) -> list[Staff]:
        return self.repo.list()

    def search(self, criteria: StaffSearch) -> list[Staff]:
        return self.repo.search(criteria, today=self._today())

    def statistics(self) -> StaffStatistics:
        return self.repo.statistics()

    def update(self, staff_id: int, payload: StaffIn) -> Staff:
        staff = self.get(staff_id)
        fields = self._prepare(payload)
        self._ensure_unique_appointment(payload.appointment_number, exclude_id=staff_id)
        self.repo.update(staff, **fields)
        logger.info("Staff record updated (id=%d)", staff_id)
        return staff

    def delete(self, staff_id: int) -> None:
        staff = self.get(staff_id)
        self.repo.delete(staff)
        logger.info("Staff record deleted (id=%d)", staff_id)

    def age_of(self, staff: Staff) -> int:
        return calculate_age(staff.date_of_birth, self._today())
