"""Pydantic schemas for staff records, search criteria and statistics."""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

from staffdesk.core.constants import (
    APPOINTMENT_NUMBER_MAX_LENGTH,
    APPOINTMENT_NUMBER_MIN_LENGTH,
    DESIGNATIONS,
    FULL_NAME_MAX_LENGTH,
    FULL_NAME_MIN_LENGTH,
    GENDERS,
    MARITAL_STATUSES,
    MAX_SEARCH_AGE,
    SALARY_CODES,
)
from staffdesk.normalization.date_normalizer import parse_display_date

_CHOICES: dict[str, tuple[str, ...]] = {
    "designation": DESIGNATIONS,
    "gender": GENDERS,
    "marital_status": MARITAL_STATUSES,
    "salary_code": SALARY_CODES,
}


def _check_choice(field: str, value: str | None) -> str | None:
    if value is None or value == "":
        return value
    if value not in _CHOICES[field]:
        raise ValueError(f"{field} must be one of: {', '.join(_CHOICES[field])}")
    return value


# ---------------------------------------------------------------------------
# Staff record input
# ---------------------------------------------------------------------------


class StaffIn(BaseModel):
    """A staff record as submitted for create or update.

    ``nic_number``, ``contact_number``, ``email`` and ``increment_date`` are
    kept as entered; :class:`staffdesk.staff.service.StaffService` stores
    their normalized forms.
    """

    appointment_number: str = Field(
        min_length=APPOINTMENT_NUMBER_MIN_LENGTH, max_length=APPOINTMENT_NUMBER_MAX_LENGTH
    )
    full_name: str = Field(min_length=FULL_NAME_MIN_LENGTH, max_length=FULL_NAME_MAX_LENGTH)
    gender: str
    date_of_birth: date
    nic_number: str
    marital_status: str = "Single"
    address_line1: str = Field(min_length=1)
    address_line2: str | None = None
    address_line3: str | None = None
    contact_number: str
    email: str | None = None

    designation: str
    date_of_first_appointment: date
    increment_date: str

    salary_code: str
    basic_salary: float = Field(default=0.0, ge=0)
    increment_amount: float = Field(default=0.0, ge=0)

    image_path: str | None = None

    @field_validator("appointment_number", "address_line1", mode="before")
    @classmethod
    def strip_text(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("full_name", mode="before")
    @classmethod
    def collapse_name(cls, value: object) -> object:
        return " ".join(value.split()) if isinstance(value, str) else value

    @field_validator("address_line2", "address_line3", "email", "image_path", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("date_of_birth", "date_of_first_appointment", mode="before")
    @classmethod
    def accept_display_date(cls, value: object) -> object:
        if isinstance(value, str):
            parsed = parse_display_date(value)
            if parsed is not None:
                return parsed
        return value

    @field_validator("gender", "marital_status", "designation", "salary_code")
    @classmethod
    def check_enumerated(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise ValueError(f"{info.field_name} is required")
        return _check_choice(info.field_name, value)


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class StaffSearch(BaseModel):
    """Search criteria.  ``None`` and empty strings mean "no filter"."""

    query: str | None = None
    designation: str | None = None
    gender: str | None = None
    marital_status: str | None = None
    salary_code: str | None = None
    age_min: int | None = Field(default=None, ge=0, le=MAX_SEARCH_AGE)
    age_max: int | None = Field(default=None, ge=0, le=MAX_SEARCH_AGE)
    nic_number: str | None = None

    @field_validator("designation", "gender", "marital_status", "salary_code")
    @classmethod
    def check_enumerated(cls, value: str | None, info: ValidationInfo) -> str | None:
        return _check_choice(info.field_name, value)

    @model_validator(mode="after")
    def check_age_bounds(self) -> StaffSearch:
        if self.age_min is not None and self.age_max is not None and self.age_min > self.age_max:
            raise ValueError("age_min must not exceed age_max")
        return self


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


class DesignationCount(BaseModel):
    designation: str
    count: int


class GenderCount(BaseModel):
    gender: str
    count: int


class StaffStatistics(BaseModel):
    total: int
    by_designation: list[DesignationCount]
    by_gender: list[GenderCount]
