"""Enumerated values for staff record fields.

The designations are the posts of the district forest office whose staff
the records describe.  Salary codes are the public service salary scale
codes in use at the office.
"""
from __future__ import annotations

DESIGNATIONS: tuple[str, ...] = (
    "District Forest Officer",
    "Asst.District Forest Officer",
    "Management Service Officer",
    "Development Officer",
    "Range Forest officer",
    "Beat forest officer",
    "extension officer",
    "field forest assistant",
    "office employee service",
    "garden labour",
)

SALARY_CODES: tuple[str, ...] = ("S1", "S2", "S3", "D1", "D2", "D3", "A1", "A2")

MARITAL_STATUSES: tuple[str, ...] = ("Single", "Married", "Divorced", "Widowed")

GENDERS: tuple[str, ...] = ("Male", "Female")

# ---------------------------------------------------------------------------
# Field limits
# ---------------------------------------------------------------------------

APPOINTMENT_NUMBER_MIN_LENGTH = 3
APPOINTMENT_NUMBER_MAX_LENGTH = 20
FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 100

# ---------------------------------------------------------------------------
# Retirement
# ---------------------------------------------------------------------------

DEFAULT_RETIREMENT_AGE = 60
MIN_STAFF_AGE = 18
MAX_STAFF_AGE = 70

# Upper bound for age filters in staff search
MAX_SEARCH_AGE = 150
