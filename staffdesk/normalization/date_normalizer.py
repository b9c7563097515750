"""Date normalizer.

Staff dates are entered as ``dd-MM-yyyy`` (the office display format) or
as ISO ``yyyy-MM-dd``.  Annual increment dates carry no year and are
stored as ``dd-MM``.

Rules applied
-------------
1. Day and month may be one or two digits on input; output is always
   zero-padded.
2. Impossible calendar dates (``31-02-1990``) are rejected, never rolled
   over into the next month.
3. Anniversaries that fall on 29 February move to 28 February in
   non-leap years.
"""
from __future__ import annotations

import re
from datetime import date

DISPLAY_FORMAT = "%d-%m-%Y"

_DISPLAY_RE = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")
_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_INCREMENT_RE = re.compile(r"^(\d{1,2})-(\d{1,2})$")

# Any leap year works as the reference for year-less day/month checks.
_LEAP_REFERENCE_YEAR = 2000


def _build_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_display_date(value: str) -> date | None:
    """Parse ``dd-MM-yyyy`` or ``yyyy-MM-dd``; ``None`` when invalid."""
    text = value.strip()

    match = _DISPLAY_RE.match(text)
    if match:
        day, month, year = (int(part) for part in match.groups())
        return _build_date(year, month, day)

    match = _ISO_RE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return _build_date(year, month, day)

    return None


def format_display_date(value: date) -> str:
    return value.strftime(DISPLAY_FORMAT)


def shift_years(value: date, years: int) -> date:
    """Return *value* moved by *years*, clamping 29 February to the 28th."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def calculate_age(date_of_birth: date, today: date) -> int:
    """Whole years between *date_of_birth* and *today*, never negative."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return max(0, age)


def calculate_retirement_date(date_of_birth: date, retirement_age: int = 60) -> date:
    return shift_years(date_of_birth, retirement_age)


def normalize_increment_date(value: str) -> str | None:
    """Return a ``dd-MM`` increment date zero-padded, or ``None``."""
    match = _INCREMENT_RE.match(value.strip())
    if not match:
        return None

    day, month = (int(part) for part in match.groups())
    if _build_date(_LEAP_REFERENCE_YEAR, month, day) is None:
        return None
    return f"{day:02d}-{month:02d}"
