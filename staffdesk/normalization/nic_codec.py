"""National identity card (NIC) number codec.

Converts the legacy 9-digit / 10-character NIC (``YY DDD SSS C`` plus an
optional ``V`` or ``X`` marker) into the canonical 12-digit form
(``YYYY DDD SSSS C``) and derives birth year, day of year and sex from
either format.

Rules
-----
1. Only space characters are stripped and letters are uppercased.  No other
   punctuation is tolerated.
2. A 12-digit value is already canonical and is returned unchanged.
3. A legacy day token of 1–366 marks a male holder; 501–866 marks a female
   holder (actual day + 500).
4. Two-digit years ``00``–``50`` map to 2000–2050, ``51``–``99`` to
   1951–1999.  The cutoff is fixed.

Every failure raises :class:`NICError` whose ``kind`` is one member of the
closed :class:`NICErrorKind` enumeration.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

logger = logging.getLogger(__name__)

CANONICAL_LENGTH = 12
LEGACY_LENGTH = 9
LEGACY_MARKED_LENGTH = 10

LEGACY_MARKERS = frozenset({"V", "X"})

#: Two-digit years at or below this value belong to the 2000s.
CENTURY_CUTOFF = 50

#: Day tokens above this value encode a female holder.
FEMALE_DAY_OFFSET = 500

_MALE_DAYS = range(1, 367)
_FEMALE_DAYS = range(501, 867)


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------


class NICErrorKind(StrEnum):
    INVALID_FORMAT = "invalid_format"
    INVALID_YEAR = "invalid_year"
    INVALID_DAY = "invalid_day"
    INVALID_LENGTH = "invalid_length"


_MESSAGES: dict[NICErrorKind, str] = {
    NICErrorKind.INVALID_FORMAT: "Invalid NIC format",
    NICErrorKind.INVALID_YEAR: "Invalid year in NIC",
    NICErrorKind.INVALID_DAY: "Invalid day in NIC",
    NICErrorKind.INVALID_LENGTH: "Invalid NIC length",
}


class NICError(ValueError):
    """Raised when a NIC number cannot be normalized or decoded."""

    def __init__(self, kind: NICErrorKind) -> None:
        super().__init__(_MESSAGES[kind])
        self.kind = kind


class Sex(StrEnum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True, slots=True)
class NICInfo:
    """Attributes decoded from a canonical NIC number."""

    birth_year: int
    day_of_year: int
    sex: Sex
    canonical_form: str

    def birth_date(self) -> date | None:
        """Return the calendar birth date, or ``None`` if the day does not
        exist in ``birth_year`` (day 366 of a non-leap year) or lies outside
        the supported calendar (year 0, past year 9999)."""
        try:
            born = date(self.birth_year, 1, 1) + timedelta(days=self.day_of_year - 1)
        except (ValueError, OverflowError):
            return None
        if born.year != self.birth_year:
            return None
        return born

    def age_on(self, on: date) -> int | None:
        born = self.birth_date()
        if born is None:
            return None
        age = on.year - born.year
        if (on.month, on.day) < (born.month, born.day):
            age -= 1
        return max(0, age)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit() alone accepts non-ASCII digits such as "٣" or "²"
    return text.isascii() and text.isdigit()


def _clean(raw: str) -> str:
    return raw.replace(" ", "").upper()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def expand_legacy_digits(digits: str) -> str:
    """Expand the 9-digit legacy body ``YYDDDSSSC`` to the 12-digit form.

    The canonical form is the 4-digit year, the zero-padded 3-digit day
    token, a literal ``0``, the 3-digit serial and the check digit.  The
    serial is not renumbered.

    Raises
    ------
    NICError
        ``INVALID_LENGTH`` when *digits* is not 9 characters,
        ``INVALID_YEAR`` / ``INVALID_DAY`` when those positions are not
        numeric, ``INVALID_DAY`` when the day token lies outside both valid
        ranges, and ``INVALID_FORMAT`` when the serial or check positions are
        not digits.
    """
    if len(digits) != LEGACY_LENGTH:
        raise NICError(NICErrorKind.INVALID_LENGTH)

    yy_text, ddd_text, sss, check = digits[0:2], digits[2:5], digits[5:8], digits[8:9]

    if not _is_ascii_digits(yy_text):
        raise NICError(NICErrorKind.INVALID_YEAR)
    if not _is_ascii_digits(ddd_text):
        raise NICError(NICErrorKind.INVALID_DAY)
    if not _is_ascii_digits(sss + check):
        raise NICError(NICErrorKind.INVALID_FORMAT)

    yy = int(yy_text)
    ddd = int(ddd_text)

    if ddd not in _MALE_DAYS and ddd not in _FEMALE_DAYS:
        logger.debug("nic_codec: day token out of range")
        raise NICError(NICErrorKind.INVALID_DAY)

    yyyy = 2000 + yy if yy <= CENTURY_CUTOFF else 1900 + yy

    canonical = f"{yyyy}{ddd:03d}0{sss}{check}"
    assert len(canonical) == CANONICAL_LENGTH
    return canonical


def normalize_nic(raw: str) -> str:
    """Return *raw* as a canonical 12-digit NIC number.

    Parameters
    ----------
    raw:
        NIC as entered, in legacy (``741922757V``, ``741922757``) or
        canonical (``197419202757``) form.  Spaces are ignored and the
        marker letter is case-insensitive.

    Returns
    -------
    str
        12 ASCII digits.  Canonical input is returned unchanged.

    Raises
    ------
    NICError
        With ``INVALID_LENGTH`` when the cleaned value is not 9, 10 or 12
        characters long, ``INVALID_FORMAT`` when the characters do not fit
        the expected classes (including a trailing marker other than ``V``
        or ``X``), and ``INVALID_YEAR`` / ``INVALID_DAY`` from expansion.
    """
    cleaned = _clean(raw)
    length = len(cleaned)

    if length == CANONICAL_LENGTH:
        if _is_ascii_digits(cleaned):
            return cleaned
        logger.debug("nic_codec: 12-character input is not all digits")
        raise NICError(NICErrorKind.INVALID_FORMAT)

    if length == LEGACY_MARKED_LENGTH:
        digits, marker = cleaned[:LEGACY_LENGTH], cleaned[LEGACY_LENGTH:]
        if not _is_ascii_digits(digits) or marker not in LEGACY_MARKERS:
            logger.debug("nic_codec: malformed 10-character input")
            raise NICError(NICErrorKind.INVALID_FORMAT)
        return expand_legacy_digits(digits)

    if length == LEGACY_LENGTH:
        if not _is_ascii_digits(cleaned):
            logger.debug("nic_codec: 9-character input is not all digits")
            raise NICError(NICErrorKind.INVALID_FORMAT)
        return expand_legacy_digits(cleaned)

    logger.debug("nic_codec: unsupported length=%d", length)
    raise NICError(NICErrorKind.INVALID_LENGTH)


def derive_nic_info(raw: str) -> NICInfo:
    """Normalize *raw* and decode birth year, day of year and sex.

    Errors from :func:`normalize_nic` propagate unchanged.  A canonical day
    token that does not decode to a day between 1 and 366 raises
    ``INVALID_DAY``.
    """
    canonical = normalize_nic(raw)
    if len(canonical) != CANONICAL_LENGTH:
        raise NICError(NICErrorKind.INVALID_LENGTH)

    year = int(canonical[0:4])
    token = int(canonical[4:7])

    if token > FEMALE_DAY_OFFSET:
        sex = Sex.FEMALE
        day_of_year = token - FEMALE_DAY_OFFSET
    else:
        sex = Sex.MALE
        day_of_year = token

    if day_of_year not in _MALE_DAYS:
        raise NICError(NICErrorKind.INVALID_DAY)

    return NICInfo(
        birth_year=year,
        day_of_year=day_of_year,
        sex=sex,
        canonical_form=canonical,
    )


def is_valid_nic(raw: str) -> bool:
    """Return ``True`` if *raw* decodes to a valid :class:`NICInfo`."""
    try:
        derive_nic_info(raw)
    except NICError:
        return False
    return True


def format_nic(raw: str) -> str:
    """Group a NIC for display.  Never raises.

    ``741922757V`` becomes ``74 192 275 7V`` and ``197419202757`` becomes
    ``1974 192 0275 7``.  Any other value is returned with spaces removed.
    """
    cleaned = raw.replace(" ", "")
    if len(cleaned) == LEGACY_MARKED_LENGTH and _is_ascii_digits(cleaned[:LEGACY_LENGTH]):
        return f"{cleaned[0:2]} {cleaned[2:5]} {cleaned[5:8]} {cleaned[8:10]}"
    if len(cleaned) == CANONICAL_LENGTH and _is_ascii_digits(cleaned):
        return f"{cleaned[0:4]} {cleaned[4:7]} {cleaned[7:11]} {cleaned[11]}"
    return cleaned
