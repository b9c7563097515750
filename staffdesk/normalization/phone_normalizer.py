"""Contact number normalizer.

Staff contact numbers are stored as E.164 (``+94771234567``) and shown in
the national grouping used on staff forms (``077 123 4567``).

Rules
-----
1. A number without an international prefix is read in *default_region*
   (``LK`` unless configured otherwise), so ``0771234567``, ``771234567``
   and ``+94 77 123 4567`` all store as ``+94771234567``.
2. Spaces, dashes, dots and brackets between digit groups are ignored.
3. Sri Lankan fixed lines (``011 234 5678``) are accepted as well as
   mobiles.  Numbers that ``phonenumbers`` parses but cannot place on a
   valid numbering plan are rejected.
4. Numbers from other regions keep their own country code and are shown
   in international grouping.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging

import phonenumbers
from phonenumbers import PhoneNumber, PhoneNumberFormat

logger = logging.getLogger(__name__)

LOCAL_REGION = "LK"


def _parse(raw: str, region: str) -> PhoneNumber | None:
    if not raw or not raw.strip():
        return None

    try:
        parsed = phonenumbers.parse(raw, region)
    except phonenumbers.NumberParseException as exc:
        # SAFETY: do not log raw value
        logger.debug("phone_normalizer: unparseable input (length=%d, error=%s)", len(raw), exc.error_type)
        return None

    if not phonenumbers.is_valid_number(parsed):
        logger.debug("phone_normalizer: number not on a valid numbering plan")
        return None
    return parsed


def normalize_phone(raw: str, *, default_region: str = LOCAL_REGION) -> str | None:
    """Return *raw* as E.164, or ``None`` when it is blank or not a valid number.

    ``default_region`` is an ISO-3166-1 alpha-2 code used only when *raw*
    carries no ``+`` prefix.  Never raises.
    """
    parsed = _parse(raw, default_region)
    if parsed is None:
        return None
    return phonenumbers.format_number(parsed, PhoneNumberFormat.E164)


def format_phone_display(stored: str, *, local_region: str = LOCAL_REGION) -> str:
    """Group a stored number for display.

    Numbers in *local_region* use the national form with the trunk ``0``;
    others use international grouping.  A value that does not parse is
    returned unchanged.
    """
    parsed = _parse(stored, local_region)
    if parsed is None:
        return stored
    if phonenumbers.region_code_for_number(parsed) == local_region:
        return phonenumbers.format_number(parsed, PhoneNumberFormat.NATIONAL)
    return phonenumbers.format_number(parsed, PhoneNumberFormat.INTERNATIONAL)
