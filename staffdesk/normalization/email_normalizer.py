"""Email normalizer.

Converts a raw email address to a lowercase, whitespace-stripped
canonical form.  Sub-address tags (``user+tag@domain``) and dots in the
local part are preserved: the stored address is the one staff gave.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s.]+$")


def normalize_email(raw: str) -> str:
    """Return *raw* email address in canonical lowercase form.

    An empty or whitespace-only input is returned as ``""``.  The shape of
    the address is not checked here; see :func:`is_valid_email`.
    """
    stripped = raw.strip().lower()
    if not stripped:
        return ""

    if "@" not in stripped:
        logger.debug("normalize_email: no '@' found (length=%d)", len(stripped))

    return stripped


def is_valid_email(value: str) -> bool:
    """Return ``True`` for a single-``@`` address with a dotted domain."""
    return bool(_EMAIL_RE.match(value))
