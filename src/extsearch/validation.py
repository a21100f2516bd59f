"""String classification helpers used when filtering lookup candidates."""

from __future__ import annotations

import re
import uuid

from email_validator import EmailNotValidError, validate_email

_NUMBER_RE = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)$")


def is_guid(value: str) -> bool:
    """True if the value parses as a GUID (with or without braces/hyphens)."""
    try:
        uuid.UUID(value.strip())
    except ValueError:
        return False
    return True


def is_number(value: str) -> bool:
    """True if the value is a bare integer or decimal number."""
    return bool(_NUMBER_RE.match(value.strip()))


def is_valid_email(value: str | None) -> bool:
    """Syntactic email check. Deliverability (DNS) is never consulted."""
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True
