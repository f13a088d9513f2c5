from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from leavedesk.core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """Missing values: None, whitespace-only text, and other falsy values such as 0."""
    if isinstance(value, str):
        return not value.strip()
    return not value


def require_fields(detail: str, **fields: Any) -> None:
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        raise ValidationError(detail, details={"missing": missing})


def parse_calendar_date(value: Any) -> Optional[date]:
    """
    Parse a date-like value down to calendar-day granularity.

    Only ISO-8601 is accepted. Datetimes (including ISO strings with a time
    or offset part) are truncated to their date so inclusive day counts are
    never skewed by time of day. Returns None when the value cannot be read
    as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None
