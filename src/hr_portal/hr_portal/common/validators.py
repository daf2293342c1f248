from __future__ import annotations

from datetime import datetime

from ..core.constants import TIME_FORMAT
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hhmm(value: str, field_name: str) -> str:
    """Accept empty strings (absent time) or a valid 24-hour HH:MM."""
    if value == "":
        return value
    try:
        parsed = datetime.strptime(value, TIME_FORMAT)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be HH:MM") from None
    if parsed.strftime(TIME_FORMAT) != value:
        raise ValidationError(f"{field_name} must be zero-padded HH:MM")
    return value
