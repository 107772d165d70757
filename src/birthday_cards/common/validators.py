from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_fields(values: Mapping[str, Optional[str]], fields: Sequence[str], message: str) -> dict[str, str]:
    """Strip every required field; raise ``message`` if any is blank."""
    cleaned = {}
    for field in fields:
        value = values.get(field)
        if not value or not str(value).strip():
            raise ValidationError(message)
        cleaned[field] = str(value).strip()
    return cleaned


def require_iso_date(value: str, field_name: str) -> date:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")
