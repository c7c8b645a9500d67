from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError
from .dates import parse_form_date

FORM_DATE_PATTERN = re.compile(r"^\d{2}-\d{2}-\d{4}$")
TIME_PATTERN = re.compile(r"^\d{1,2}:\d{2}$")


def require_non_empty(value: Optional[str], field_name: str, message: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(message, {field_name: message})
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int, message: str) -> str:
    value = (value or "").strip()
    if len(value) < min_len:
        raise ValidationError(message, {field_name: message})
    return value


def require_form_date(value: Optional[str], field_name: str = "date") -> date:
    """DD-MM-YYYY that is also a real calendar day."""
    message = "Date must be in DD-MM-YYYY format"
    value = (value or "").strip()
    if not FORM_DATE_PATTERN.match(value):
        raise ValidationError(message, {field_name: message})
    try:
        return parse_form_date(value)
    except ValueError:
        raise ValidationError(message, {field_name: message})


def require_time(value: Optional[str], field_name: str) -> str:
    """H:MM or HH:MM on a 24-hour clock, returned zero-padded."""
    message = "Time must be in HH:MM format"
    value = (value or "").strip()
    if not TIME_PATTERN.match(value):
        raise ValidationError(message, {field_name: message})

    hours, minutes = (int(p) for p in value.split(":"))
    if hours > 23 or minutes > 59:
        message = "Time must be a valid 24-hour clock time"
        raise ValidationError(message, {field_name: message})
    return f"{hours:02d}:{minutes:02d}"


def optional_time(value: Optional[str], field_name: str) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return require_time(value, field_name)


def collect(*checks) -> list:
    """Run zero-arg validator callables, merging every field error.

    Returns the validated values in order; raises one ValidationError that
    carries the messages of all failed fields.
    """
    values = []
    errors: dict[str, str] = {}
    for check in checks:
        try:
            values.append(check())
        except ValidationError as e:
            errors.update(e.field_errors)
            values.append(None)
    if errors:
        raise ValidationError("Please correct the highlighted fields", errors)
    return values


def require_object(value: Any, field_name: str = "body") -> Mapping[str, Any]:
    """JSON payloads must decode to an object before fields are read."""
    if not isinstance(value, Mapping):
        message = "Expected a JSON object"
        raise ValidationError(message, {field_name: message})
    return value
