"""Parsing helpers for submitted form values."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Union

from records import RecordValidationError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def require_text(value: object, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise RecordValidationError(f"{label} must be a non-empty string")
    return value.strip()


def optional_text(value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordValidationError("optional text must be a string")
    return value.strip()


def parse_date(value: Union[date, str, None], label: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = require_text(value, label)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise RecordValidationError(f"{label} must be a date in YYYY-MM-DD format") from exc


def parse_time(value: Union[time, str, None], label: str) -> time:
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    text = require_text(value, label)
    # Browsers may submit seconds when the step attribute allows them.
    for fmt in (TIME_FORMAT, "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time().replace(second=0)
        except ValueError:
            continue
    raise RecordValidationError(f"{label} must be a time in HH:MM format")
