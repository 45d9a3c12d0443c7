from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import CHECK_IN_FORMAT, CHECK_IN_INPUT_FORMATS, ISO_DATE_FORMAT, MONTH_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def parse_month(value: str) -> str:
    """Validate a YYYY-MM period and return it normalized."""
    try:
        return datetime.strptime((value or "").strip(), MONTH_FORMAT).strftime(MONTH_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")


def parse_check_in(value: str) -> time:
    """Parse a stored check-in; 24-hour ``HH:MM`` and the browser's 12-hour form are both accepted."""
    text = (value or "").strip()
    for fmt in CHECK_IN_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).time().replace(second=0)
        except ValueError:
            continue
    raise ValueError(f"Unrecognized check-in time: {value!r}")


def format_check_in(value: time) -> str:
    return value.strftime(CHECK_IN_FORMAT)


def now_local() -> datetime:
    """Default clock for the store and payroll service."""
    return datetime.now()
