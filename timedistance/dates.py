import logging
from datetime import date, datetime

from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)


class InvalidDateError(ValueError):
    """Raised when a value cannot be read as a calendar date."""

    def __init__(self, value, reason=None):
        self.value = value
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def _parse_string(value):
    text = value.strip()
    try:
        parsed = parse_date(text)
        if parsed is not None:
            return parsed
        # Date-time strings carry the calendar date in front
        parsed = parse_datetime(text)
    except ValueError as exc:
        logger.debug('Rejected date string %r: %s', value, exc)
        raise InvalidDateError(value, str(exc)) from exc

    if parsed is None:
        logger.debug('Rejected date string %r: not ISO-8601', value)
        raise InvalidDateError(value, 'expected YYYY-MM-DD')
    return parsed.date()


def to_calendar_date(value):
    """Normalize a date, datetime or ISO-8601 string to a plain date."""
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_string(value)
    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")
