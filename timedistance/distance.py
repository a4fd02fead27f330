import logging

from .conf import get_clock
from .dates import to_calendar_date

logger = logging.getLogger(__name__)


def month_index(value):
    return value.year * 12 + value.month


def format_months(total_months):
    """Convert a month count to years and months format, e.g. '1 year 3 months'"""
    years, months = divmod(total_months, 12)

    parts = []
    if years > 0:
        parts.append(f"{years} year{'s' if years > 1 else ''}")
    if months > 0:
        parts.append(f"{months} month{'s' if months > 1 else ''}")
    return ' '.join(parts)


def format_distance(from_, to=None, *, clock=None):
    """Describe the calendar distance between two dates in years and months.

    Only the year and month of each date count; the day is ignored. When
    ``to`` is omitted it is taken from ``clock``, falling back to the
    TIME_DISTANCE_CLOCK setting and then to today's date.

    Raises InvalidDateError when either value is not a calendar date.
    """
    start = to_calendar_date(from_)
    if to is None:
        end = to_calendar_date((clock or get_clock())())
    else:
        end = to_calendar_date(to)

    total_months = month_index(end) - month_index(start)
    result = format_months(total_months)
    logger.debug('Distance %s -> %s is %d months: %r', start, end, total_months, result)
    return result
