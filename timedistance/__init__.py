from .dates import InvalidDateError, to_calendar_date
from .distance import format_distance, format_months, month_index

__all__ = [
    'InvalidDateError',
    'format_distance',
    'format_months',
    'month_index',
    'to_calendar_date',
]
