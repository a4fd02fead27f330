from datetime import date

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string


def get_clock():
    """Return the callable that supplies today's date.

    Sites can pin it with the TIME_DISTANCE_CLOCK setting, a dotted path to
    a zero-argument callable returning a date.
    """
    path = getattr(settings, 'TIME_DISTANCE_CLOCK', None)
    if not path:
        return date.today
    try:
        clock = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"TIME_DISTANCE_CLOCK {path!r} could not be imported: {exc}") from exc
    if not callable(clock):
        raise ImproperlyConfigured(f"TIME_DISTANCE_CLOCK {path!r} is not callable")
    return clock
