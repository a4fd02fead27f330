from datetime import date

import pytest
from django.core.exceptions import ImproperlyConfigured

from timedistance.conf import get_clock
from timedistance.distance import format_distance

NOT_CALLABLE = "not a clock"


def frozen_today():
    return date(2030, 6, 1)


def test_default_clock_is_today(settings):
    settings.TIME_DISTANCE_CLOCK = None
    assert get_clock() == date.today
    assert get_clock()() == date.today()


def test_clock_setting_is_used(settings):
    settings.TIME_DISTANCE_CLOCK = "tests.test_conf.frozen_today"
    assert get_clock() is frozen_today
    assert format_distance("2028-03-01") == "2 years 3 months"


def test_explicit_clock_wins_over_setting(settings, clock):
    settings.TIME_DISTANCE_CLOCK = "tests.test_conf.frozen_today"
    assert format_distance("2025-01-01", clock=clock) == "1 year"


def test_missing_clock_is_improperly_configured(settings):
    settings.TIME_DISTANCE_CLOCK = "tests.test_conf.no_such_clock"
    with pytest.raises(ImproperlyConfigured):
        get_clock()


def test_non_callable_clock_is_improperly_configured(settings):
    settings.TIME_DISTANCE_CLOCK = "tests.test_conf.NOT_CALLABLE"
    with pytest.raises(ImproperlyConfigured, match="not callable"):
        get_clock()
