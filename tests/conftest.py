from datetime import date

import pytest


@pytest.fixture()
def fixed_today():
    # Keep tests deterministic.
    return date(2026, 1, 20)


@pytest.fixture()
def clock(fixed_today):
    return lambda: fixed_today
