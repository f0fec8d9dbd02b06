"""
Pytest configuration and fixtures for bizcal tests.

Provides shared date helpers and convention fixtures.
"""
import pytest
from datetime import date, timedelta

from bizcal import CONVENTIONS
from bizcal.calendars import DateFields


# =============================================================================
# Factory Helpers
# =============================================================================

def fields(year: int, month: int, day: int) -> DateFields:
    """Decompose a date for predicate tests."""
    return DateFields.from_date(date(year, month, day))


def date_range(start: date, end: date):
    """Yield every date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(params=sorted(CONVENTIONS), ids=lambda code: code)
def convention(request):
    """Every built-in convention in turn."""
    return CONVENTIONS[request.param]


@pytest.fixture
def sample_dates():
    """Two years of dates spanning a leap day and several holiday runs."""
    return list(date_range(date(2023, 12, 1), date(2025, 1, 31)))
