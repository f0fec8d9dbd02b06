"""
bizcal Calendars

Building blocks for business-day conventions.

Provides:
- Weekday classification and date decomposition (base)
- Western and Orthodox Easter Monday tables (easter)
- US holiday predicates (us)
- Canadian holiday predicates (canada)

Usage:
    from bizcal.calendars import DateFields, us

    us.is_thanksgiving(DateFields.from_date(date(2023, 11, 23)))   # True
"""
from __future__ import annotations

from . import canada, us
from .base import (
    WEEKEND_DAYS,
    BusinessCalendar,
    DateFields,
    HolidayPredicate,
    Weekday,
    day_of_year,
    is_leap_year,
    is_weekday,
    is_weekend,
)
from .easter import (
    FIRST_YEAR,
    LAST_YEAR,
    easter_monday,
    orthodox_easter_monday,
)

__all__ = [
    # Base
    "BusinessCalendar",
    "DateFields",
    "HolidayPredicate",
    "Weekday",
    "WEEKEND_DAYS",
    "day_of_year",
    "is_leap_year",
    "is_weekday",
    "is_weekend",
    # Easter tables
    "FIRST_YEAR",
    "LAST_YEAR",
    "easter_monday",
    "orthodox_easter_monday",
    # Jurisdictions
    "us",
    "canada",
]
