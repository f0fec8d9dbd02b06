"""
bizcal - Business-Day Calendars for US and Canadian Markets

Decides whether a date is a business day under a market convention and
finds adjacent business days.

Conventions:
- US Settlement, US Libor, US Government Bond, US Federal Reserve, NYSE
- Canada Settlement, Toronto Stock Exchange

Quick Start:
    from datetime import date
    from bizcal import US_SETTLEMENT, next_business_day

    US_SETTLEMENT.is_business_day(date(2023, 7, 4))         # False
    next_business_day(US_SETTLEMENT, date(2022, 12, 30))    # 2023-01-03

    # Look conventions up by name
    from bizcal import get_convention
    tsx = get_convention("Toronto Stock Exchange")

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import (
    BusinessCalendar,
    DateFields,
    Weekday,
    day_of_year,
    easter_monday,
    is_leap_year,
    is_weekday,
    is_weekend,
    orthodox_easter_monday,
)
from .conventions import (
    CANADA_SETTLEMENT,
    CONVENTIONS,
    NYSE,
    TSX,
    US_FEDERAL_RESERVE,
    US_GOVERNMENT_BOND,
    US_LIBOR,
    US_SETTLEMENT,
    Closure,
    Convention,
    HolidayRule,
    Override,
    get_convention,
    list_conventions,
)
from .exceptions import (
    BizCalError,
    CalendarPackError,
    CalendarPackValidationError,
    EasterOutOfRangeError,
    NoBusinessDayFoundError,
    UnknownConventionError,
)
from .navigation import (
    DEFAULT_MAX_SCAN_DAYS,
    add_business_days,
    adjust_backward,
    adjust_forward,
    business_days_between,
    next_business_day,
    previous_business_day,
)
from .packs import CalendarPackLoader, load_calendar_pack

__all__ = [
    "__version__",
    # Weekday classifier
    "BusinessCalendar",
    "DateFields",
    "Weekday",
    "day_of_year",
    "is_leap_year",
    "is_weekday",
    "is_weekend",
    # Easter
    "easter_monday",
    "orthodox_easter_monday",
    # Conventions
    "Convention",
    "HolidayRule",
    "Closure",
    "Override",
    "CONVENTIONS",
    "US_SETTLEMENT",
    "US_LIBOR",
    "US_GOVERNMENT_BOND",
    "US_FEDERAL_RESERVE",
    "NYSE",
    "CANADA_SETTLEMENT",
    "TSX",
    "get_convention",
    "list_conventions",
    # Navigation
    "DEFAULT_MAX_SCAN_DAYS",
    "adjust_forward",
    "adjust_backward",
    "next_business_day",
    "previous_business_day",
    "add_business_days",
    "business_days_between",
    # Calendar packs
    "CalendarPackLoader",
    "load_calendar_pack",
    # Errors
    "BizCalError",
    "EasterOutOfRangeError",
    "NoBusinessDayFoundError",
    "UnknownConventionError",
    "CalendarPackError",
    "CalendarPackValidationError",
]
