"""
bizcal Calendar Base

Weekday classification, date decomposition and the capability protocol
shared by every business-day convention.

Holiday predicates never look at a `date` directly. They receive the
decomposed `DateFields` of the date under test, so each rule reads like
the observance rule it encodes.
"""
from __future__ import annotations

from datetime import date
from enum import IntEnum
from typing import Callable, NamedTuple, Protocol, runtime_checkable


class Weekday(IntEnum):
    """Days of the week, numbered like `date.weekday()`."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


WEEKEND_DAYS = frozenset({Weekday.SATURDAY, Weekday.SUNDAY})


class DateFields(NamedTuple):
    """Decomposed view of a civil date, as consumed by holiday predicates."""
    year: int
    month: int
    day: int
    weekday: Weekday
    day_of_year: int

    @classmethod
    def from_date(cls, d: date) -> DateFields:
        """Decompose a date. Day-of-year is always recomputed from the date."""
        return cls(
            year=d.year,
            month=d.month,
            day=d.day,
            weekday=Weekday(d.weekday()),
            day_of_year=day_of_year(d),
        )


HolidayPredicate = Callable[[DateFields], bool]


@runtime_checkable
class BusinessCalendar(Protocol):
    """
    Capability interface for business-day navigation.

    Anything that can classify weekends and decide business days can be
    navigated, whether or not it is one of the built-in conventions.
    """

    def is_weekend(self, d: date) -> bool:
        ...

    def is_weekday(self, d: date) -> bool:
        ...

    def is_business_day(self, d: date) -> bool:
        ...


def is_weekend(d: date) -> bool:
    """Check if a date falls on a Saturday or Sunday."""
    return d.weekday() in WEEKEND_DAYS


def is_weekday(d: date) -> bool:
    """Check if a date falls on Monday through Friday."""
    return not is_weekend(d)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(d: date) -> int:
    """1-based ordinal of the date within its year."""
    return d.timetuple().tm_yday
