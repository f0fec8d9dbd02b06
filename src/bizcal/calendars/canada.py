"""
Canada Holiday Predicates

Observance rules for Canadian statutory and market holidays. Each
predicate takes the decomposed `DateFields` of a date.

Canadian holidays that fall on a weekend move forward to the next
weekday that is not itself a holiday, so Christmas and Boxing Day can
land on a Monday or Tuesday (December 27th/28th).
"""
from __future__ import annotations

from .base import DateFields, Weekday
from .easter import easter_monday

MONDAY = Weekday.MONDAY
TUESDAY = Weekday.TUESDAY


def _fixed_moved_to_monday(f: DateFields, month: int, day: int) -> bool:
    # Saturday or Sunday holiday observed on the following Monday
    return f.month == month and (
        f.day == day
        or (f.day in (day + 1, day + 2) and f.weekday == MONDAY)
    )


def is_new_years_day(f: DateFields) -> bool:
    """January 1st, possibly moved to Monday."""
    return _fixed_moved_to_monday(f, 1, 1)


def is_family_day(f: DateFields) -> bool:
    """Third Monday in February, since 2008."""
    return (
        f.year >= 2008
        and f.month == 2
        and 15 <= f.day <= 21
        and f.weekday == MONDAY
    )


def is_good_friday(f: DateFields) -> bool:
    return f.day_of_year == easter_monday(f.year) - 3


def is_victoria_day(f: DateFields) -> bool:
    """The Monday on or preceding May 24th."""
    return f.month == 5 and 17 < f.day <= 24 and f.weekday == MONDAY


def is_canada_day(f: DateFields) -> bool:
    """July 1st, possibly moved to Monday."""
    return _fixed_moved_to_monday(f, 7, 1)


def is_provincial_holiday(f: DateFields) -> bool:
    """First Monday of August (Civic Holiday)."""
    return f.month == 8 and f.day <= 7 and f.weekday == MONDAY


def is_labour_day(f: DateFields) -> bool:
    """First Monday of September."""
    return f.month == 9 and f.day <= 7 and f.weekday == MONDAY


def is_thanksgiving(f: DateFields) -> bool:
    """Second Monday of October."""
    return f.month == 10 and 7 < f.day <= 14 and f.weekday == MONDAY


def is_remembrance_day(f: DateFields) -> bool:
    """November 11th, possibly moved to Monday."""
    return _fixed_moved_to_monday(f, 11, 11)


def is_christmas(f: DateFields) -> bool:
    """December 25th, possibly moved to Monday or Tuesday."""
    return f.month == 12 and (
        f.day == 25 or (f.day == 27 and f.weekday in (MONDAY, TUESDAY))
    )


def is_boxing_day(f: DateFields) -> bool:
    """December 26th, possibly moved to Monday or Tuesday."""
    return f.month == 12 and (
        f.day == 26 or (f.day == 28 and f.weekday in (MONDAY, TUESDAY))
    )
