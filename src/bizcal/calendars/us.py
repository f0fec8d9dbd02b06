"""
United States Holiday Predicates

Observance rules for US federal and market holidays. Each predicate takes
the decomposed `DateFields` of a date and answers whether that date is the
(observed) holiday. Conventions pick the subset they need.

Weekend roll: a holiday falling on Saturday is observed on the preceding
Friday, one falling on Sunday on the following Monday. The `*_no_saturday`
variants drop the Friday roll and keep the Monday roll; the Federal
Reserve and the government bond market use them.

Historical thresholds:
- 1971: Uniform Monday Holiday Act (Presidents, Memorial, Columbus,
  Veterans Day move to Mondays)
- 1978: Veterans Day returns to November 11
- 1998: NYSE starts closing on Martin Luther King Jr. Day (convention level)
- 2022: Juneteenth observed by the markets (convention level)
"""
from __future__ import annotations

from .base import DateFields, Weekday
from .easter import easter_monday

MONDAY = Weekday.MONDAY
TUESDAY = Weekday.TUESDAY
THURSDAY = Weekday.THURSDAY
FRIDAY = Weekday.FRIDAY


def _fixed_with_roll(f: DateFields, month: int, day: int) -> bool:
    """Fixed date, Saturday back to Friday, Sunday forward to Monday."""
    # Every fixed US holiday sits mid-month, so day +/- 1 never wraps.
    return f.month == month and (
        f.day == day
        or (f.day == day + 1 and f.weekday == MONDAY)
        or (f.day == day - 1 and f.weekday == FRIDAY)
    )


def _fixed_monday_roll_only(f: DateFields, month: int, day: int) -> bool:
    return f.month == month and (
        f.day == day or (f.day == day + 1 and f.weekday == MONDAY)
    )


def is_new_years_day(f: DateFields) -> bool:
    """January 1st, or Monday January 2nd."""
    # The Saturday roll lands in the previous year; see
    # is_new_years_eve_observed.
    return f.month == 1 and (f.day == 1 or (f.day == 2 and f.weekday == MONDAY))


def is_new_years_eve_observed(f: DateFields) -> bool:
    """Friday December 31st, when New Year's Day falls on a Saturday."""
    return f.month == 12 and f.day == 31 and f.weekday == FRIDAY


def is_mlk_day(f: DateFields) -> bool:
    """Martin Luther King Jr. Day: third Monday in January."""
    return f.month == 1 and 15 <= f.day <= 21 and f.weekday == MONDAY


def is_presidents_day(f: DateFields) -> bool:
    """Washington's Birthday."""
    if f.year >= 1971:
        # third Monday in February
        return f.month == 2 and 15 <= f.day <= 21 and f.weekday == MONDAY
    # February 22nd, as adjusted
    return _fixed_with_roll(f, 2, 22)


def is_good_friday(f: DateFields) -> bool:
    """Friday before Western Easter Sunday."""
    return f.day_of_year == easter_monday(f.year) - 3


def is_memorial_day(f: DateFields) -> bool:
    if f.year >= 1971:
        # last Monday in May
        return f.month == 5 and f.day >= 25 and f.weekday == MONDAY
    # May 30th, as adjusted
    return _fixed_with_roll(f, 5, 30)


def is_juneteenth(f: DateFields) -> bool:
    """June 19th, as adjusted."""
    return _fixed_with_roll(f, 6, 19)


def is_juneteenth_no_saturday(f: DateFields) -> bool:
    return _fixed_monday_roll_only(f, 6, 19)


def is_independence_day(f: DateFields) -> bool:
    """July 4th, as adjusted."""
    return _fixed_with_roll(f, 7, 4)


def is_independence_day_no_saturday(f: DateFields) -> bool:
    """July 4th, or Monday July 5th. No July 3rd holiday."""
    return _fixed_monday_roll_only(f, 7, 4)


def is_labor_day(f: DateFields) -> bool:
    """First Monday in September."""
    return f.month == 9 and f.day <= 7 and f.weekday == MONDAY


def is_columbus_day(f: DateFields) -> bool:
    """Second Monday in October, since 1971."""
    return (
        f.year >= 1971
        and f.month == 10
        and 8 <= f.day <= 14
        and f.weekday == MONDAY
    )


def _veterans_day_moved(f: DateFields) -> bool:
    # 1971-1977: fourth Monday in October
    return f.month == 10 and 22 <= f.day <= 28 and f.weekday == MONDAY


def is_veterans_day(f: DateFields) -> bool:
    if f.year <= 1970 or f.year >= 1978:
        # November 11th, as adjusted
        return _fixed_with_roll(f, 11, 11)
    return _veterans_day_moved(f)


def is_veterans_day_no_saturday(f: DateFields) -> bool:
    if f.year <= 1970 or f.year >= 1978:
        return _fixed_monday_roll_only(f, 11, 11)
    return _veterans_day_moved(f)


def is_thanksgiving(f: DateFields) -> bool:
    """Fourth Thursday in November."""
    return f.month == 11 and 22 <= f.day <= 28 and f.weekday == THURSDAY


def is_christmas(f: DateFields) -> bool:
    """December 25th, as adjusted."""
    return _fixed_with_roll(f, 12, 25)


def is_christmas_no_saturday(f: DateFields) -> bool:
    """December 25th, or Monday December 26th. No December 24th holiday."""
    return _fixed_monday_roll_only(f, 12, 25)


def is_presidential_election_day(f: DateFields) -> bool:
    """
    NYSE closed for presidential election days.

    Every first Tuesday of November through 1968, then only in
    presidential election years up to 1980.
    """
    if not (f.year <= 1968 or (f.year <= 1980 and f.year % 4 == 0)):
        return False
    return f.month == 11 and f.day <= 7 and f.weekday == TUESDAY
