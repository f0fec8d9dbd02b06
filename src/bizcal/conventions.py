"""
Named Calendar Conventions

A convention is plain data: an ordered list of named holiday rules taken
from a jurisdiction's predicates, the one-off closures of the market it
describes, and overrides that switch a rule off in specific
circumstances. One `Convention` class evaluates them all, so the full
holiday set of every market is visible at its definition below.

Business-day decision:
1. weekends are never business days
2. the date is decomposed into `DateFields`
3. any holiday rule matching (and not overridden) closes the date
4. any special closure matching closes the date
5. otherwise the date is a business day

Usage:
    from bizcal.conventions import NYSE, get_convention

    NYSE.is_business_day(date(2012, 10, 29))    # False, Hurricane Sandy
    get_convention("US Settlement").next_business_day(date(2022, 12, 30))
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Iterable, Optional

from . import navigation
from .calendars import canada, us
from .calendars.base import (
    DateFields,
    HolidayPredicate,
    Weekday,
    is_weekday,
    is_weekend,
)
from .exceptions import UnknownConventionError

logger = logging.getLogger(__name__)


# =============================================================================
# Rule Data
# =============================================================================

@dataclass(frozen=True)
class HolidayRule:
    """A named holiday predicate, optionally bounded to a span of years."""
    name: str
    predicate: HolidayPredicate
    first_year: Optional[int] = None
    last_year: Optional[int] = None

    def matches(self, f: DateFields) -> bool:
        if self.first_year is not None and f.year < self.first_year:
            return False
        if self.last_year is not None and f.year > self.last_year:
            return False
        return self.predicate(f)


@dataclass(frozen=True)
class Closure:
    """
    A literal, non-recurring market closure.

    Covers a single day, an inclusive range (`end`), or only the days of
    one weekday within that range (`weekday`).
    """
    reason: str
    start: date
    end: Optional[date] = None
    weekday: Optional[Weekday] = None

    def __post_init__(self) -> None:
        if self.end is not None and self.end < self.start:
            raise ValueError(
                f"Closure '{self.reason}' ends before it starts: "
                f"{self.start} > {self.end}"
            )

    def matches(self, d: date) -> bool:
        last = self.end if self.end is not None else self.start
        if not self.start <= d <= last:
            return False
        return self.weekday is None or d.weekday() == self.weekday

    def dates(self) -> list[date]:
        """Every date this closure covers."""
        last = self.end if self.end is not None else self.start
        days = []
        current = self.start
        while current <= last:
            if self.matches(current):
                days.append(current)
            current += timedelta(days=1)
        return days


@dataclass(frozen=True)
class Override:
    """Suppresses the named holiday rule whenever `applies` holds."""
    holiday: str
    applies: HolidayPredicate
    reason: str = ""


# =============================================================================
# Convention
# =============================================================================

@dataclass(frozen=True)
class Convention:
    """
    A named business-day convention.

    Attributes:
        code: Registry key (e.g. "us_settlement")
        name: Display name (e.g. "US Settlement")
        holidays: Ordered holiday rules, OR'd together
        closures: Historical one-off closures
        overrides: Exceptions switching off individual holiday rules
    """
    code: str
    name: str
    holidays: tuple[HolidayRule, ...]
    closures: tuple[Closure, ...] = ()
    overrides: tuple[Override, ...] = ()

    def __post_init__(self) -> None:
        names = [rule.name for rule in self.holidays]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate holiday rules in {self.code}: {duplicates}")
        unknown = sorted({o.holiday for o in self.overrides} - set(names))
        if unknown:
            raise ValueError(f"Overrides reference unknown holidays in {self.code}: {unknown}")

    @property
    def holiday_names(self) -> tuple[str, ...]:
        return tuple(rule.name for rule in self.holidays)

    def is_weekend(self, d: date) -> bool:
        return is_weekend(d)

    def is_weekday(self, d: date) -> bool:
        return is_weekday(d)

    def _overridden(self, rule: HolidayRule, f: DateFields) -> bool:
        return any(
            o.holiday == rule.name and o.applies(f) for o in self.overrides
        )

    def holiday_name(self, d: date) -> Optional[str]:
        """
        Name of the holiday or closure falling on a date.

        Weekends are not considered: a holiday rule matching a Saturday
        still reports its name.

        Returns:
            Holiday name or closure reason, None if nothing matches
        """
        f = DateFields.from_date(d)
        for rule in self.holidays:
            if rule.matches(f) and not self._overridden(rule, f):
                return rule.name
        for closure in self.closures:
            if closure.matches(d):
                return closure.reason
        return None

    def is_holiday(self, d: date) -> bool:
        """Check if a holiday rule or special closure matches a date."""
        return self.holiday_name(d) is not None

    def is_business_day(self, d: date) -> bool:
        """Weekday that is neither a holiday nor a special closure."""
        if is_weekend(d):
            return False
        return not self.is_holiday(d)

    def holidays_between(self, start: date, end: date) -> list[date]:
        """
        Weekdays closed by this convention within a range.

        Args:
            start: Start date (inclusive)
            end: End date (inclusive)
        """
        holidays = []
        current = start
        while current <= end:
            if not is_weekend(current) and self.is_holiday(current):
                holidays.append(current)
            current += timedelta(days=1)
        return holidays

    def extend(
        self,
        code: str,
        name: str,
        closures: Iterable[Closure] = (),
        exclude: Iterable[str] = (),
    ) -> Convention:
        """
        Derive a convention with extra closures and/or fewer holiday rules.

        Raises:
            ValueError: If an excluded holiday is not part of this convention
        """
        excluded = set(exclude)
        unknown = sorted(excluded - set(self.holiday_names))
        if unknown:
            raise ValueError(f"Unknown holidays for {self.code}: {unknown}")
        return replace(
            self,
            code=code,
            name=name,
            holidays=tuple(r for r in self.holidays if r.name not in excluded),
            closures=self.closures + tuple(closures),
            overrides=tuple(o for o in self.overrides if o.holiday not in excluded),
        )

    # Navigation shortcuts

    def adjust_forward(self, d: date) -> date:
        return navigation.adjust_forward(self, d)

    def adjust_backward(self, d: date) -> date:
        return navigation.adjust_backward(self, d)

    def next_business_day(self, d: date) -> date:
        return navigation.next_business_day(self, d)

    def previous_business_day(self, d: date) -> date:
        return navigation.previous_business_day(self, d)

    def add_business_days(self, d: date, days: int) -> date:
        return navigation.add_business_days(self, d, days)

    def business_days_between(self, start: date, end: date) -> int:
        return navigation.business_days_between(self, start, end)


def _closed_on(year: int, month: int, day: int, reason: str) -> Closure:
    return Closure(reason=reason, start=date(year, month, day))


# =============================================================================
# United States
# =============================================================================

_US_NEW_YEARS_DAY = HolidayRule("New Year's Day", us.is_new_years_day)
_US_NEW_YEARS_EVE_OBSERVED = HolidayRule(
    "New Year's Day (Observed)", us.is_new_years_eve_observed
)
_US_MLK_DAY = HolidayRule("Martin Luther King Jr. Day", us.is_mlk_day)
_US_PRESIDENTS_DAY = HolidayRule("Presidents' Day", us.is_presidents_day)
_US_GOOD_FRIDAY = HolidayRule("Good Friday", us.is_good_friday)
_US_MEMORIAL_DAY = HolidayRule("Memorial Day", us.is_memorial_day)
_US_JUNETEENTH = HolidayRule("Juneteenth", us.is_juneteenth, first_year=2022)
_US_INDEPENDENCE_DAY = HolidayRule("Independence Day", us.is_independence_day)
_US_LABOR_DAY = HolidayRule("Labor Day", us.is_labor_day)
_US_COLUMBUS_DAY = HolidayRule("Columbus Day", us.is_columbus_day)
_US_VETERANS_DAY = HolidayRule("Veterans Day", us.is_veterans_day)
_US_THANKSGIVING = HolidayRule("Thanksgiving Day", us.is_thanksgiving)
_US_CHRISTMAS = HolidayRule("Christmas Day", us.is_christmas)

US_SETTLEMENT = Convention(
    code="us_settlement",
    name="US Settlement",
    holidays=(
        _US_NEW_YEARS_DAY,
        _US_NEW_YEARS_EVE_OBSERVED,
        _US_MLK_DAY,
        _US_PRESIDENTS_DAY,
        _US_MEMORIAL_DAY,
        _US_JUNETEENTH,
        _US_INDEPENDENCE_DAY,
        _US_LABOR_DAY,
        _US_COLUMBUS_DAY,
        _US_VETERANS_DAY,
        _US_THANKSGIVING,
        _US_CHRISTMAS,
    ),
)

US_LIBOR = Convention(
    code="us_libor",
    name="US Libor",
    holidays=US_SETTLEMENT.holidays,
    overrides=(
        Override(
            holiday="Independence Day",
            applies=lambda f: f.year >= 2015 and f.day != 4,
            reason="Since 2015 only July 4th itself closes Libor fixings",
        ),
    ),
)

US_GOVERNMENT_BOND = Convention(
    code="us_government_bond",
    name="US Government Bond",
    holidays=(
        _US_NEW_YEARS_DAY,
        _US_MLK_DAY,
        _US_PRESIDENTS_DAY,
        _US_GOOD_FRIDAY,
        _US_MEMORIAL_DAY,
        _US_JUNETEENTH,
        _US_INDEPENDENCE_DAY,
        _US_LABOR_DAY,
        _US_COLUMBUS_DAY,
        HolidayRule("Veterans Day", us.is_veterans_day_no_saturday),
        _US_THANKSGIVING,
        _US_CHRISTMAS,
    ),
    closures=(
        _closed_on(2018, 12, 5, "President George H.W. Bush's funeral"),
        _closed_on(2012, 10, 30, "Hurricane Sandy"),
        _closed_on(2004, 6, 11, "President Reagan's funeral"),
    ),
    overrides=(
        Override(
            holiday="Good Friday",
            applies=lambda f: f.year == 2015,
            reason="Bond market open on Good Friday 2015",
        ),
    ),
)

US_FEDERAL_RESERVE = Convention(
    code="us_federal_reserve",
    name="US Federal Reserve",
    holidays=(
        _US_NEW_YEARS_DAY,
        _US_MLK_DAY,
        _US_PRESIDENTS_DAY,
        _US_MEMORIAL_DAY,
        HolidayRule("Juneteenth", us.is_juneteenth_no_saturday, first_year=2022),
        HolidayRule("Independence Day", us.is_independence_day_no_saturday),
        _US_LABOR_DAY,
        _US_COLUMBUS_DAY,
        HolidayRule("Veterans Day", us.is_veterans_day_no_saturday),
        _US_THANKSGIVING,
        HolidayRule("Christmas Day", us.is_christmas_no_saturday),
    ),
)

NYSE = Convention(
    code="nyse",
    name="New York Stock Exchange",
    holidays=(
        _US_NEW_YEARS_DAY,
        HolidayRule("Martin Luther King Jr. Day", us.is_mlk_day, first_year=1998),
        _US_PRESIDENTS_DAY,
        _US_GOOD_FRIDAY,
        _US_MEMORIAL_DAY,
        _US_JUNETEENTH,
        _US_INDEPENDENCE_DAY,
        _US_LABOR_DAY,
        _US_THANKSGIVING,
        _US_CHRISTMAS,
        HolidayRule("Presidential Election Day", us.is_presidential_election_day),
    ),
    closures=(
        _closed_on(2018, 12, 5, "President George H.W. Bush's funeral"),
        Closure("Hurricane Sandy", date(2012, 10, 29), end=date(2012, 10, 30)),
        _closed_on(2007, 1, 2, "President Ford's funeral"),
        _closed_on(2004, 6, 11, "President Reagan's funeral"),
        Closure("September 11 attacks", date(2001, 9, 11), end=date(2001, 9, 14)),
        _closed_on(1994, 4, 27, "President Nixon's funeral"),
        _closed_on(1985, 9, 27, "Hurricane Gloria"),
        _closed_on(1977, 7, 14, "New York City blackout"),
        _closed_on(1973, 1, 25, "President Lyndon B. Johnson's funeral"),
        _closed_on(1972, 12, 28, "President Truman's funeral"),
        _closed_on(1969, 7, 21, "National Day of Participation for the lunar exploration"),
        _closed_on(1969, 3, 31, "President Eisenhower's funeral"),
        _closed_on(1969, 2, 10, "Heavy snow"),
        _closed_on(1968, 7, 5, "Day after Independence Day"),
        Closure(
            "Paperwork crisis",
            date(1968, 6, 12),
            end=date(1968, 12, 31),
            weekday=Weekday.WEDNESDAY,
        ),
        _closed_on(1968, 4, 9, "Day of mourning for Martin Luther King Jr."),
        _closed_on(1963, 11, 25, "President Kennedy's funeral"),
        _closed_on(1961, 5, 29, "Day before Decoration Day"),
        _closed_on(1958, 12, 26, "Day after Christmas"),
        _closed_on(1965, 12, 24, "Christmas Eve"),
        _closed_on(1956, 12, 24, "Christmas Eve"),
        _closed_on(1954, 12, 24, "Christmas Eve"),
    ),
)


# =============================================================================
# Canada
# =============================================================================

_CANADA_HOLIDAYS = (
    HolidayRule("New Year's Day", canada.is_new_years_day),
    HolidayRule("Family Day", canada.is_family_day),
    HolidayRule("Good Friday", canada.is_good_friday),
    HolidayRule("Victoria Day", canada.is_victoria_day),
    HolidayRule("Canada Day", canada.is_canada_day),
    HolidayRule("Civic Holiday", canada.is_provincial_holiday),
    HolidayRule("Labour Day", canada.is_labour_day),
    HolidayRule("Thanksgiving Day", canada.is_thanksgiving),
    HolidayRule("Remembrance Day", canada.is_remembrance_day),
    HolidayRule("Christmas Day", canada.is_christmas),
    HolidayRule("Boxing Day", canada.is_boxing_day),
)

CANADA_SETTLEMENT = Convention(
    code="canada_settlement",
    name="Canada Settlement",
    holidays=_CANADA_HOLIDAYS,
)

TSX = Convention(
    code="tsx",
    name="Toronto Stock Exchange",
    holidays=_CANADA_HOLIDAYS,
)


# =============================================================================
# Registry
# =============================================================================

CONVENTIONS: dict[str, Convention] = {
    c.code: c
    for c in (
        US_SETTLEMENT,
        US_LIBOR,
        US_GOVERNMENT_BOND,
        US_FEDERAL_RESERVE,
        NYSE,
        CANADA_SETTLEMENT,
        TSX,
    )
}


def _normalize(name: str) -> str:
    return re.sub(r"[\s\-]+", "_", name.strip().lower())


_LOOKUP: dict[str, Convention] = {
    _normalize(key): c
    for c in CONVENTIONS.values()
    for key in (c.code, c.name)
}


def get_convention(name: str) -> Convention:
    """
    Look up a built-in convention by code or display name.

    Case, spaces and hyphens are ignored, so "US Settlement",
    "us-settlement" and "us_settlement" all resolve to `US_SETTLEMENT`.

    Raises:
        UnknownConventionError: If no convention matches
    """
    convention = _LOOKUP.get(_normalize(name))
    if convention is None:
        raise UnknownConventionError(
            message=f"Unknown calendar convention: '{name}'",
            details={"available": sorted(CONVENTIONS)},
        )
    logger.debug("Resolved convention '%s' to %s", name, convention.code)
    return convention


def list_conventions() -> list[str]:
    """Codes of all built-in conventions."""
    return sorted(CONVENTIONS)
