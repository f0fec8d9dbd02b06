"""
Business-Day Navigation

Generic scans over any `BusinessCalendar`: roll a date onto a business
day, step to the adjacent business day, and count or add business days.

Every scan is a one-day-at-a-time walk. Holiday runs are short, but no
convention promises a maximum run length, so single-step scans give up
after `max_days` calendar days with `NoBusinessDayFoundError` rather than
walking forever.
"""
from __future__ import annotations

import logging
from datetime import date, timedelta

from .calendars.base import BusinessCalendar
from .exceptions import NoBusinessDayFoundError

logger = logging.getLogger(__name__)

DEFAULT_MAX_SCAN_DAYS = 30

_ONE_DAY = timedelta(days=1)


def _scan(
    calendar: BusinessCalendar,
    start: date,
    step: timedelta,
    include_start: bool,
    max_days: int,
) -> date:
    if max_days < 1:
        raise ValueError(f"max_days must be positive, got {max_days}")

    current = start if include_start else start + step
    for _ in range(max_days):
        if calendar.is_business_day(current):
            return current
        current += step

    direction = "forward" if step > timedelta(0) else "backward"
    raise NoBusinessDayFoundError(
        message=(
            f"No business day within {max_days} days {direction} "
            f"of {start.isoformat()}"
        ),
        details={
            "start": start.isoformat(),
            "direction": direction,
            "max_days": max_days,
        },
        convention=getattr(calendar, "code", None),
    )


def adjust_forward(
    calendar: BusinessCalendar,
    d: date,
    max_days: int = DEFAULT_MAX_SCAN_DAYS,
) -> date:
    """
    Roll a date forward onto a business day.

    Returns the date itself if it is a business day, otherwise the first
    business day after it.

    Raises:
        NoBusinessDayFoundError: If no business day is found within max_days
    """
    adjusted = _scan(calendar, d, _ONE_DAY, True, max_days)
    if adjusted != d:
        logger.debug("Adjusted %s forward to %s", d, adjusted)
    return adjusted


def next_business_day(
    calendar: BusinessCalendar,
    d: date,
    max_days: int = DEFAULT_MAX_SCAN_DAYS,
) -> date:
    """
    First business day strictly after a date.

    Raises:
        NoBusinessDayFoundError: If no business day is found within max_days
    """
    return _scan(calendar, d, _ONE_DAY, False, max_days)


def adjust_backward(
    calendar: BusinessCalendar,
    d: date,
    max_days: int = DEFAULT_MAX_SCAN_DAYS,
) -> date:
    """
    Roll a date backward onto a business day.

    Returns the date itself if it is a business day, otherwise the last
    business day before it.

    Raises:
        NoBusinessDayFoundError: If no business day is found within max_days
    """
    adjusted = _scan(calendar, d, -_ONE_DAY, True, max_days)
    if adjusted != d:
        logger.debug("Adjusted %s backward to %s", d, adjusted)
    return adjusted


def previous_business_day(
    calendar: BusinessCalendar,
    d: date,
    max_days: int = DEFAULT_MAX_SCAN_DAYS,
) -> date:
    """
    Last business day strictly before a date.

    Raises:
        NoBusinessDayFoundError: If no business day is found within max_days
    """
    return _scan(calendar, d, -_ONE_DAY, False, max_days)


def add_business_days(
    calendar: BusinessCalendar,
    start: date,
    days: int,
    max_days: int = DEFAULT_MAX_SCAN_DAYS,
) -> date:
    """
    Move a number of business days away from a date.

    Args:
        calendar: Calendar deciding business days
        start: Starting date
        days: Number of business days to add (can be negative)
        max_days: Scan limit for each single business-day step

    Returns:
        The resulting date; `start` itself when days is 0
    """
    current = start
    step = next_business_day if days > 0 else previous_business_day
    for _ in range(abs(days)):
        current = step(calendar, current, max_days)
    return current


def business_days_between(
    calendar: BusinessCalendar,
    start: date,
    end: date,
) -> int:
    """
    Count business days between two dates.

    Args:
        start: Start date (exclusive)
        end: End date (inclusive)

    Returns:
        Number of business days; 0 when end is not after start
    """
    if start >= end:
        return 0

    count = 0
    current = start + _ONE_DAY
    while current <= end:
        if calendar.is_business_day(current):
            count += 1
        current += _ONE_DAY
    return count
