"""
Tests for business-day navigation.

Tests cover:
- Forward/backward adjustment and stepping
- Idempotence and monotonicity properties
- Scan cap and NoBusinessDayFoundError
- Adding and counting business days
"""
import logging
import pytest
from datetime import date, timedelta

from bizcal import (
    NYSE,
    US_SETTLEMENT,
    NoBusinessDayFoundError,
    add_business_days,
    adjust_backward,
    adjust_forward,
    business_days_between,
    next_business_day,
    previous_business_day,
)

from tests.conftest import date_range


class AlwaysClosed:
    """A calendar with no business days at all."""
    code = "always_closed"

    def is_weekend(self, d: date) -> bool:
        return d.weekday() >= 5

    def is_weekday(self, d: date) -> bool:
        return not self.is_weekend(d)

    def is_business_day(self, d: date) -> bool:
        return False


# =============================================================================
# Adjustment
# =============================================================================

class TestAdjust:
    """Tests for adjust_forward / adjust_backward."""

    def test_business_day_unchanged(self):
        d = date(2023, 11, 24)
        assert adjust_forward(US_SETTLEMENT, d) == d
        assert adjust_backward(US_SETTLEMENT, d) == d

    def test_adjust_forward_over_weekend(self):
        assert adjust_forward(US_SETTLEMENT, date(2023, 11, 25)) == date(2023, 11, 27)

    def test_adjust_backward_over_weekend(self):
        assert adjust_backward(US_SETTLEMENT, date(2023, 11, 26)) == date(2023, 11, 24)

    def test_adjust_forward_over_holiday_run(self):
        # Sunday New Year's Day, observed Monday
        assert adjust_forward(US_SETTLEMENT, date(2022, 12, 31)) == date(2023, 1, 3)

    def test_adjust_backward_over_holiday(self):
        assert adjust_backward(US_SETTLEMENT, date(2023, 1, 2)) == date(2022, 12, 30)

    def test_adjust_forward_is_idempotent(self, convention, sample_dates):
        for d in sample_dates:
            once = adjust_forward(convention, d)
            assert adjust_forward(convention, once) == once

    def test_adjust_backward_is_idempotent(self, convention, sample_dates):
        for d in sample_dates:
            once = adjust_backward(convention, d)
            assert adjust_backward(convention, once) == once

    def test_logs_adjustment(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="bizcal.navigation"):
            adjust_forward(US_SETTLEMENT, date(2023, 11, 25))
        assert "forward" in caplog.text


# =============================================================================
# Stepping
# =============================================================================

class TestStep:
    """Tests for next_business_day / previous_business_day."""

    def test_next_business_day_over_new_year(self):
        assert next_business_day(US_SETTLEMENT, date(2022, 12, 30)) == date(2023, 1, 3)

    def test_next_business_day_from_business_day(self):
        assert next_business_day(US_SETTLEMENT, date(2023, 11, 22)) == date(2023, 11, 24)

    def test_previous_business_day(self):
        assert previous_business_day(US_SETTLEMENT, date(2023, 11, 24)) == date(2023, 11, 22)

    def test_previous_business_day_over_sandy(self):
        assert previous_business_day(NYSE, date(2012, 10, 31)) == date(2012, 10, 26)

    def test_next_is_strictly_after_and_nothing_in_between(self, convention, sample_dates):
        for d in sample_dates:
            nxt = next_business_day(convention, d)
            assert nxt > d
            assert convention.is_business_day(nxt)
            for between in date_range(d + timedelta(days=1), nxt - timedelta(days=1)):
                assert not convention.is_business_day(between)

    def test_previous_is_strictly_before_and_nothing_in_between(self, convention, sample_dates):
        for d in sample_dates:
            prev = previous_business_day(convention, d)
            assert prev < d
            assert convention.is_business_day(prev)
            for between in date_range(prev + timedelta(days=1), d - timedelta(days=1)):
                assert not convention.is_business_day(between)

    def test_previous_of_next_is_before_next(self, convention, sample_dates):
        """previous(next(d)) need not be d, but it always precedes next(d)."""
        for d in sample_dates:
            nxt = next_business_day(convention, d)
            assert previous_business_day(convention, nxt) < nxt

    def test_previous_of_next_can_differ_from_start(self):
        # Saturday maps forward to Monday, and Monday back to Friday
        saturday = date(2023, 11, 25)
        nxt = next_business_day(US_SETTLEMENT, saturday)
        assert previous_business_day(US_SETTLEMENT, nxt) == date(2023, 11, 24)


# =============================================================================
# Scan Cap
# =============================================================================

class TestScanCap:
    """Scans give up instead of looping forever."""

    @pytest.mark.parametrize("func", [
        adjust_forward, adjust_backward, next_business_day, previous_business_day,
    ])
    def test_no_business_day_found(self, func):
        with pytest.raises(NoBusinessDayFoundError) as exc_info:
            func(AlwaysClosed(), date(2023, 1, 1))
        error = exc_info.value
        assert error.code == "BC_NO_BUSINESS_DAY"
        assert error.convention == "always_closed"
        assert error.details["max_days"] == 30

    def test_custom_cap(self):
        # Sept 11-14 2001 plus the weekend: five closed days after Sept 10
        with pytest.raises(NoBusinessDayFoundError):
            next_business_day(NYSE, date(2001, 9, 10), max_days=5)
        assert next_business_day(NYSE, date(2001, 9, 10), max_days=7) == date(2001, 9, 17)

    def test_invalid_cap(self):
        with pytest.raises(ValueError):
            adjust_forward(US_SETTLEMENT, date(2023, 1, 1), max_days=0)


# =============================================================================
# Adding and Counting
# =============================================================================

class TestAddBusinessDays:
    """Tests for add_business_days and business_days_between."""

    def test_add_zero(self):
        saturday = date(2023, 11, 25)
        assert add_business_days(US_SETTLEMENT, saturday, 0) == saturday

    def test_add_over_thanksgiving(self):
        # Wednesday + 2 business days skips Thanksgiving
        assert add_business_days(US_SETTLEMENT, date(2023, 11, 22), 2) == date(2023, 11, 27)

    def test_subtract(self):
        assert add_business_days(US_SETTLEMENT, date(2023, 11, 27), -2) == date(2023, 11, 22)

    def test_convention_shortcut(self):
        assert US_SETTLEMENT.add_business_days(date(2023, 11, 22), 2) == date(2023, 11, 27)

    def test_business_days_between(self):
        # Nov 23-27 2023: Thursday holiday, Friday open, weekend, Monday open
        assert business_days_between(US_SETTLEMENT, date(2023, 11, 22), date(2023, 11, 27)) == 2
        assert US_SETTLEMENT.business_days_between(date(2023, 11, 22), date(2023, 11, 27)) == 2

    def test_business_days_between_empty(self):
        assert business_days_between(US_SETTLEMENT, date(2023, 11, 27), date(2023, 11, 22)) == 0
        assert business_days_between(US_SETTLEMENT, date(2023, 11, 27), date(2023, 11, 27)) == 0

    def test_add_and_count_agree(self, convention):
        start = date(2024, 1, 1)
        end = add_business_days(convention, start, 40)
        assert business_days_between(convention, start, end) == 40
