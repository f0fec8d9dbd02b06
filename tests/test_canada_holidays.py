"""
Tests for the Canadian holiday predicates.
"""
import pytest

from bizcal.calendars import canada

from tests.conftest import fields


class TestMovedToMonday:
    """Weekend holidays observed on the following Monday."""

    @pytest.mark.parametrize("y,m,d,expected", [
        (2024, 1, 1, True),
        (2023, 1, 2, True),    # Sunday January 1st
        (2022, 1, 3, True),    # Saturday January 1st
        (2024, 1, 2, False),   # Tuesday
    ])
    def test_new_years_day(self, y, m, d, expected):
        assert canada.is_new_years_day(fields(y, m, d)) is expected

    def test_canada_day(self):
        assert canada.is_canada_day(fields(2024, 7, 1)) is True
        assert canada.is_canada_day(fields(2023, 7, 3)) is True     # Saturday July 1st
        assert canada.is_canada_day(fields(2024, 7, 2)) is False

    def test_remembrance_day(self):
        assert canada.is_remembrance_day(fields(2022, 11, 11)) is True
        assert canada.is_remembrance_day(fields(2023, 11, 13)) is True
        assert canada.is_remembrance_day(fields(2023, 11, 10)) is False   # no Friday roll


class TestChristmasAndBoxingDay:
    """Christmas and Boxing Day push each other to Monday/Tuesday."""

    def test_weekday_christmas(self):
        assert canada.is_christmas(fields(2023, 12, 25)) is True
        assert canada.is_boxing_day(fields(2023, 12, 26)) is True

    def test_weekend_christmas(self):
        # December 25th and 26th 2021 fell on the weekend
        assert canada.is_christmas(fields(2021, 12, 27)) is True
        assert canada.is_boxing_day(fields(2021, 12, 28)) is True

    def test_no_roll_to_wednesday(self):
        assert canada.is_christmas(fields(2023, 12, 27)) is False
        assert canada.is_boxing_day(fields(2023, 12, 28)) is False


class TestFloatingHolidays:
    """Holidays defined relative to a weekday."""

    def test_family_day(self):
        assert canada.is_family_day(fields(2023, 2, 20)) is True
        assert canada.is_family_day(fields(2008, 2, 18)) is True

    def test_family_day_before_2008(self):
        assert canada.is_family_day(fields(2007, 2, 19)) is False

    def test_victoria_day(self):
        assert canada.is_victoria_day(fields(2023, 5, 22)) is True
        assert canada.is_victoria_day(fields(2021, 5, 24)) is True   # May 24th itself
        assert canada.is_victoria_day(fields(2023, 5, 15)) is False

    def test_provincial_holiday(self):
        assert canada.is_provincial_holiday(fields(2023, 8, 7)) is True
        assert canada.is_provincial_holiday(fields(2023, 8, 14)) is False

    def test_labour_day(self):
        assert canada.is_labour_day(fields(2023, 9, 4)) is True

    def test_thanksgiving(self):
        assert canada.is_thanksgiving(fields(2023, 10, 9)) is True
        assert canada.is_thanksgiving(fields(2023, 10, 2)) is False

    def test_good_friday(self):
        assert canada.is_good_friday(fields(2023, 4, 7)) is True
        assert canada.is_good_friday(fields(2023, 4, 10)) is False
