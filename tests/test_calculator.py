"""Tests for the rule-based holiday calculator."""

from calendar import MONDAY
from datetime import date

import pytest

from holidays_jp_api.services import calculator
from holidays_jp_api.services.calculator import (
    apply_holidays_in_lieu,
    calculate_holidays_in_month,
    calculate_holidays_in_year,
    nth_weekday_of_month,
)
from holidays_jp_api.utils.solar_longitude import EquinoxNotFoundError


class TestNthWeekday:
    def test_first_day_is_target(self):
        # 2024-01-01 was a Monday
        assert nth_weekday_of_month(2024, 1, MONDAY, 1) == 1
        assert nth_weekday_of_month(2024, 1, MONDAY, 2) == 8

    def test_wraps_week(self):
        # 2030-09-01 is a Sunday
        assert nth_weekday_of_month(2030, 9, MONDAY, 3) == 16


class TestCalculateMonth:
    def test_vernal_equinox_2030(self):
        holidays = calculate_holidays_in_month(2030, 3)
        equinox = [h for h in holidays if h.name == "春分の日"]
        assert len(equinox) == 1
        assert equinox[0].date.day in (19, 20, 21)

    def test_september_2030(self):
        holidays = calculate_holidays_in_month(2030, 9)
        assert [(h.date, h.name) for h in holidays] == [
            (date(2030, 9, 16), "敬老の日"),
            (date(2030, 9, 23), "秋分の日"),
        ]

    def test_special_holidays_included(self):
        holidays = calculate_holidays_in_month(2019, 10)
        assert (date(2019, 10, 22), "休日（祝日扱い）") in [(h.date, h.name) for h in holidays]

    def test_no_rule_before_1948(self):
        assert calculate_holidays_in_month(1947, 1) == []
        assert calculate_holidays_in_month(1947, 3) == []

    def test_sorted(self):
        holidays = calculate_holidays_in_month(2030, 5)
        assert [h.date for h in holidays] == sorted(h.date for h in holidays)

    def test_invalid_month(self):
        with pytest.raises(ValueError):
            calculate_holidays_in_month(2030, 13)

    def test_in_lieu_not_computed(self):
        """2023-01-01 was a Sunday; the substitute holiday is not derived by rules."""
        holidays = calculate_holidays_in_month(2023, 1)
        assert date(2023, 1, 2) not in [h.date for h in holidays]

    def test_in_lieu_is_identity(self):
        holidays = calculate_holidays_in_month(2030, 5)
        assert apply_holidays_in_lieu(holidays) is holidays

    def test_equinox_failure_propagates(self, monkeypatch):
        def fail(year, tz):
            raise EquinoxNotFoundError(year, 3)

        monkeypatch.setattr(calculator, "vernal_equinox_day", fail)
        with pytest.raises(EquinoxNotFoundError):
            calculate_holidays_in_month(2030, 3)


class TestCalculateYear:
    def test_year_is_concatenation_of_months(self):
        for year in (1960, 2000, 2021, 2035):
            months = []
            for month in range(1, 13):
                months.extend(calculate_holidays_in_month(year, month))
            assert calculate_holidays_in_year(year) == months

    def test_dates_unique_and_sorted(self):
        for year in range(1948, 2101):
            dates = [h.date for h in calculate_holidays_in_year(year)]
            assert dates == sorted(set(dates)), year

    def test_idempotent(self):
        first = [(h.date, h.name) for h in calculate_holidays_in_year(2040)]
        second = [(h.date, h.name) for h in calculate_holidays_in_year(2040)]
        assert first == second

    def test_respect_for_the_aged_day_is_monday(self):
        for year in range(2003, 2101):
            aged = [h for h in calculate_holidays_in_year(year) if h.name == "敬老の日"]
            assert len(aged) == 1
            assert aged[0].date.weekday() == MONDAY
            assert 15 <= aged[0].date.day <= 21

    def test_matches_static_table_apart_from_substitute_days(self, static_table):
        """The static record adds substitute days (休日) that the rules do not compute."""
        for year in range(static_table.start_year, static_table.end_year + 1):
            expected = [(h.date, h.name) for h in static_table if h.date.year == year and h.name != "休日"]
            actual = [(h.date, h.name) for h in calculate_holidays_in_year(year)]
            assert actual == expected, year
