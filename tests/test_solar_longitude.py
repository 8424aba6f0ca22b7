"""Tests for the solar longitude estimator and equinox search."""

from datetime import datetime, timedelta, timezone

import pytest

from holidays_jp_api.config import JST
from holidays_jp_api.utils import solar_longitude
from holidays_jp_api.utils.solar_longitude import (
    EquinoxNotFoundError,
    JULIAN_YEAR_SECONDS,
    J2000,
    autumnal_equinox_day,
    normalize_degree,
    sun_longitude_at,
    to_julian_year,
    vernal_equinox_day,
)


def _angle_diff(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


class TestNormalizeDegree:
    def test_negative(self):
        assert normalize_degree(-10) == pytest.approx(350)

    def test_wraps_multiple_turns(self):
        assert normalize_degree(720.5) == pytest.approx(0.5)

    def test_in_range_unchanged(self):
        assert normalize_degree(123.25) == 123.25


class TestJulianYear:
    def test_epoch_includes_leap_and_tt_offsets(self):
        assert to_julian_year(J2000) == pytest.approx(68 / JULIAN_YEAR_SECONDS)

    def test_one_julian_year_later(self):
        moment = J2000 + timedelta(seconds=JULIAN_YEAR_SECONDS)
        assert to_julian_year(moment) == pytest.approx(1 + 68 / JULIAN_YEAR_SECONDS)

    def test_timezone_is_respected(self):
        utc = datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc)
        jst = datetime(2024, 3, 20, 9, 0, tzinfo=JST)
        assert to_julian_year(utc) == to_julian_year(jst)


class TestSunLongitude:
    def test_vernal_equinox_2000(self):
        """March equinox 2000 occurred at 2000-03-20 07:35 UTC."""
        moment = datetime(2000, 3, 20, 7, 35, tzinfo=timezone.utc)
        assert _angle_diff(sun_longitude_at(moment), 0) < 0.1

    def test_autumnal_equinox_2000(self):
        """September equinox 2000 occurred at 2000-09-22 17:28 UTC."""
        moment = datetime(2000, 9, 22, 17, 28, tzinfo=timezone.utc)
        assert _angle_diff(sun_longitude_at(moment), 180) < 0.1

    def test_always_normalized(self):
        start = datetime(1990, 1, 1, tzinfo=timezone.utc)
        for i in range(0, 365 * 40, 37):
            longitude = sun_longitude_at(start + timedelta(days=i))
            assert 0 <= longitude < 360


class TestEquinoxDays:
    def test_known_vernal_days(self):
        known = {2019: 21, 2020: 20, 2022: 21, 2023: 21, 2024: 20, 2025: 20, 2026: 20, 2027: 21, 2030: 20}
        for year, expected in known.items():
            assert vernal_equinox_day(year) == expected, f"vernal {year}"

    def test_known_autumnal_days(self):
        known = {2020: 22, 2022: 23, 2023: 23, 2024: 22, 2025: 23, 2026: 23, 2027: 23, 2028: 22}
        for year, expected in known.items():
            assert autumnal_equinox_day(year) == expected, f"autumnal {year}"

    def test_21st_century_bounds(self):
        for year in range(2000, 2100):
            assert vernal_equinox_day(year) in (19, 20, 21), year
            assert autumnal_equinox_day(year) in (22, 23), year

    def test_timezone_is_explicit(self):
        """2024 March equinox was 03:06 UTC on the 20th, i.e. 12:06 JST."""
        assert vernal_equinox_day(2024, tz=JST) == 20
        assert vernal_equinox_day(2024, tz=timezone(timedelta(hours=-10))) == 19

    def test_vernal_not_found_raises(self, monkeypatch):
        monkeypatch.setattr(solar_longitude, "sun_longitude", lambda jy: 300.0)
        with pytest.raises(EquinoxNotFoundError) as excinfo:
            vernal_equinox_day(2030)
        assert excinfo.value.year == 2030
        assert excinfo.value.month == 3

    def test_autumnal_not_found_raises(self, monkeypatch):
        monkeypatch.setattr(solar_longitude, "sun_longitude", lambda jy: 100.0)
        with pytest.raises(EquinoxNotFoundError) as excinfo:
            autumnal_equinox_day(2030)
        assert excinfo.value.month == 9

    def test_not_found_is_a_value_error(self):
        assert issubclass(EquinoxNotFoundError, ValueError)

    def test_vernal_without_crossing_in_window_raises(self, monkeypatch):
        """Already past the equinox on the first scanned day: no crossing was seen."""
        monkeypatch.setattr(solar_longitude, "sun_longitude", lambda jy: 100.0)
        with pytest.raises(EquinoxNotFoundError) as excinfo:
            vernal_equinox_day(2030)
        assert excinfo.value.month == 3

    def test_autumnal_without_crossing_in_window_raises(self, monkeypatch):
        monkeypatch.setattr(solar_longitude, "sun_longitude", lambda jy: 200.0)
        with pytest.raises(EquinoxNotFoundError) as excinfo:
            autumnal_equinox_day(2030)
        assert excinfo.value.month == 9
