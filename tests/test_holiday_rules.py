"""Tests for the annual holiday rule generations."""

from datetime import date

from holidays_jp_api.services.holiday_rules import (
    ANNUAL_HOLIDAY_RULES,
    SPECIAL_HOLIDAYS,
    find_rule,
    find_special_holidays,
)


class TestFindRule:
    def test_before_first_generation(self):
        assert find_rule(1947) is None

    def test_exact_effective_year(self):
        assert find_rule(1948).effective_from == 1948
        assert find_rule(2007).effective_from == 2007

    def test_latest_generation_not_after_year(self):
        assert find_rule(2005).effective_from == 2003
        assert find_rule(2021).effective_from == 2020
        assert find_rule(2100).effective_from == 2022

    def test_generations_ordered(self):
        years = [r.effective_from for r in ANNUAL_HOLIDAY_RULES]
        assert years == sorted(set(years))


class TestGenerations:
    def _names(self, year, month):
        rule = find_rule(year)
        fixed = [r.name for r in rule.fixed_date_rules if r.month == month]
        weekday = [r.name for r in rule.weekday_rules if r.month == month]
        return fixed + weekday

    def test_mountain_day_only_from_2016(self):
        assert "山の日" not in self._names(2015, 8)
        assert "山の日" in self._names(2016, 8)

    def test_olympic_years_leave_relocated_days_to_special_table(self):
        for year in (2020, 2021):
            assert self._names(year, 7) == []
            assert self._names(year, 8) == []
            assert self._names(year, 10) == []
        assert self._names(2022, 10) == ["スポーツの日"]

    def test_no_emperors_birthday_in_2019(self):
        rule = find_rule(2019)
        names = [r.name for r in rule.fixed_date_rules]
        assert "天皇誕生日" not in names

    def test_rules_unique_within_generation(self):
        for rule in ANNUAL_HOLIDAY_RULES:
            keys = [(r.month, r.day) for r in rule.fixed_date_rules]
            assert len(keys) == len(set(keys)), rule.effective_from
            months = [r.month for r in rule.weekday_rules]
            assert len(months) == len(set(months)), rule.effective_from


class TestSpecialHolidays:
    def test_filtered_by_month(self):
        assert [h.date for h in find_special_holidays(2019, 5)] == [date(2019, 5, 1)]
        assert find_special_holidays(2019, 6) == []

    def test_olympic_relocations(self):
        names = {h.date: h.name for h in SPECIAL_HOLIDAYS}
        assert names[date(2021, 8, 8)] == "山の日"
        assert names[date(2020, 7, 24)] == "スポーツの日"

    def test_dates_unique(self):
        dates = [h.date for h in SPECIAL_HOLIDAYS]
        assert len(dates) == len(set(dates))

    def test_ceremonial_names_follow_cabinet_office_record(self):
        names = {h.date: h.name for h in SPECIAL_HOLIDAYS}
        assert names[date(1959, 4, 10)] == "結婚ノ儀"
        assert names[date(1993, 6, 9)] == "結婚の儀"
