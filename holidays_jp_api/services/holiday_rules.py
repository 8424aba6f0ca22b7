# -*- coding: utf-8 -*-
"""
祝日规则模块
按「国民の祝日に関する法律」的历次修订，把每年固定的祝日分代描述

每一代规则从 effective_from 年起生效，直到下一代规则生效为止。
临时以特别法规定的祝日放在 SPECIAL_HOLIDAYS 中。
"""

from calendar import MONDAY
from dataclasses import dataclass
from datetime import date

from holidays_jp_api.models.holiday import Holiday


@dataclass(frozen=True)
class FixedDateRule:
    """每年同月同日的祝日"""
    month: int
    day: int
    name: str


@dataclass(frozen=True)
class WeekdayRule:
    """每年某月第 nth 个星期 weekday 的祝日 (nth 从 1 开始)"""
    month: int
    weekday: int
    nth: int
    name: str


@dataclass(frozen=True)
class RuleGeneration:
    effective_from: int
    fixed_date_rules: tuple = ()
    weekday_rules: tuple = ()


NEW_YEARS_DAY = FixedDateRule(1, 1, "元日")
COMING_OF_AGE_DAY = FixedDateRule(1, 15, "成人の日")
FOUNDATION_DAY = FixedDateRule(2, 11, "建国記念の日")
CONSTITUTION_DAY = FixedDateRule(5, 3, "憲法記念日")
CHILDRENS_DAY = FixedDateRule(5, 5, "こどもの日")
CULTURE_DAY = FixedDateRule(11, 3, "文化の日")
LABOR_THANKSGIVING_DAY = FixedDateRule(11, 23, "勤労感謝の日")

COMING_OF_AGE_MONDAY = WeekdayRule(1, MONDAY, 2, "成人の日")
MARINE_MONDAY = WeekdayRule(7, MONDAY, 3, "海の日")
AGED_MONDAY = WeekdayRule(9, MONDAY, 3, "敬老の日")
HEALTH_SPORTS_MONDAY = WeekdayRule(10, MONDAY, 2, "体育の日")
SPORTS_MONDAY = WeekdayRule(10, MONDAY, 2, "スポーツの日")


ANNUAL_HOLIDAY_RULES = (
    # 昭和23年 国民の祝日に関する法律 施行
    RuleGeneration(
        effective_from=1948,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            COMING_OF_AGE_DAY,
            FixedDateRule(4, 29, "天皇誕生日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
        ),
    ),
    # 敬老の日・体育の日 新设
    RuleGeneration(
        effective_from=1966,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            COMING_OF_AGE_DAY,
            FixedDateRule(4, 29, "天皇誕生日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            FixedDateRule(9, 15, "敬老の日"),
            FixedDateRule(10, 10, "体育の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
        ),
    ),
    # 建国記念の日 首次实施
    RuleGeneration(
        effective_from=1967,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            COMING_OF_AGE_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "天皇誕生日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            FixedDateRule(9, 15, "敬老の日"),
            FixedDateRule(10, 10, "体育の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
        ),
    ),
    # 平成改元: 4/29 改为 みどりの日，天皇誕生日 移至 12/23
    RuleGeneration(
        effective_from=1989,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            COMING_OF_AGE_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "みどりの日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            FixedDateRule(9, 15, "敬老の日"),
            FixedDateRule(10, 10, "体育の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
            FixedDateRule(12, 23, "天皇誕生日"),
        ),
    ),
    # 海の日 新设
    RuleGeneration(
        effective_from=1996,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            COMING_OF_AGE_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "みどりの日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            FixedDateRule(7, 20, "海の日"),
            FixedDateRule(9, 15, "敬老の日"),
            FixedDateRule(10, 10, "体育の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
            FixedDateRule(12, 23, "天皇誕生日"),
        ),
    ),
    # 第一次 Happy Monday: 成人の日・体育の日
    RuleGeneration(
        effective_from=2000,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "みどりの日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            FixedDateRule(7, 20, "海の日"),
            FixedDateRule(9, 15, "敬老の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
            FixedDateRule(12, 23, "天皇誕生日"),
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            HEALTH_SPORTS_MONDAY,
        ),
    ),
    # 第二次 Happy Monday: 海の日・敬老の日
    RuleGeneration(
        effective_from=2003,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "みどりの日"),
            CONSTITUTION_DAY,
            CHILDRENS_DAY,
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
            FixedDateRule(12, 23, "天皇誕生日"),
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            MARINE_MONDAY,
            AGED_MONDAY,
            HEALTH_SPORTS_MONDAY,
        ),
    ),
    # 昭和の日 新设，みどりの日 移至 5/4
    RuleGeneration(
        effective_from=2007,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "昭和の日"),
            CONSTITUTION_DAY,
            FixedDateRule(5, 4, "みどりの日"),
            CHILDRENS_DAY,
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
            FixedDateRule(12, 23, "天皇誕生日"),
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            MARINE_MONDAY,
            AGED_MONDAY,
            HEALTH_SPORTS_MONDAY,
        ),
    ),
    # 山の日 新设
    RuleGeneration(
        effective_from=2016,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "昭和の日"),
            CONSTITUTION_DAY,
            FixedDateRule(5, 4, "みどりの日"),
            CHILDRENS_DAY,
            FixedDateRule(8, 11, "山の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
            FixedDateRule(12, 23, "天皇誕生日"),
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            MARINE_MONDAY,
            AGED_MONDAY,
            HEALTH_SPORTS_MONDAY,
        ),
    ),
    # 令和改元: 当年没有天皇誕生日
    RuleGeneration(
        effective_from=2019,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(4, 29, "昭和の日"),
            CONSTITUTION_DAY,
            FixedDateRule(5, 4, "みどりの日"),
            CHILDRENS_DAY,
            FixedDateRule(8, 11, "山の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            MARINE_MONDAY,
            AGED_MONDAY,
            HEALTH_SPORTS_MONDAY,
        ),
    ),
    # 天皇誕生日 2/23，体育の日 改称 スポーツの日
    # 2020/2021 年 海の日・スポーツの日・山の日 因奥运会移动，见 SPECIAL_HOLIDAYS
    RuleGeneration(
        effective_from=2020,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(2, 23, "天皇誕生日"),
            FixedDateRule(4, 29, "昭和の日"),
            CONSTITUTION_DAY,
            FixedDateRule(5, 4, "みどりの日"),
            CHILDRENS_DAY,
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            AGED_MONDAY,
        ),
    ),
    RuleGeneration(
        effective_from=2022,
        fixed_date_rules=(
            NEW_YEARS_DAY,
            FOUNDATION_DAY,
            FixedDateRule(2, 23, "天皇誕生日"),
            FixedDateRule(4, 29, "昭和の日"),
            CONSTITUTION_DAY,
            FixedDateRule(5, 4, "みどりの日"),
            CHILDRENS_DAY,
            FixedDateRule(8, 11, "山の日"),
            CULTURE_DAY,
            LABOR_THANKSGIVING_DAY,
        ),
        weekday_rules=(
            COMING_OF_AGE_MONDAY,
            MARINE_MONDAY,
            AGED_MONDAY,
            SPORTS_MONDAY,
        ),
    ),
)


# 由特别法规定、只在某一年存在的祝日
SPECIAL_HOLIDAYS = (
    Holiday(date(1959, 4, 10), "結婚ノ儀"),
    Holiday(date(1989, 2, 24), "大喪の礼"),
    Holiday(date(1990, 11, 12), "即位礼正殿の儀"),
    Holiday(date(1993, 6, 9), "結婚の儀"),
    Holiday(date(2019, 5, 1), "休日（祝日扱い）"),
    Holiday(date(2019, 10, 22), "休日（祝日扱い）"),
    Holiday(date(2020, 7, 23), "海の日"),
    Holiday(date(2020, 7, 24), "スポーツの日"),
    Holiday(date(2020, 8, 10), "山の日"),
    Holiday(date(2021, 7, 22), "海の日"),
    Holiday(date(2021, 7, 23), "スポーツの日"),
    Holiday(date(2021, 8, 8), "山の日"),
)


def find_rule(year, rules=ANNUAL_HOLIDAY_RULES):
    """返回 year 适用的最新一代规则，早于所有规则时返回 None"""
    for rule in reversed(rules):
        if rule.effective_from <= year:
            return rule
    return None


def find_special_holidays(year, month):
    """返回 year 年 month 月的特别祝日"""
    return [h for h in SPECIAL_HOLIDAYS if h.date.year == year and h.date.month == month]
