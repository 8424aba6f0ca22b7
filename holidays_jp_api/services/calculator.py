# -*- coding: utf-8 -*-
"""
祝日计算模块
根据祝日规则和天文计算推算某年某月的祝日，用于预计算表未覆盖的年份
"""

from datetime import date

from holidays_jp_api.config import JST
from holidays_jp_api.models.holiday import Holiday
from holidays_jp_api.services.holiday_rules import find_rule, find_special_holidays
from holidays_jp_api.utils.solar_longitude import vernal_equinox_day, autumnal_equinox_day


def nth_weekday_of_month(year, month, weekday, nth):
    """
    计算某月第 nth 个星期 weekday 的日

    公式: 日 = 1 + (目标星期 - 当月1日星期 + 7) % 7 + 7 × (nth - 1)
    """
    first_weekday = date(year, month, 1).weekday()
    return 1 + (weekday - first_weekday + 7) % 7 + 7 * (nth - 1)


def calculate_holidays_in_month_without_in_lieu(year, month, tz=JST):
    """
    按规则计算某月的祝日 (不含振替休日)

    参数:
        year: 年
        month: 月
        tz: 计算分点时使用的时区

    返回:
        按日期排序的 Holiday 列表，没有适用规则的年份返回空列表
    """
    rule = find_rule(year)
    if rule is None:
        return []

    holidays = []

    for r in rule.fixed_date_rules:
        if r.month == month:
            holidays.append(Holiday(date(year, month, r.day), r.name))

    for r in rule.weekday_rules:
        if r.month == month:
            day = nth_weekday_of_month(year, month, r.weekday, r.nth)
            holidays.append(Holiday(date(year, month, day), r.name))

    # 春分の日
    if month == 3:
        holidays.append(Holiday(date(year, 3, vernal_equinox_day(year, tz)), "春分の日"))

    # 秋分の日
    if month == 9:
        holidays.append(Holiday(date(year, 9, autumnal_equinox_day(year, tz)), "秋分の日"))

    holidays.extend(find_special_holidays(year, month))

    holidays.sort()
    return holidays


def apply_holidays_in_lieu(holidays):
    """
    振替休日・国民の休日 处理

    目前原样返回: 规则计算不会补出振替休日和夹在两个祝日之间的休日，
    需要这些日期时应以预计算表为准。
    """
    return holidays


def calculate_holidays_in_month(year, month, tz=JST):
    """计算某月的祝日"""
    if not 1 <= month <= 12:
        raise ValueError(f"月份无效: {month}")
    return apply_holidays_in_lieu(calculate_holidays_in_month_without_in_lieu(year, month, tz))


def calculate_holidays_in_year(year, tz=JST):
    """计算全年的祝日 (12 个月依次拼接)"""
    result = []
    for month in range(1, 13):
        result.extend(calculate_holidays_in_month(year, month, tz))
    return result
