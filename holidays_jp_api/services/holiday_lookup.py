# -*- coding: utf-8 -*-
"""
祝日查询服务模块
预计算表覆盖的年份用二分查找，之后的年份改用规则计算
"""

import calendar
from bisect import bisect_left, bisect_right
from datetime import date, timedelta

from holidays_jp_api.config import CALCULATE_BEYOND_TABLE, MAX_RANGE_DAYS
from holidays_jp_api.models.holiday import load_static_table
from holidays_jp_api.services.calculator import (
    calculate_holidays_in_month,
    calculate_holidays_in_year
)


class HolidayLookupService:
    """祝日查询服务"""

    def __init__(self, table, calculate_beyond_table=CALCULATE_BEYOND_TABLE):
        self.table = table
        self.calculate_beyond_table = calculate_beyond_table

    def _use_calculator(self, year):
        return self.calculate_beyond_table and year > self.table.end_year

    def _slice(self, first_day, last_day):
        """返回预计算表中 [first_day, last_day] 的连续区间"""
        dates = self.table.dates
        start = bisect_left(dates, first_day)
        end = bisect_right(dates, last_day)
        return list(self.table.holidays[start:end])

    def find_holiday(self, day):
        """
        查询某天是否为祝日

        返回:
            (Holiday, True) 或 (None, False)
        """
        if self.table.covers(day.year):
            dates = self.table.dates
            idx = bisect_left(dates, day)
            if idx < len(dates) and dates[idx] == day:
                return self.table[idx], True
            return None, False

        if self._use_calculator(day.year):
            for holiday in calculate_holidays_in_month(day.year, day.month):
                if holiday.date == day:
                    return holiday, True

        return None, False

    def find_holidays_in_month(self, year, month):
        """查询某月的祝日"""
        _, last = calendar.monthrange(year, month)
        if self.table.covers(year):
            return self._slice(date(year, month, 1), date(year, month, last))
        if self._use_calculator(year):
            return calculate_holidays_in_month(year, month)
        return []

    def find_holidays_in_year(self, year):
        """查询全年的祝日"""
        if self.table.covers(year):
            return self._slice(date(year, 1, 1), date(year, 12, 31))
        if self._use_calculator(year):
            return calculate_holidays_in_year(year)
        return []

    def find_holidays_between(self, start, end):
        """查询 [start, end] 闭区间内的祝日"""
        if end < start:
            raise ValueError(f"结束日期早于开始日期: {start} ~ {end}")
        if end - start > timedelta(days=MAX_RANGE_DAYS):
            raise ValueError(f"查询区间超过 {MAX_RANGE_DAYS} 天")

        result = []
        for year in range(start.year, end.year + 1):
            result.extend(h for h in self.find_holidays_in_year(year) if start <= h.date <= end)
        return result


# 全局服务实例
_service = None


def get_service():
    global _service
    if _service is None:
        _service = HolidayLookupService(load_static_table())
    return _service


def find_holiday(day):
    """查询某天是否为祝日"""
    return get_service().find_holiday(day)


def find_holidays_in_month(year, month):
    """查询某月的祝日"""
    return get_service().find_holidays_in_month(year, month)


def find_holidays_in_year(year):
    """查询全年的祝日"""
    return get_service().find_holidays_in_year(year)


def find_holidays_between(start, end):
    """查询区间内的祝日"""
    return get_service().find_holidays_between(start, end)
