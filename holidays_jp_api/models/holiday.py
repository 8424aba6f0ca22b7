# -*- coding: utf-8 -*-
"""
祝日数据模型
包含祝日记录与只读的预计算祝日表
"""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True, order=True)
class Holiday:
    """单个祝日记录，比较与排序只看日期"""
    date: date
    name: str = field(compare=False)

    @classmethod
    def from_row(cls, date_str, name):
        """由 ("YYYY-MM-DD", 名称) 构造"""
        return cls(datetime.strptime(date_str, "%Y-%m-%d").date(), name)

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "name": self.name
        }


class StaticHolidayTable:
    """
    预计算祝日表 (只读)

    记录按日期升序排列且日期唯一，覆盖 [start_year, end_year]。
    另外保存一份日期元组，供二分查找使用。
    """

    def __init__(self, holidays, start_year, end_year):
        holidays = tuple(holidays)
        for prev, cur in zip(holidays, holidays[1:]):
            if not prev.date < cur.date:
                raise ValueError(f"祝日表未按日期严格升序排列: {prev.date} -> {cur.date}")
        if start_year > end_year:
            raise ValueError(f"年份范围无效: {start_year}-{end_year}")

        self._holidays = holidays
        self._dates = tuple(h.date for h in holidays)
        self.start_year = start_year
        self.end_year = end_year

    @classmethod
    def from_rows(cls, rows, start_year, end_year):
        """由生成模块中的 (日期字符串, 名称) 列表构建"""
        return cls([Holiday.from_row(d, name) for d, name in rows], start_year, end_year)

    @property
    def holidays(self):
        return self._holidays

    @property
    def dates(self):
        return self._dates

    def covers(self, year):
        return self.start_year <= year <= self.end_year

    def __len__(self):
        return len(self._holidays)

    def __getitem__(self, index):
        return self._holidays[index]

    def __iter__(self):
        return iter(self._holidays)


def load_static_table():
    """加载随包发布的预计算祝日表"""
    from holidays_jp_api.data.holidays_generated import (
        HOLIDAYS, HOLIDAYS_START_YEAR, HOLIDAYS_END_YEAR
    )
    return StaticHolidayTable.from_rows(HOLIDAYS, HOLIDAYS_START_YEAR, HOLIDAYS_END_YEAR)
