# -*- coding: utf-8 -*-
"""
holidays_jp_api.models 包初始化
"""

from holidays_jp_api.models.holiday import (
    Holiday,
    StaticHolidayTable,
    load_static_table
)

__all__ = [
    'Holiday',
    'StaticHolidayTable',
    'load_static_table'
]
