# -*- coding: utf-8 -*-
"""
holidays_jp_api.services 包初始化
"""

from holidays_jp_api.services.holiday_rules import (
    ANNUAL_HOLIDAY_RULES,
    SPECIAL_HOLIDAYS,
    find_rule
)
from holidays_jp_api.services.calculator import (
    calculate_holidays_in_month,
    calculate_holidays_in_year,
    apply_holidays_in_lieu
)
from holidays_jp_api.services.holiday_lookup import (
    HolidayLookupService,
    get_service,
    find_holiday,
    find_holidays_in_month,
    find_holidays_in_year,
    find_holidays_between
)

__all__ = [
    'ANNUAL_HOLIDAY_RULES',
    'SPECIAL_HOLIDAYS',
    'find_rule',
    'calculate_holidays_in_month',
    'calculate_holidays_in_year',
    'apply_holidays_in_lieu',
    'HolidayLookupService',
    'get_service',
    'find_holiday',
    'find_holidays_in_month',
    'find_holidays_in_year',
    'find_holidays_between'
]
