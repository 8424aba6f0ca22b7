# -*- coding: utf-8 -*-
"""
太阳视黄经计算工具
用截断的周期项级数估算太阳视黄经，并据此求春分日、秋分日

参考: 長沢 工(1999)「日の出・日の入りの計算 天体の出没時刻の求め方」地人書館
精度约为分钟级，只用来确定分点落在哪一天已足够
"""

import math
from datetime import datetime, timezone

from holidays_jp_api.config import JST, VERNAL_SEARCH_DAYS, AUTUMNAL_SEARCH_DAYS


# 周期项: (振幅, 初相, 角速度)，单位均为度
SUN_LONGITUDE_TABLE = (
    (0.0200, 355.05, 719.981),
    (0.0048, 234.95, 19.341),
    (0.0020, 247.1, 329.64),
    (0.0018, 297.8, 4452.67),
    (0.0018, 251.3, 0.20),
    (0.0015, 343.2, 450.37),
    (0.0013, 81.4, 225.18),
    (0.0008, 132.5, 659.29),
    (0.0007, 153.3, 90.38),
    (0.0007, 206.8, 30.35),
    (0.0006, 29.8, 337.18),
    (0.0005, 207.4, 1.50),
    (0.0005, 291.2, 22.81),
    (0.0004, 234.9, 315.56),
    (0.0004, 157.3, 299.30),
    (0.0004, 21.1, 720.02),
    (0.0003, 352.5, 1079.97),
    (0.0003, 329.7, 44.43),
)

# J2000.0 历元 (2000-01-01 12:00)
J2000 = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

# TAI - UTC (闰秒累计，2015/08 时为 36 秒)
TAI_UTC_SECONDS = 36

# TT - TAI
TT_TAI_SECONDS = 32

# 一儒略年的秒数 (365.25 日)
JULIAN_YEAR_SECONDS = (365 * 24 + 6) * 60 * 60


class EquinoxNotFoundError(ValueError):
    """搜索窗口内没有找到太阳黄经跨越分点"""

    def __init__(self, year, month):
        self.year = year
        self.month = month
        super().__init__(f"{year} 年 {month} 月的搜索范围内未找到分点")


def _sin(degree):
    return math.sin(degree / 180 * math.pi)


def normalize_degree(x):
    """把角度归一化到 [0, 360)"""
    x = math.fmod(x, 360)
    if x < 0:
        x += 360
    return x


def to_julian_year(moment):
    """
    把时刻换算为距 J2000.0 的儒略年数 (力学时)

    moment 必须带时区信息
    """
    seconds = int((moment - J2000).total_seconds())

    # UTC -> TAI -> TT
    seconds += TAI_UTC_SECONDS
    seconds += TT_TAI_SECONDS
    return seconds / JULIAN_YEAR_SECONDS


def sun_longitude(julian_year):
    """
    计算太阳视黄经 (度)

    每累加一项都归一化一次，避免三角函数参数随 t 增大而损失精度
    """
    t = julian_year
    longitude = normalize_degree(360.00769 * t)
    longitude = normalize_degree(longitude + 280.4603)
    longitude = normalize_degree(longitude + (1.9146 - 0.00005 * t) * _sin(357.538 + 359.991 * t))
    for amplitude, phase, rate in SUN_LONGITUDE_TABLE:
        longitude = normalize_degree(longitude + amplitude * _sin(phase + rate * t))
    return longitude


def sun_longitude_at(moment):
    return sun_longitude(to_julian_year(moment))


def vernal_equinox_day(year, tz=JST):
    """
    计算春分日 (3 月的日)

    逐日计算当地零点的太阳黄经。黄经在春分越过 0 度，
    第一次小于 180 度的那天零点已经过了分点，分点在前一天。
    窗口第一天就已满足时没有观察到跨越，同样视为未找到。
    """
    first, last = VERNAL_SEARCH_DAYS
    for day in range(first, last + 1):
        longitude = sun_longitude_at(datetime(year, 3, day, tzinfo=tz))
        if longitude < 180:
            if day == first:
                break
            return day - 1
    raise EquinoxNotFoundError(year, 3)


def autumnal_equinox_day(year, tz=JST):
    """计算秋分日 (9 月的日)，黄经第一次达到 180 度那天的前一天"""
    first, last = AUTUMNAL_SEARCH_DAYS
    for day in range(first, last + 1):
        longitude = sun_longitude_at(datetime(year, 9, day, tzinfo=tz))
        if longitude >= 180:
            if day == first:
                break
            return day - 1
    raise EquinoxNotFoundError(year, 9)
