# -*- coding: utf-8 -*-
"""
全局配置模块
包含路径、祝日 CSV 数据源、天文计算参数、查询限制和服务端口等配置
"""

import os
from datetime import timedelta, timezone


# ==================== 路径 ====================
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
BASE_DIR = os.path.dirname(PACKAGE_DIR)

# 原始 CSV 下载后存放的目录
DATA_DIR = os.getenv("HOLIDAYS_DATA_DIR", os.path.join(BASE_DIR, "data"))
RAW_DATA_FILE = os.path.join(DATA_DIR, "syukujitsu.csv")

# 生成的预计算祝日表 (随包发布)
GENERATED_TABLE_FILE = os.getenv(
    "HOLIDAYS_GENERATED_TABLE_FILE",
    os.path.join(PACKAGE_DIR, "data", "holidays_generated.py")
)

# ==================== 祝日 CSV 数据源 ====================
# 内閣府ホーム > 内閣府の政策 > 制度 > 国民の祝日について
# https://www8.cao.go.jp/chosei/shukujitsu/gaiyou.html
SYUKUJITSU_URL = os.getenv(
    "SYUKUJITSU_URL",
    "https://www8.cao.go.jp/chosei/shukujitsu/syukujitsu.csv"
)

# 内阁府 CSV 为 Shift_JIS (Windows 扩展) 编码
SYUKUJITSU_ENCODING = "cp932"

HEADERS = {
    "User-Agent": "holidays-jp-api/1.0",
    "Accept": "text/csv, */*",
}

REQUEST_TIMEOUT = int(os.getenv("SYUKUJITSU_TIMEOUT", "10"))

# ==================== 天文计算 ====================
# 日本标准时 (UTC+9，无夏令时)
JST = timezone(timedelta(hours=9), "JST")

# 春分/秋分搜索窗口 (日)
VERNAL_SEARCH_DAYS = (10, 31)
AUTUMNAL_SEARCH_DAYS = (10, 30)

# ==================== 查询 ====================
# 超出预计算表末年的年份是否改用规则计算
CALCULATE_BEYOND_TABLE = os.getenv("CALCULATE_BEYOND_TABLE", "1").lower() in ("1", "true", "yes")

# 区间查询最多允许的天数
MAX_RANGE_DAYS = 366 * 10

# ==================== 服务 ====================
SERVER_HOST = os.getenv("HOLIDAYS_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("HOLIDAYS_PORT", "5000"))
DEBUG = os.getenv("HOLIDAYS_DEBUG", "0").lower() in ("1", "true", "yes")
