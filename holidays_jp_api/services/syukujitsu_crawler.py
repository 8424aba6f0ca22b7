# -*- coding: utf-8 -*-
"""
内阁府祝日 CSV 抓取模块
下载「国民の祝日」CSV，规范化日期格式并生成预计算祝日表模块
"""

import argparse
import csv
import io
import os
import re
import sys
import requests
from datetime import datetime

from holidays_jp_api.config import (
    SYUKUJITSU_URL,
    SYUKUJITSU_ENCODING,
    HEADERS,
    REQUEST_TIMEOUT,
    RAW_DATA_FILE,
    GENERATED_TABLE_FILE
)


class SyukujitsuError(Exception):
    """祝日 CSV 处理失败"""


class SyukujitsuDownloadError(SyukujitsuError):
    """下载失败或返回了非 200 状态"""


class SyukujitsuFormatError(SyukujitsuError):
    """CSV 无法解码或内容格式不符"""


_DATE_PATTERN = re.compile(r'^(\d{4})/(\d{1,2})/(\d{1,2})$')

_TEMPLATE_HEADER = '''# -*- coding: utf-8 -*-
# 由 holidays_jp_api/services/syukujitsu_crawler.py 生成，请勿手动修改
"""
预计算祝日表
来源: {url}
"""

# 预计算祝日的年份范围
HOLIDAYS_START_YEAR = {start_year}
HOLIDAYS_END_YEAR = {end_year}

HOLIDAYS = [
'''


def format_date(text):
    """
    规范化 CSV 中的日期
    2021/1/1 -> 2021-01-01
    """
    match = _DATE_PATTERN.match(text.strip())
    if not match:
        raise SyukujitsuFormatError(f"无法解析日期: {text!r}")

    year, month, day = (int(g) for g in match.groups())
    try:
        datetime(year, month, day)
    except ValueError as e:
        raise SyukujitsuFormatError(f"日期不存在: {text!r}") from e
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_syukujitsu(raw_data, encoding=SYUKUJITSU_ENCODING):
    """
    解析原始 CSV 字节串

    返回:
        按日期升序排列的 [("YYYY-MM-DD", 名称), ...]
    """
    try:
        text = raw_data.decode(encoding)
    except UnicodeDecodeError as e:
        raise SyukujitsuFormatError(f"CSV 解码失败 ({encoding}): {e}") from e

    reader = csv.reader(io.StringIO(text))

    # 跳过 国民の祝日・休日月日,国民の祝日・休日名称 表头
    next(reader, None)

    holidays = []
    for line_no, row in enumerate(reader, start=2):
        if not row or not any(cell.strip() for cell in row):
            continue
        if len(row) < 2:
            raise SyukujitsuFormatError(f"第 {line_no} 行列数不足: {row}")
        holidays.append((format_date(row[0]), row[1].strip()))

    if not holidays:
        raise SyukujitsuFormatError("CSV 中没有任何祝日数据")

    holidays.sort(key=lambda h: h[0])

    for prev, cur in zip(holidays, holidays[1:]):
        if prev[0] == cur[0]:
            raise SyukujitsuFormatError(f"日期重复: {cur[0]}")

    return holidays


def render_holidays_module(holidays, url=SYUKUJITSU_URL):
    """生成预计算祝日表模块的源码"""
    start_year = int(holidays[0][0][:4])
    end_year = int(holidays[-1][0][:4])

    lines = [_TEMPLATE_HEADER.format(url=url, start_year=start_year, end_year=end_year)]
    for date_str, name in holidays:
        lines.append(f"    ({date_str!r}, {name!r}),\n")
    lines.append("]\n")
    return "".join(lines)


def _write_atomic(path, data, mode='w'):
    """先写临时文件再替换，避免留下写了一半的文件"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    temp_file = path + ".tmp"
    if 'b' in mode:
        with open(temp_file, mode) as f:
            f.write(data)
    else:
        with open(temp_file, mode, encoding='utf-8') as f:
            f.write(data)
    os.replace(temp_file, path)


class SyukujitsuCrawler:
    """内阁府祝日 CSV 抓取器"""

    def __init__(self, url=SYUKUJITSU_URL, raw_file=RAW_DATA_FILE, output_file=GENERATED_TABLE_FILE):
        self.url = url
        self.raw_file = raw_file
        self.output_file = output_file

    def download(self):
        """下载原始 CSV 并保存一份到本地"""
        try:
            response = requests.get(self.url, headers=HEADERS, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise SyukujitsuDownloadError(f"请求失败: {e}") from e

        if response.status_code != 200:
            raise SyukujitsuDownloadError(f"意外的状态码: {response.status_code}")

        raw_data = response.content
        _write_atomic(self.raw_file, raw_data, mode='wb')
        print(f"[祝日CSV] 已下载 {len(raw_data)} 字节 -> {self.raw_file}")
        return raw_data

    def load_local(self, path):
        """读取本地已下载的 CSV"""
        with open(path, 'rb') as f:
            return f.read()

    def generate(self, raw_data):
        """解析 CSV 并写出生成模块，返回解析后的祝日列表"""
        holidays = parse_syukujitsu(raw_data)
        _write_atomic(self.output_file, render_holidays_module(holidays, self.url))
        print(f"[祝日CSV] 已生成 {self.output_file}，共 {len(holidays)} 条 "
              f"({holidays[0][0][:4]}-{holidays[-1][0][:4]})")
        return holidays

    def run(self, input_file=None):
        raw_data = self.load_local(input_file) if input_file else self.download()
        return self.generate(raw_data)


def main(argv=None):
    parser = argparse.ArgumentParser(description="下载内阁府祝日 CSV 并生成预计算祝日表")
    parser.add_argument("--input", help="使用本地 CSV 文件，不再下载")
    parser.add_argument("--output", default=GENERATED_TABLE_FILE, help="生成模块的输出路径")
    args = parser.parse_args(argv)

    crawler = SyukujitsuCrawler(output_file=args.output)
    try:
        crawler.run(input_file=args.input)
    except (SyukujitsuError, OSError) as e:
        print(f"[祝日CSV] 更新失败: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
