# -*- coding: utf-8 -*-
"""
祝日查询路由
包含按日、按月、按年以及按区间查询祝日
"""

from datetime import date, datetime
from flask import Blueprint, jsonify, request

from holidays_jp_api.config import JST
from holidays_jp_api.services.holiday_lookup import get_service
from holidays_jp_api.utils.solar_longitude import EquinoxNotFoundError


holidays_bp = Blueprint('holidays', __name__)


def _serialize(holidays):
    return [h.to_dict() for h in holidays]


def _parse_date(text):
    return datetime.strptime(text, "%Y-%m-%d").date()


@holidays_bp.errorhandler(ValueError)
def handle_bad_request(e):
    return jsonify({"success": False, "message": f"参数无效: {e}"}), 400


@holidays_bp.errorhandler(EquinoxNotFoundError)
def handle_equinox_not_found(e):
    return jsonify({"success": False, "message": str(e)}), 500


@holidays_bp.route('/api/holidays')
def get_holidays_between():
    """按区间查询祝日，默认查询今天 (日本时间)"""
    from_str = request.args.get('from')
    to_str = request.args.get('to')

    start = _parse_date(from_str) if from_str else datetime.now(JST).date()
    end = _parse_date(to_str) if to_str else start

    holidays = get_service().find_holidays_between(start, end)
    return jsonify({
        "success": True,
        "from": start.isoformat(),
        "to": end.isoformat(),
        "data": _serialize(holidays)
    })


@holidays_bp.route('/api/holidays/<int:year>')
def get_holidays_in_year(year):
    """查询全年的祝日"""
    holidays = get_service().find_holidays_in_year(year)
    return jsonify({"success": True, "data": _serialize(holidays)})


@holidays_bp.route('/api/holidays/<int:year>/<int:month>')
def get_holidays_in_month(year, month):
    """查询某月的祝日"""
    holidays = get_service().find_holidays_in_month(year, month)
    return jsonify({"success": True, "data": _serialize(holidays)})


@holidays_bp.route('/api/holidays/<int:year>/<int:month>/<int:day>')
def get_holiday(year, month, day):
    """查询某天是否为祝日"""
    holiday, found = get_service().find_holiday(date(year, month, day))
    return jsonify({
        "success": True,
        "is_holiday": found,
        "data": [holiday.to_dict()] if found else []
    })
