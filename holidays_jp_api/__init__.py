# -*- coding: utf-8 -*-
"""
日本祝日查询服务
预计算的内阁府祝日表 + 规则与天文计算推算的祝日
"""

from flask import Flask


def create_app():
    """创建 Flask 应用并注册路由"""
    from holidays_jp_api.routes.holidays import holidays_bp

    app = Flask(__name__)
    # 祝日名称直接输出日文，不转义
    app.json.ensure_ascii = False
    app.register_blueprint(holidays_bp)
    return app
