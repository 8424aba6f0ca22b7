# -*- coding: utf-8 -*-
"""
日本祝日查询服务 - 启动入口
数据来源：内阁府「国民の祝日」CSV
"""

from holidays_jp_api import create_app
from holidays_jp_api.config import SERVER_HOST, SERVER_PORT, DEBUG
from holidays_jp_api.services.holiday_lookup import get_service


app = create_app()


# ==================== 启动 ====================
if __name__ == '__main__':
    table = get_service().table
    print("=" * 50)
    print("  日本祝日查询服务")
    print(f"  预计算祝日表: {table.start_year}-{table.end_year} 年，共 {len(table)} 条")
    print(f"  访问地址: http://localhost:{SERVER_PORT}/api/holidays")
    print("=" * 50)
    app.run(host=SERVER_HOST, port=SERVER_PORT, debug=DEBUG, threaded=True)
