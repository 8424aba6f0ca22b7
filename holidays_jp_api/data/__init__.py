# -*- coding: utf-8 -*-
"""
holidays_jp_api.data 包初始化
"""
