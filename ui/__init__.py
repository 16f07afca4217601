# -*- coding: utf-8 -*-
"""
UI模块
提供终端棋盘显示
"""

from .rich_ui import BoardRenderer

__all__ = ['BoardRenderer']
