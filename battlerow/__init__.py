# -*- coding: utf-8 -*-
"""
棋盘行战力核心模块
包含卡牌契约、棋盘行效果引擎、棋盘编排、事件系统和场景回放
"""

from .enums import RowPosition, CardAbility
from .card import BattleCard, UnitCard
from .row import BoardRow, RowState, compute_strength
from .board import Board
from .events import EventBus, EventType, GameEvent, EventEmitter
from .scenario import ScenarioResult, load_scenario, run_scenario

__all__ = [
    # 枚举
    'RowPosition', 'CardAbility',
    # 卡牌
    'BattleCard', 'UnitCard',
    # 棋盘行
    'BoardRow', 'RowState', 'compute_strength',
    # 棋盘
    'Board',
    # 事件系统
    'EventBus', 'EventType', 'GameEvent', 'EventEmitter',
    # 场景回放
    'ScenarioResult', 'load_scenario', 'run_scenario',
]

__version__ = '1.0.0'
