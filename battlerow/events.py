# -*- coding: utf-8 -*-
"""
事件总线系统
实现观察者模式，用于把棋盘行的状态变化通知给 UI / 日志等模块
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from .card import BattleCard
    from .enums import RowPosition

logger = logging.getLogger(__name__)


class EventType(Enum):
    """事件类型枚举"""
    # 行内变化
    CARD_ADDED = auto()
    ROW_BUFFED = auto()
    ROW_DEBUFFED = auto()
    ROW_MORALE_ADDED = auto()
    ROW_CLEARED = auto()
    ROW_RESET = auto()

    # 棋盘层面
    CARD_PLAYED = auto()
    WEATHER_APPLIED = auto()
    WEATHER_CLEARED = auto()
    HORN_APPLIED = auto()
    ROUND_END = auto()


@dataclass
class GameEvent:
    """
    事件数据类
    携带事件的所有相关信息
    """
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)

    cancelled: bool = False

    # 常用字段的快捷访问
    @property
    def position(self) -> Optional['RowPosition']:
        return self.data.get('position')

    @property
    def card(self) -> Optional['BattleCard']:
        return self.data.get('card')

    @property
    def strength(self) -> int:
        return self.data.get('strength', 0)

    def cancel(self) -> None:
        """停止向后续处理器传播"""
        self.cancelled = True


# 事件处理器类型
EventHandler = Callable[[GameEvent], None]


class EventBus:
    """
    事件总线
    负责事件的发布和订阅
    """

    def __init__(self, max_history: int = 100):
        # 事件处理器映射：事件类型 -> 处理器列表
        self._handlers: Dict[EventType, List[tuple[int, EventHandler]]] = defaultdict(list)
        # 全局处理器（监听所有事件）
        self._global_handlers: List[tuple[int, EventHandler]] = []
        self._event_history: List[GameEvent] = []
        self._max_history: int = max_history

    def subscribe(self, event_type: EventType, handler: EventHandler,
                  priority: int = 0) -> None:
        """
        订阅事件

        Args:
            event_type: 事件类型
            handler: 事件处理器
            priority: 优先级（数字越大越先执行）
        """
        self._handlers[event_type].append((priority, handler))
        self._handlers[event_type].sort(key=lambda x: x[0], reverse=True)

    def subscribe_all(self, handler: EventHandler, priority: int = 0) -> None:
        """订阅所有事件"""
        self._global_handlers.append((priority, handler))
        self._global_handlers.sort(key=lambda x: x[0], reverse=True)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """取消订阅"""
        self._handlers[event_type] = [
            (p, h) for p, h in self._handlers[event_type] if h != handler
        ]

    def unsubscribe_all(self, handler: EventHandler) -> None:
        """取消订阅所有事件"""
        self._global_handlers = [
            (p, h) for p, h in self._global_handlers if h != handler
        ]
        for event_type in self._handlers:
            self.unsubscribe(event_type, handler)

    def publish(self, event: GameEvent) -> GameEvent:
        """
        发布事件

        处理器抛出的异常会被记录，不会中断后续处理器，
        也不会回滚已经完成的行状态变化。

        Args:
            event: 事件

        Returns:
            处理后的事件
        """
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history = self._event_history[-self._max_history:]

        for _, handler in self._global_handlers:
            if event.cancelled:
                break
            try:
                handler(event)
            except Exception:
                logger.exception("EventBus handler failed for %s", event.event_type)

        if not event.cancelled:
            for _, handler in self._handlers.get(event.event_type, []):
                if event.cancelled:
                    break
                try:
                    handler(event)
                except Exception:
                    logger.exception("EventBus handler failed for %s", event.event_type)

        return event

    def emit(self, event_type: EventType, **kwargs) -> GameEvent:
        """
        快捷发布事件

        Args:
            event_type: 事件类型
            **kwargs: 事件数据

        Returns:
            处理后的事件
        """
        event = GameEvent(event_type=event_type, data=kwargs)
        return self.publish(event)

    def clear(self) -> None:
        """清除所有订阅"""
        self._handlers.clear()
        self._global_handlers.clear()

    def get_history(self, count: int = 10) -> List[GameEvent]:
        """获取最近的事件历史"""
        return self._event_history[-count:]


class EventEmitter:
    """
    事件发射器混入类
    可被其他类继承以获得事件发布能力
    """

    def __init__(self):
        self._event_bus: Optional[EventBus] = None

    @property
    def event_bus(self) -> Optional[EventBus]:
        return self._event_bus

    def set_event_bus(self, event_bus: Optional[EventBus]) -> None:
        """设置事件总线"""
        self._event_bus = event_bus

    def emit(self, event_type: EventType, **kwargs) -> Optional[GameEvent]:
        """发布事件（未设置事件总线时不做任何事）"""
        if self._event_bus:
            return self._event_bus.emit(event_type, **kwargs)
        return None
