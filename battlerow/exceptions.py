"""行引擎异常模块
定义棋盘行、卡牌契约、配置与场景回放中的各类异常
"""

from __future__ import annotations

from typing import Any

from i18n import t as _t


class GameError(Exception):
    """异常基类

    所有 battlerow 相关的异常都应该继承此类，
    提供统一的异常处理接口。
    """

    def __init__(self, message: str, details: dict | None = None):
        """初始化异常

        Args:
            message: 错误消息
            details: 额外的错误详情（可选）
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== 棋盘行相关异常 ====================


class RowError(GameError):
    """棋盘行异常基类"""

    def __init__(self, message: str | None = None, position: Any = None):
        if message is None:
            message = _t("exc.row_error")
        details = {}
        if position is not None:
            details["position"] = getattr(position, "value", position)
        super().__init__(message, details)
        self.position = position


class RowPositionNotSetError(RowError):
    """行位置未设置

    在 set_position() 之前查询行时抛出
    """

    def __init__(self, message: str | None = None):
        if message is None:
            message = _t("exc.row_position_not_set")
        super().__init__(message)


class RowPositionAlreadySetError(RowError):
    """行位置重复设置

    行位置只能设置一次
    """

    def __init__(self, message: str | None = None, position: Any = None):
        if message is None:
            message = _t("exc.row_position_already_set")
        super().__init__(message, position=position)


class InvalidRowPositionError(RowError):
    """无效的行位置"""

    def __init__(self, message: str | None = None, position: Any = None):
        if message is None:
            message = _t("exc.invalid_row_position", position=position)
        super().__init__(message, position=position)


class CardAlreadyOnBoardError(RowError):
    """同一张牌已经在棋盘上

    一张牌只能属于一行，否则两行会互相覆盖它的当前战力
    """

    def __init__(
        self,
        message: str | None = None,
        card_repr: str | None = None,
        position: Any = None,
    ):
        if message is None:
            message = _t("exc.card_already_on_board", card=card_repr)
        super().__init__(message, position=position)
        if card_repr:
            self.details["card"] = card_repr
        self.card_repr = card_repr


# ==================== 卡牌相关异常 ====================


class InvalidCardError(GameError):
    """卡牌不满足 BattleCard 契约"""

    def __init__(
        self,
        message: str | None = None,
        card_repr: str | None = None,
        missing: list[str] | None = None,
    ):
        if message is None:
            message = _t("exc.invalid_card")
        details = {}
        if card_repr:
            details["card"] = card_repr
        if missing:
            details["missing"] = missing
        super().__init__(message, details)
        self.card_repr = card_repr
        self.missing = missing or []


# ==================== 其他异常 ====================


class ConfigurationError(GameError):
    """配置异常"""

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.configuration_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class ScenarioError(GameError):
    """场景文件加载或回放失败"""

    def __init__(
        self,
        message: str | None = None,
        step: int | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.scenario_error")
        details = {}
        if step is not None:
            details["step"] = step
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.step = step
        self.reason = reason


# ==================== 工具函数 ====================


def raise_if_position_unset(position: Any) -> None:
    """检查行位置是否已设置，未设置则抛出异常

    Args:
        position: 行的当前位置（未设置时为 None）

    Raises:
        RowPositionNotSetError: 如果位置尚未设置
    """
    if position is None:
        raise RowPositionNotSetError()
