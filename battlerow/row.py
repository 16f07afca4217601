"""棋盘行 (BoardRow)

每一行单独记录自己的行效果（削弱 / 增益 / 士气），并负责把这些效果
折算到行内每张卡牌的当前战力上。棋盘 (Board) 只负责在游戏事件发生时
调用对应的变更方法，本模块不推断任何触发条件。

战力公式（非英雄牌，基础战力 S，士气层数 M，P 为自身是否为士气提供者）::

    削弱:   1 + (M - 1 if P else M)
    增益:   2*S + (2*M - 2 if P else 2*M)
    无效果: S + (M - 1 if P else M)

削弱优先于增益：同时被增益和削弱的行按削弱计算。
士气项只在 M >= 1 时计入（没有士气光环时不存在"少一层"），
因此 reset() 之后所有非英雄牌都回到基础战力；M - 1 本身不做截断。
英雄牌始终保持基础战力。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from .card import BattleCard, ensure_battle_card
from .enums import RowPosition
from .events import EventEmitter, EventType
from .exceptions import (
    InvalidRowPositionError,
    RowPositionAlreadySetError,
    raise_if_position_unset,
)

if TYPE_CHECKING:
    from .events import EventBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RowState:
    """行效果状态 (不可变)

    Attributes:
        is_buffed: 是否被增益（翻倍）
        is_debuffed: 是否被削弱（降为 1），优先于增益
        morale: 士气光环层数
    """

    is_buffed: bool = False
    is_debuffed: bool = False
    morale: int = 0


def morale_bonus(card: BattleCard, morale: int) -> int:
    """单张牌获得的士气层数，士气提供者自身少一层"""
    if morale < 1:
        return 0
    if card.ability.penalizes_morale:
        return morale - 1
    return morale


def compute_strength(card: BattleCard, state: RowState) -> int:
    """根据行状态计算卡牌的当前战力

    Args:
        card: 满足 BattleCard 契约的卡牌
        state: 行效果状态

    Returns:
        当前战力
    """
    if card.is_hero:
        return card.base_strength

    bonus = morale_bonus(card, state.morale)
    if state.is_debuffed:
        return 1 + bonus
    if state.is_buffed:
        return 2 * card.base_strength + 2 * bonus
    return card.base_strength + bonus


class BoardRow(EventEmitter):
    """棋盘上的一行

    行位置只能设置一次，可以在构造时传入，也可以随后调用 set_position()。
    在位置设置之前查询行状态会抛出 RowPositionNotSetError。
    """

    def __init__(
        self,
        position: RowPosition | str | int | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        super().__init__()
        self._position: RowPosition | None = None
        self._cards: list[BattleCard] = []
        self._state = RowState()
        self._strength = 0
        if position is not None:
            self.set_position(position)
        if event_bus is not None:
            self.set_event_bus(event_bus)

    # ==================== 位置 ====================

    def set_position(self, position: RowPosition | str | int) -> None:
        """设置行位置，只能调用一次"""
        if self._position is not None:
            logger.warning("Row position already set to %s", self._position.value)
            raise RowPositionAlreadySetError(position=self._position)
        try:
            self._position = RowPosition.from_value(position)
        except ValueError as e:
            raise InvalidRowPositionError(position=position) from e

    @property
    def has_position(self) -> bool:
        return self._position is not None

    @property
    def position(self) -> RowPosition:
        self._require_position()
        return self._position  # type: ignore[return-value]

    def _require_position(self) -> None:
        if self._position is None:
            logger.warning("Row queried before its position was set")
        raise_if_position_unset(self._position)

    # ==================== 查询 ====================

    @property
    def cards(self) -> tuple[BattleCard, ...]:
        """行内卡牌（按打出顺序）"""
        return tuple(self._cards)

    @property
    def state(self) -> RowState:
        return self._state

    @property
    def is_buffed(self) -> bool:
        self._require_position()
        return self._state.is_buffed

    @property
    def is_debuffed(self) -> bool:
        self._require_position()
        return self._state.is_debuffed

    @property
    def morale(self) -> int:
        self._require_position()
        return self._state.morale

    def get_aggregate_strength(self) -> int:
        """从卡牌的当前战力重新求和并返回行总战力"""
        self._require_position()
        self._strength = sum(card.strength for card in self._cards)
        return self._strength

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[BattleCard]:
        return iter(self._cards)

    def __repr__(self) -> str:
        pos = self._position.value if self._position else "?"
        return (
            f"BoardRow(position={pos}, cards={len(self._cards)}, "
            f"buffed={self._state.is_buffed}, debuffed={self._state.is_debuffed}, "
            f"morale={self._state.morale})"
        )

    # ==================== 变更 ====================

    def add(self, card: BattleCard) -> None:
        """打出一张牌到本行，并立即套用当前行效果"""
        ensure_battle_card(card)
        self._cards.append(card)
        self._apply()
        logger.debug("Card added to row %s: %r", self._pos_label(), card)
        self.emit(
            EventType.CARD_ADDED,
            position=self._position,
            card=card,
            strength=self._strength,
        )

    def buff(self) -> None:
        """增益：非英雄牌战力翻倍（削弱仍然优先）"""
        self._transition(replace(self._state, is_buffed=True), EventType.ROW_BUFFED)

    def debuff(self) -> None:
        """削弱：非英雄牌战力降为 1（再叠加士气）"""
        self._transition(replace(self._state, is_debuffed=True), EventType.ROW_DEBUFFED)

    def add_morale(self) -> None:
        """士气光环 +1 层"""
        self._transition(
            replace(self._state, morale=self._state.morale + 1),
            EventType.ROW_MORALE_ADDED,
        )

    def clear(self) -> None:
        """清除削弱，增益与士气保留"""
        self._transition(replace(self._state, is_debuffed=False), EventType.ROW_CLEARED)

    def reset(self) -> None:
        """清除所有行效果，非英雄牌回到基础战力"""
        self._strength = 0
        self._transition(RowState(), EventType.ROW_RESET)

    # ==================== 内部 ====================

    def _transition(self, new_state: RowState, event_type: EventType) -> None:
        old_state = self._state
        self._state = new_state
        self._apply()
        logger.debug(
            "Row %s %s: %s -> %s, strength=%d",
            self._pos_label(), event_type.name, old_state, new_state, self._strength,
        )
        self.emit(
            event_type,
            position=self._position,
            state=new_state,
            strength=self._strength,
        )

    def _apply(self) -> None:
        """按当前状态重算每张非英雄牌的战力以及行总战力"""
        total = 0
        for card in self._cards:
            if not card.is_hero:
                card.strength = compute_strength(card, self._state)
            total += card.strength
        self._strength = total

    def _pos_label(self) -> str:
        return self._position.value if self._position else "?"

    def to_dict(self) -> dict[str, Any]:
        """行快照（用于渲染与场景回放输出）"""
        return {
            "position": self.position.value,
            "is_buffed": self._state.is_buffed,
            "is_debuffed": self._state.is_debuffed,
            "morale": self._state.morale,
            "strength": self.get_aggregate_strength(),
            "cards": [
                card.to_dict() if hasattr(card, "to_dict") else {
                    "base_strength": card.base_strength,
                    "strength": card.strength,
                    "is_hero": card.is_hero,
                    "ability": card.ability.value,
                }
                for card in self._cards
            ],
        }
