"""棋盘 (Board)

一名玩家的半边战场：近战 / 远程 / 攻城三行。
Board 负责把游戏事件翻译成对行的调用顺序：
    - 打出卡牌 → row.add()，士气卡再触发一次 row.add_morale()，号角卡触发 row.buff()
    - 天气 → row.debuff()
    - 晴天 → 每一行 clear()
    - 回合结束 → 每一行 reset()
"""

from __future__ import annotations

import logging
from typing import Any

from .card import BattleCard, ensure_battle_card
from .enums import CardAbility, RowPosition
from .events import EventBus, EventEmitter, EventType
from .exceptions import CardAlreadyOnBoardError, InvalidRowPositionError
from .row import BoardRow

logger = logging.getLogger(__name__)


class Board(EventEmitter):
    """单名玩家的棋盘"""

    def __init__(self, owner: str = "", event_bus: EventBus | None = None) -> None:
        super().__init__()
        self.owner = owner
        self._rows: dict[RowPosition, BoardRow] = {
            position: BoardRow(position) for position in RowPosition
        }
        self.round_count = 1
        if event_bus is not None:
            self.set_event_bus(event_bus)

    def set_event_bus(self, event_bus: EventBus | None) -> None:
        """设置事件总线（同时传递给每一行）"""
        super().set_event_bus(event_bus)
        for row in self._rows.values():
            row.set_event_bus(event_bus)

    # ==================== 查询 ====================

    def row(self, position: RowPosition | str | int) -> BoardRow:
        """按位置获取行"""
        try:
            return self._rows[RowPosition.from_value(position)]
        except ValueError as e:
            raise InvalidRowPositionError(position=position) from e

    @property
    def rows(self) -> list[BoardRow]:
        """按近战 → 远程 → 攻城顺序返回所有行"""
        return [self._rows[p] for p in RowPosition]

    def find_card(self, card: BattleCard) -> BoardRow | None:
        """返回持有该牌对象的行（按对象身份比较），不在棋盘上时返回 None"""
        for row in self.rows:
            if any(member is card for member in row):
                return row
        return None

    def total_strength(self) -> int:
        """三行总战力"""
        return sum(row.get_aggregate_strength() for row in self.rows)

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner": self.owner,
            "round": self.round_count,
            "strength": self.total_strength(),
            "rows": [row.to_dict() for row in self.rows],
        }

    # ==================== 游戏事件 ====================

    def play(self, card: BattleCard, position: RowPosition | str | int) -> BoardRow:
        """打出一张卡牌到指定行，并结算它自带的行能力

        Returns:
            卡牌所在的行

        Raises:
            CardAlreadyOnBoardError: 同一张牌已在任意一行中
        """
        ensure_battle_card(card)
        row = self.row(position)
        holder = self.find_card(card)
        if holder is not None:
            raise CardAlreadyOnBoardError(card_repr=repr(card), position=holder.position)
        row.add(card)
        if card.ability is CardAbility.MORALE_BOOST:
            row.add_morale()
        elif card.ability is CardAbility.COMMANDERS_HORN:
            row.buff()
        logger.info(
            "%s played %r to %s (row strength %d)",
            self.owner or "board", card, row.position.value, row.get_aggregate_strength(),
        )
        self.emit(EventType.CARD_PLAYED, card=card, position=row.position,
                  strength=row.get_aggregate_strength())
        return row

    def apply_weather(self, position: RowPosition | str | int) -> None:
        """天气牌：削弱指定行"""
        row = self.row(position)
        row.debuff()
        self.emit(EventType.WEATHER_APPLIED, position=row.position,
                  strength=row.get_aggregate_strength())

    def horn(self, position: RowPosition | str | int) -> None:
        """独立号角：增益指定行"""
        row = self.row(position)
        row.buff()
        self.emit(EventType.HORN_APPLIED, position=row.position,
                  strength=row.get_aggregate_strength())

    def morale(self, position: RowPosition | str | int) -> None:
        """额外触发一次士气光环"""
        self.row(position).add_morale()

    def clear_weather(self) -> None:
        """晴天：清除所有行的削弱"""
        for row in self.rows:
            row.clear()
        self.emit(EventType.WEATHER_CLEARED, strength=self.total_strength())

    def end_round(self) -> None:
        """回合结束：所有行回到初始效果状态"""
        for row in self.rows:
            row.reset()
        logger.info("Round %d ended for %s", self.round_count, self.owner or "board")
        self.emit(EventType.ROUND_END, round=self.round_count,
                  strength=self.total_strength())
        self.round_count += 1
