"""棋盘行与卡牌能力枚举，独立出来以避免 card / row / board 之间的循环导入"""

from __future__ import annotations

from enum import Enum


class RowPosition(Enum):
    """棋盘行位置枚举"""

    CLOSE = "close"  # 近战行
    RANGED = "ranged"  # 远程行
    SIEGE = "siege"  # 攻城行

    @property
    def index(self) -> int:
        """行号（0/1/2），与棋盘从前到后的顺序一致"""
        return _ROW_ORDER.index(self)

    @classmethod
    def from_value(cls, value: RowPosition | str | int) -> RowPosition:
        """接受枚举、字符串值或整数行号"""
        if isinstance(value, RowPosition):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid row position: {value!r}")
        if isinstance(value, int):
            if 0 <= value < len(_ROW_ORDER):
                return _ROW_ORDER[value]
            raise ValueError(f"Invalid row index: {value}")
        return cls(str(value).lower())


_ROW_ORDER: tuple[RowPosition, ...] = (
    RowPosition.CLOSE,
    RowPosition.RANGED,
    RowPosition.SIEGE,
)


class CardAbility(Enum):
    """单位卡特殊能力枚举"""

    NONE = "none"  # 无能力
    MORALE_BOOST = "morale_boost"  # 士气鼓舞：全行 +1，自身少得 1
    COMMANDERS_HORN = "commanders_horn"  # 指挥官号角：全行翻倍

    @property
    def penalizes_morale(self) -> bool:
        """士气光环的提供者自身少享受一层加成"""
        return self is CardAbility.MORALE_BOOST
