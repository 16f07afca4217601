"""卡牌模块
定义行引擎所需的卡牌契约 (BattleCard) 以及默认实现 UnitCard
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .enums import CardAbility
from .exceptions import InvalidCardError


@runtime_checkable
class BattleCard(Protocol):
    """行引擎对卡牌的最小要求

    任何具备以下属性的对象都可以放入 BoardRow：
        base_strength: 基础战力（只读）
        strength: 当前战力缓存（由行引擎写入）
        is_hero: 是否为英雄牌（英雄牌不受任何行效果影响）
        ability: 特殊能力（仅 MORALE_BOOST 影响战力公式）
    """

    base_strength: int
    strength: int
    is_hero: bool
    ability: CardAbility


_CONTRACT_ATTRS = ("base_strength", "strength", "is_hero", "ability")


def ensure_battle_card(card: object) -> BattleCard:
    """检查对象是否满足 BattleCard 契约，不满足则抛出 InvalidCardError"""
    missing = [name for name in _CONTRACT_ATTRS if not hasattr(card, name)]
    if missing:
        raise InvalidCardError(card_repr=repr(card), missing=missing)
    if not isinstance(card.ability, CardAbility):  # type: ignore[attr-defined]
        raise InvalidCardError(card_repr=repr(card), missing=["ability"])
    return card  # type: ignore[return-value]


@dataclass(slots=True)
class UnitCard:
    """单位卡

    Attributes:
        id: 卡牌唯一标识符
        name: 卡牌名称
        base_strength: 基础战力
        is_hero: 是否为英雄牌
        ability: 特殊能力
        strength: 当前战力（默认等于基础战力）
    """

    id: str
    name: str
    base_strength: int
    is_hero: bool = False
    ability: CardAbility = CardAbility.NONE
    strength: int | None = None

    def __post_init__(self):
        """初始化后处理"""
        if isinstance(self.ability, str):
            self.ability = CardAbility(self.ability)
        elif not isinstance(self.ability, CardAbility):
            raise InvalidCardError(card_repr=f"UnitCard(id={self.id!r})", missing=["ability"])
        if isinstance(self.base_strength, bool) or not isinstance(self.base_strength, int):
            raise InvalidCardError(
                card_repr=f"UnitCard(id={self.id!r})", missing=["base_strength"]
            )
        # 英雄牌的当前战力恒等于基础战力
        if self.strength is None or self.is_hero:
            self.strength = self.base_strength

    @property
    def display_name(self) -> str:
        """显示名称（英雄牌加星标）"""
        prefix = "★" if self.is_hero else ""
        return f"{prefix}{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "base_strength": self.base_strength,
            "strength": self.strength,
            "is_hero": self.is_hero,
            "ability": self.ability.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnitCard:
        """从字典创建卡牌，缺省字段使用默认值"""
        try:
            return cls(
                id=str(data["id"]),
                name=str(data.get("name", data["id"])),
                base_strength=data["base_strength"],
                is_hero=bool(data.get("is_hero", False)),
                ability=data.get("ability", CardAbility.NONE.value),
                strength=data.get("strength"),
            )
        except KeyError as e:
            raise InvalidCardError(card_repr=repr(data), missing=[str(e.args[0])]) from e

    def __str__(self) -> str:
        return f"{self.display_name}({self.strength})"
