"""场景回放

根据 JSON 场景文件重建一块棋盘并逐步执行，用于复现行战力问题。

场景格式::

    {
        "owner": "P1",
        "cards": [
            {"id": "footman", "name": "步兵", "base_strength": 5},
            {"id": "drummer", "name": "鼓手", "base_strength": 4, "ability": "morale_boost"}
        ],
        "steps": [
            {"action": "play", "card": "footman", "row": "close"},
            {"action": "morale", "row": "close"},
            {"action": "horn", "row": "close"},
            {"action": "weather", "row": "close"},
            {"action": "clear"},
            {"action": "end_round"}
        ]
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .board import Board
from .card import UnitCard
from .events import EventBus
from .exceptions import GameError, InvalidCardError, ScenarioError

logger = logging.getLogger(__name__)


DEMO_SCENARIO: dict[str, Any] = {
    "owner": "demo",
    "cards": [
        {"id": "footman", "name": "Footman", "base_strength": 5},
        {"id": "drummer", "name": "Drummer", "base_strength": 5, "ability": "morale_boost"},
        {"id": "captain", "name": "Captain", "base_strength": 10, "is_hero": True},
        {"id": "archer", "name": "Archer", "base_strength": 4},
    ],
    "steps": [
        {"action": "play", "card": "footman", "row": "close"},
        {"action": "play", "card": "captain", "row": "close"},
        {"action": "morale", "row": "close"},
        {"action": "morale", "row": "close"},
        {"action": "horn", "row": "close"},
        {"action": "weather", "row": "close"},
        {"action": "clear"},
        {"action": "play", "card": "archer", "row": "ranged"},
        {"action": "play", "card": "drummer", "row": "ranged"},
        {"action": "morale", "row": "ranged"},
        {"action": "morale", "row": "ranged"},
    ],
}


@dataclass
class ScenarioResult:
    """场景执行结果

    Attributes:
        board: 执行完毕后的棋盘
        trace: 每一步之后的战力快照
    """

    board: Board
    trace: list[dict[str, Any]] = field(default_factory=list)

    @property
    def final_strength(self) -> int:
        return self.board.total_strength()

    def to_dict(self) -> dict[str, Any]:
        return {"board": self.board.to_dict(), "trace": self.trace}


def load_scenario(path: str | Path) -> dict[str, Any]:
    """读取场景文件"""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ScenarioError(reason=f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise ScenarioError(reason="scenario root must be an object")
    return data


def _list_field(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ScenarioError(reason=f"{key!r} must be a list, got {type(value).__name__}")
    return value


def _build_cards(data: dict[str, Any]) -> dict[str, UnitCard]:
    cards: dict[str, UnitCard] = {}
    for raw in _list_field(data, "cards"):
        if not isinstance(raw, dict):
            raise ScenarioError(reason=f"bad card definition {raw!r}: must be an object")
        try:
            card = UnitCard.from_dict(raw)
        except (InvalidCardError, ValueError, TypeError) as e:
            raise ScenarioError(reason=f"bad card definition {raw!r}: {e}") from e
        if card.id in cards:
            raise ScenarioError(reason=f"duplicate card id {card.id!r}")
        cards[card.id] = card
    return cards


def run_scenario(data: dict[str, Any], event_bus: EventBus | None = None) -> ScenarioResult:
    """在一块新棋盘上执行场景

    Args:
        data: 场景字典（见模块文档）
        event_bus: 可选的事件总线

    Returns:
        ScenarioResult

    Raises:
        ScenarioError: 场景内容无效
    """
    if not isinstance(data, dict):
        raise ScenarioError(reason="scenario root must be an object")
    cards = _build_cards(data)
    steps = _list_field(data, "steps")
    board = Board(owner=str(data.get("owner", "")), event_bus=event_bus)
    result = ScenarioResult(board=board)

    for index, step in enumerate(steps, start=1):
        action = step.get("action") if isinstance(step, dict) else None
        try:
            if action == "play":
                card_id = step.get("card")
                if not isinstance(card_id, str) or card_id not in cards:
                    raise ScenarioError(step=index, reason=f"unknown card {card_id!r}")
                # 重复打出由 Board 拒绝 (CardAlreadyOnBoardError)
                board.play(cards[card_id], step.get("row"))
            elif action == "weather":
                board.apply_weather(step.get("row"))
            elif action == "horn":
                board.horn(step.get("row"))
            elif action == "morale":
                board.morale(step.get("row"))
            elif action == "clear":
                board.clear_weather()
            elif action == "end_round":
                board.end_round()
            else:
                raise ScenarioError(step=index, reason=f"unknown action {action!r}")
        except ScenarioError:
            raise
        except GameError as e:
            raise ScenarioError(step=index, reason=e.message) from e

        snapshot = {
            "step": index,
            "action": action,
            "strength": board.total_strength(),
            "rows": {row.position.value: row.get_aggregate_strength() for row in board.rows},
        }
        logger.debug("Scenario step %d: %s", index, snapshot)
        result.trace.append(snapshot)

    return result
