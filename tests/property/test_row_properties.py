"""BoardRow 行效果引擎的性质测试（Property-based）。

核心不变量：
1. 任意操作序列之后，每张非英雄牌的战力等于当前行状态下的公式值
2. 英雄牌的战力始终等于基础战力
3. 行总战力始终等于行内卡牌战力之和
4. reset() 之后所有非英雄牌回到基础战力，行状态归零
5. clear() 不改变增益标记，总是清除削弱标记
6. 同时增益和削弱时按削弱分支计算
7. 中途加入的牌与一开始就在行内的同类牌战力一致
"""

from __future__ import annotations

import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parents[2])
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from hypothesis import given, settings
from hypothesis import strategies as st

from battlerow.card import UnitCard
from battlerow.enums import CardAbility, RowPosition
from battlerow.row import BoardRow, RowState, compute_strength

# ---------------------------------------------------------------------------
# 辅助策略
# ---------------------------------------------------------------------------

abilities = st.sampled_from(list(CardAbility))
base_strengths = st.integers(min_value=0, max_value=15)
operations = st.sampled_from(["add", "buff", "debuff", "morale", "clear", "reset"])


@st.composite
def unit_cards(draw):
    """生成一张随机单位卡。"""
    return UnitCard(
        id=f"prop_{draw(st.integers(min_value=0, max_value=9999))}",
        name="测试牌",
        base_strength=draw(base_strengths),
        is_hero=draw(st.booleans()),
        ability=draw(abilities),
    )


def _expected(card: UnitCard, state: RowState) -> int:
    """独立于实现的参考公式。"""
    if card.is_hero:
        return card.base_strength
    s, m = card.base_strength, state.morale
    p = card.ability is CardAbility.MORALE_BOOST and m >= 1
    if state.is_debuffed:
        return 1 + (m - 1 if p else m)
    if state.is_buffed:
        return 2 * s + (2 * m - 2 if p else 2 * m)
    return s + (m - 1 if p else m)


def _apply(row: BoardRow, op: str, card_source: list[UnitCard]) -> None:
    if op == "add":
        if card_source:
            row.add(card_source.pop())
    elif op == "buff":
        row.buff()
    elif op == "debuff":
        row.debuff()
    elif op == "morale":
        row.add_morale()
    elif op == "clear":
        row.clear()
    elif op == "reset":
        row.reset()


def _check_invariants(row: BoardRow) -> None:
    state = row.state
    for card in row.cards:
        assert card.strength == _expected(card, state), (
            f"{card!r} in {state} expected {_expected(card, state)}"
        )
        if card.is_hero:
            assert card.strength == card.base_strength
    assert row.get_aggregate_strength() == sum(c.strength for c in row.cards)
    assert row.morale >= 0


# ---------------------------------------------------------------------------
# 性质 1-3: 任意操作序列后公式、英雄豁免与总和成立
# ---------------------------------------------------------------------------

@given(
    cards=st.lists(unit_cards(), max_size=8),
    ops=st.lists(operations, max_size=40),
)
@settings(max_examples=300)
def test_invariants_hold_after_every_mutation(cards: list[UnitCard], ops: list[str]) -> None:
    row = BoardRow(RowPosition.CLOSE)
    source = list(cards)
    for op in ops:
        _apply(row, op, source)
        _check_invariants(row)


@given(card=unit_cards(), buffed=st.booleans(), debuffed=st.booleans(),
       morale=st.integers(min_value=0, max_value=20))
@settings(max_examples=300)
def test_compute_strength_matches_reference(
    card: UnitCard, buffed: bool, debuffed: bool, morale: int,
) -> None:
    state = RowState(is_buffed=buffed, is_debuffed=debuffed, morale=morale)
    assert compute_strength(card, state) == _expected(card, state)


# ---------------------------------------------------------------------------
# 性质 4: reset() 从任意历史回到初始状态
# ---------------------------------------------------------------------------

@given(
    cards=st.lists(unit_cards(), min_size=1, max_size=8),
    ops=st.lists(operations, max_size=30),
)
@settings(max_examples=200)
def test_reset_restores_pristine_row(cards: list[UnitCard], ops: list[str]) -> None:
    row = BoardRow(RowPosition.SIEGE)
    for card in cards:
        row.add(card)
    for op in ops:
        _apply(row, op, [])

    row.reset()

    assert row.morale == 0
    assert row.is_buffed is False
    assert row.is_debuffed is False
    for card in row.cards:
        assert card.strength == card.base_strength


# ---------------------------------------------------------------------------
# 性质 5: clear() 只清除削弱
# ---------------------------------------------------------------------------

@given(ops=st.lists(operations, max_size=30))
@settings(max_examples=200)
def test_clear_only_strips_debuff(ops: list[str]) -> None:
    row = BoardRow(RowPosition.RANGED)
    row.add(UnitCard(id="c", name="c", base_strength=5))
    for op in ops:
        _apply(row, op, [])
    buffed, morale = row.is_buffed, row.morale

    row.clear()

    assert row.is_debuffed is False
    assert row.is_buffed == buffed
    assert row.morale == morale


# ---------------------------------------------------------------------------
# 性质 6: 削弱优先于增益
# ---------------------------------------------------------------------------

@given(cards=st.lists(unit_cards(), min_size=1, max_size=8),
       morale=st.integers(min_value=0, max_value=6))
@settings(max_examples=200)
def test_debuff_dominates_buff(cards: list[UnitCard], morale: int) -> None:
    row = BoardRow(RowPosition.CLOSE)
    for card in cards:
        row.add(card)
    for _ in range(morale):
        row.add_morale()
    row.buff()
    row.debuff()

    debuff_only = RowState(is_debuffed=True, morale=morale)
    for card in row.cards:
        assert card.strength == _expected(card, debuff_only)


# ---------------------------------------------------------------------------
# 性质 7: add() 与全量重算收敛
# ---------------------------------------------------------------------------

@given(
    base=base_strengths,
    ability=abilities,
    ops=st.lists(operations.filter(lambda op: op != "add"), max_size=20),
)
@settings(max_examples=200)
def test_late_add_matches_early_add(base: int, ability: CardAbility, ops: list[str]) -> None:
    row = BoardRow(RowPosition.CLOSE)
    early = UnitCard(id="early", name="early", base_strength=base, ability=ability)
    row.add(early)
    for op in ops:
        _apply(row, op, [])

    late = UnitCard(id="late", name="late", base_strength=base, ability=ability)
    row.add(late)

    assert late.strength == early.strength
