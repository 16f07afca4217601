"""EventBus 与行事件的性质测试（Property-based）。

核心不变量：
1. 高优先级 handler 总是先于低优先级被调用
2. handler 抛异常时仍继续调用后续 handler
3. 事件历史记录不超过 max_history
4. 每次行变更恰好发布一个事件，事件中的战力等于变更后的行总战力
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
from battlerow.enums import RowPosition
from battlerow.events import EventBus, EventType, GameEvent
from battlerow.row import BoardRow

MUTATORS = {
    "buff": EventType.ROW_BUFFED,
    "debuff": EventType.ROW_DEBUFFED,
    "add_morale": EventType.ROW_MORALE_ADDED,
    "clear": EventType.ROW_CLEARED,
    "reset": EventType.ROW_RESET,
}

# ---------------------------------------------------------------------------
# 性质 1: 高优先级 handler 先调用
# ---------------------------------------------------------------------------

@given(
    priorities=st.lists(
        st.integers(min_value=-100, max_value=100),
        min_size=2,
        max_size=20,
    )
)
@settings(max_examples=200)
def test_handlers_called_in_priority_order(priorities: list[int]) -> None:
    bus = EventBus()
    call_order: list[int] = []

    for prio in priorities:
        def handler(event: GameEvent, p: int = prio) -> None:
            call_order.append(p)

        bus.subscribe(EventType.ROW_BUFFED, handler, priority=prio)

    bus.emit(EventType.ROW_BUFFED)

    assert call_order == sorted(priorities, reverse=True)


# ---------------------------------------------------------------------------
# 性质 2: handler 异常不阻断后续 handler
# ---------------------------------------------------------------------------

@given(
    n_handlers=st.integers(min_value=2, max_value=10),
    data=st.data(),
)
@settings(max_examples=100)
def test_exception_in_handler_does_not_block_others(
    n_handlers: int, data: st.DataObject
) -> None:
    bus = EventBus()
    called: list[int] = []
    bad_idx = data.draw(st.integers(min_value=0, max_value=n_handlers - 1))

    for i in range(n_handlers):
        def handler(event: GameEvent, idx: int = i) -> None:
            if idx == bad_idx:
                raise RuntimeError("intentional test error")
            called.append(idx)

        bus.subscribe(EventType.ROW_DEBUFFED, handler)

    bus.emit(EventType.ROW_DEBUFFED)

    assert sorted(called) == [i for i in range(n_handlers) if i != bad_idx]


# ---------------------------------------------------------------------------
# 性质 3: 事件历史有界
# ---------------------------------------------------------------------------

@given(
    n_events=st.integers(min_value=0, max_value=300),
    max_hist=st.integers(min_value=1, max_value=50),
)
@settings(max_examples=100)
def test_event_history_bounded(n_events: int, max_hist: int) -> None:
    bus = EventBus(max_history=max_hist)

    for _ in range(n_events):
        bus.emit(EventType.ROW_CLEARED, strength=0)

    assert len(bus.get_history(max_hist + 10)) == min(n_events, max_hist)


# ---------------------------------------------------------------------------
# 性质 4: 每次行变更发布一个事件，战力与行总战力一致
# ---------------------------------------------------------------------------

@given(
    strengths=st.lists(st.integers(min_value=0, max_value=12), min_size=1, max_size=6),
    ops=st.lists(st.sampled_from(sorted(MUTATORS)), max_size=25),
)
@settings(max_examples=150)
def test_each_mutation_publishes_matching_event(strengths: list[int], ops: list[str]) -> None:
    bus = EventBus(max_history=1000)
    row = BoardRow(RowPosition.RANGED, event_bus=bus)
    for i, s in enumerate(strengths):
        row.add(UnitCard(id=str(i), name=str(i), base_strength=s))

    received: list[GameEvent] = []
    bus.subscribe_all(received.append)

    for op in ops:
        getattr(row, op)()
        event = received[-1]
        assert event.event_type is MUTATORS[op]
        assert event.position is RowPosition.RANGED
        assert event.strength == row.get_aggregate_strength()

    assert len(received) == len(ops)
