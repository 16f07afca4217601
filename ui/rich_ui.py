# -*- coding: utf-8 -*-
"""
Rich board renderer
Uses the 'rich' library to draw a player's board and a scenario trace.
"""

from typing import Any, Dict, List, Optional, TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.box import ROUNDED

from battlerow.enums import CardAbility
from i18n import ability_name, row_name, t

if TYPE_CHECKING:
    from battlerow.board import Board
    from battlerow.row import BoardRow

ROW_STYLES = {
    "close": "red",
    "ranged": "green",
    "siege": "blue",
}


class BoardRenderer:
    """
    Board renderer
    Draws rows, their effects and card strengths as rich tables.
    """

    def __init__(self, console: Optional[Console] = None, use_color: bool = True):
        self.console = console or Console(highlight=False, no_color=not use_color)

    # --- Cells ---

    def _render_effects(self, row: 'BoardRow') -> Text:
        state = row.state
        txt = Text()
        if state.is_debuffed:
            txt.append(t("ui.effect.debuffed"), style="bold magenta")
        if state.is_buffed:
            # debuff wins, so an overridden buff is dimmed
            style = "dim yellow" if state.is_debuffed else "bold yellow"
            if txt:
                txt.append(" ")
            txt.append(t("ui.effect.buffed"), style=style)
        if state.morale:
            if txt:
                txt.append(" ")
            txt.append(t("ui.effect.morale", count=state.morale), style="cyan")
        return txt

    def _render_cards(self, row: 'BoardRow') -> Text:
        if not len(row):
            return Text(t("ui.board.empty"), style="dim")
        txt = Text()
        for i, card in enumerate(row):
            if i:
                txt.append("  ")
            name = getattr(card, "display_name", None) or getattr(card, "name", "?")
            if card.is_hero:
                style = "bold yellow"
            elif card.strength > card.base_strength:
                style = "green"
            elif card.strength < card.base_strength:
                style = "red"
            else:
                style = "white"
            txt.append(f"{name} {card.strength}", style=style)
            if card.strength != card.base_strength:
                txt.append(f"({card.base_strength})", style="dim")
            if card.ability is not CardAbility.NONE:
                txt.append(f" [{ability_name(card.ability)}]", style="cyan")
        return txt

    # --- Public ---

    def render_board(self, board: 'Board') -> Panel:
        """Build the panel for a board (rows front to back)."""
        table = Table(box=ROUNDED, expand=True)
        table.add_column(t("ui.board.row"), style="bold")
        table.add_column(t("ui.board.effects"))
        table.add_column(t("ui.board.cards"), ratio=1)
        table.add_column(t("ui.board.strength"), justify="right")

        for row in board.rows:
            pos = row.position.value
            table.add_row(
                Text(row_name(pos), style=ROW_STYLES.get(pos, "white")),
                self._render_effects(row),
                self._render_cards(row),
                str(row.get_aggregate_strength()),
            )

        title = t("ui.board.title", owner=board.owner or "-", round=board.round_count)
        subtitle = t("ui.board.total", strength=board.total_strength())
        return Panel(table, title=title, subtitle=subtitle, box=ROUNDED)

    def render_trace(self, trace: List[Dict[str, Any]]) -> Table:
        """Build a table of per-step strengths from a scenario trace."""
        table = Table(title=t("ui.trace.title"), box=ROUNDED)
        table.add_column(t("ui.trace.step"), justify="right")
        table.add_column(t("ui.trace.action"))
        positions = list(trace[0]["rows"]) if trace else []
        for pos in positions:
            table.add_column(row_name(pos), justify="right", style=ROW_STYLES.get(pos))
        table.add_column(t("ui.board.strength"), justify="right", style="bold")

        for entry in trace:
            table.add_row(
                str(entry["step"]),
                str(entry["action"]),
                *(str(entry["rows"][pos]) for pos in positions),
                str(entry["strength"]),
            )
        return table

    def show_board(self, board: 'Board') -> None:
        self.console.print(self.render_board(board))

    def show_trace(self, trace: List[Dict[str, Any]]) -> None:
        self.console.print(self.render_trace(trace))
