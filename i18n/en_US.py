"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Row positions ──
    "row.close": "Close Combat",
    "row.ranged": "Ranged",
    "row.siege": "Siege",

    # ── Card abilities ──
    "ability.none": "None",
    "ability.morale_boost": "Morale Boost",
    "ability.commanders_horn": "Commander's Horn",

    # ── Exceptions ──
    "exc.row_error": "Board row error",
    "exc.row_position_not_set": "Row position has not been set",
    "exc.row_position_already_set": "Row position can only be set once",
    "exc.invalid_row_position": "Invalid row position: {position}",
    "exc.invalid_card": "Card does not satisfy the row engine contract",
    "exc.card_already_on_board": "Card is already on the board: {card}",
    "exc.configuration_error": "Configuration error",
    "exc.scenario_error": "Scenario failed",

    # ── Board rendering ──
    "ui.board.title": "{owner}'s board · round {round}",
    "ui.board.row": "Row",
    "ui.board.effects": "Effects",
    "ui.board.cards": "Cards",
    "ui.board.strength": "Strength",
    "ui.board.total": "Total strength: {strength}",
    "ui.board.empty": "(empty)",
    "ui.effect.buffed": "Buffed",
    "ui.effect.debuffed": "Debuffed",
    "ui.effect.morale": "Morale×{count}",
    "ui.trace.title": "Replay",
    "ui.trace.step": "Step",
    "ui.trace.action": "Action",

    # ── main.py ──
    "main.interrupted": "\n\nInterrupted. Goodbye!",
    "main.error": "\nError: {error}",
}
