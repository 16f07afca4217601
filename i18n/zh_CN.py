"""简体中文翻译表。"""

STRINGS: dict[str, str] = {
    # ── 行位置 ──
    "row.close": "近战",
    "row.ranged": "远程",
    "row.siege": "攻城",

    # ── 卡牌能力 ──
    "ability.none": "无",
    "ability.morale_boost": "士气鼓舞",
    "ability.commanders_horn": "指挥官号角",

    # ── 异常 ──
    "exc.row_error": "棋盘行错误",
    "exc.row_position_not_set": "行位置尚未设置",
    "exc.row_position_already_set": "行位置只能设置一次",
    "exc.invalid_row_position": "无效的行位置: {position}",
    "exc.invalid_card": "卡牌不满足行引擎的要求",
    "exc.card_already_on_board": "卡牌已在棋盘上: {card}",
    "exc.configuration_error": "配置错误",
    "exc.scenario_error": "场景执行失败",

    # ── 棋盘渲染 ──
    "ui.board.title": "{owner} 的棋盘 · 第 {round} 回合",
    "ui.board.row": "行",
    "ui.board.effects": "效果",
    "ui.board.cards": "卡牌",
    "ui.board.strength": "战力",
    "ui.board.total": "总战力: {strength}",
    "ui.board.empty": "（空）",
    "ui.effect.buffed": "增益",
    "ui.effect.debuffed": "削弱",
    "ui.effect.morale": "士气×{count}",
    "ui.trace.title": "回放过程",
    "ui.trace.step": "步骤",
    "ui.trace.action": "动作",

    # ── main.py ──
    "main.interrupted": "\n\n已中断，再见！",
    "main.error": "\n错误: {error}",
}
