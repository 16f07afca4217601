# -*- coding: utf-8 -*-
"""
棋盘行战力 - 命令行演示
主程序入口

使用方法:
    python main.py                       # 运行内置演示场景
    python main.py scenario.json         # 回放场景文件
    python main.py --json scenario.json  # 以 JSON 输出最终棋盘

依赖:
    - Python 3.10+
    - rich
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from logging_config import setup_logging

from battlerow.config import get_config
from battlerow.events import EventBus
from battlerow.exceptions import ConfigurationError, GameError
from battlerow.scenario import DEMO_SCENARIO, load_scenario, run_scenario
from i18n import get_available_locales, set_locale, t
from ui.rich_ui import BoardRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="棋盘行战力演示 / 场景回放工具")
    parser.add_argument('scenario', nargs='?', help='场景文件路径（缺省运行内置演示）')
    parser.add_argument('--locale', choices=get_available_locales(), help='界面语言')
    parser.add_argument('--log-level', help='日志级别 (DEBUG/INFO/WARNING/ERROR)')
    parser.add_argument('--no-color', action='store_true', help='关闭彩色输出')
    parser.add_argument('--json', action='store_true', help='以 JSON 输出最终棋盘与回放过程')
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """执行 CLI，返回退出码"""
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    if args.locale:
        config = replace(config, locale=args.locale)

    try:
        config.ensure_valid()
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 2

    setup_logging(config)
    set_locale(config.locale)

    data = load_scenario(args.scenario) if args.scenario else DEMO_SCENARIO
    bus = EventBus(max_history=config.event_history_size)
    result = run_scenario(data, event_bus=bus)
    logger.info("Scenario finished, total strength %d", result.final_strength)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    renderer = BoardRenderer(use_color=not args.no_color)
    renderer.show_trace(result.trace)
    renderer.show_board(result.board)
    return 0


def main():
    """程序入口"""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt - exiting")
        print(t("main.interrupted"))
        sys.exit(0)
    except GameError as e:
        logger.error("Scenario failed: %s", e)
        print(t("main.error", error=e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
