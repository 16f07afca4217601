"""Project-wide logging setup.

- Logs go to a rotating UTF-8 file (logs/battlerow.log unless overridden).
- Console logging is off unless enabled, so rich board output stays readable.
- Calling setup_logging() repeatedly reuses the named handlers.
- ``json_format=True`` switches both handlers to one JSON object per line.

Usage:
    from logging_config import setup_logging
    setup_logging(get_config())

Environment overrides (read through GameConfig):
    BATTLEROW_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    BATTLEROW_LOG_FILE=path/to/file.log
    BATTLEROW_DEBUG=1  (also enables console output at DEBUG)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from battlerow.config import GameConfig

_FILE_HANDLER_NAME = "battlerow_file"
_CONSOLE_HANDLER_NAME = "battlerow_console"
_DEFAULT_LOG_PATH = Path("logs") / "battlerow.log"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level

    level_str = (level or "").strip().upper()
    if not level_str:
        return logging.INFO

    return logging._nameToLevel.get(level_str, logging.INFO)


def _resolve_log_path(log_file: str | None) -> Path:
    path = Path(log_file) if log_file else _DEFAULT_LOG_PATH
    if not path.is_absolute():
        path = Path.cwd() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    config: GameConfig | None = None,
    *,
    level: str | int | None = None,
    log_file: str | None = None,
    enable_file: bool = True,
    enable_console: bool | None = None,
    console_level: str | int = "WARNING",
    json_format: bool = False,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure the root logger and return it.

    Explicit keyword arguments win over values taken from ``config``.
    """
    if config is None:
        from battlerow.config import get_config

        config = get_config()

    if level is None:
        level = config.log_level
    if log_file is None:
        log_file = config.log_file or None
    if enable_console is None:
        enable_console = config.debug_mode
        if config.debug_mode:
            console_level = "DEBUG"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers filter

    fmt: logging.Formatter
    if json_format:
        fmt = JsonFormatter()
    else:
        fmt = logging.Formatter(fmt=TEXT_FORMAT, datefmt=DATE_FORMAT)

    existing_by_name = {getattr(h, "name", ""): h for h in root.handlers}

    if enable_file:
        file_handler = existing_by_name.get(_FILE_HANDLER_NAME)
        if file_handler is None:
            file_handler = RotatingFileHandler(
                str(_resolve_log_path(log_file)),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.name = _FILE_HANDLER_NAME
            root.addHandler(file_handler)

        file_handler.setFormatter(fmt)
        file_handler.setLevel(_parse_level(level))

    if enable_console:
        console_handler = existing_by_name.get(_CONSOLE_HANDLER_NAME)
        if console_handler is None:
            console_handler = logging.StreamHandler()
            console_handler.name = _CONSOLE_HANDLER_NAME
            root.addHandler(console_handler)

        console_handler.setFormatter(fmt)
        console_handler.setLevel(_parse_level(console_level))

    logging.getLogger(__name__).info(
        "Logging initialized | level=%s file=%s console=%s",
        level,
        log_file or str(_DEFAULT_LOG_PATH),
        enable_console,
    )

    return root
