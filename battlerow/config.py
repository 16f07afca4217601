"""配置中心 (SSOT - 单一事实来源)

所有可配置参数应在此定义，支持从环境变量覆盖。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .exceptions import ConfigurationError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOCALES = ("zh_CN", "en_US")


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置"""
    value = os.environ.get(key, "").lower()
    if value in ("true", "1", "yes", "on"):
        return True
    elif value in ("false", "0", "no", "off"):
        return False
    return default


@dataclass(frozen=True)
class GameConfig:
    """配置类 (不可变)

    所有配置项支持通过环境变量覆盖：
    - BATTLEROW_LOG_LEVEL: 日志级别
    - BATTLEROW_LOG_FILE: 日志文件路径（空表示 logs/battlerow.log）
    - BATTLEROW_DEBUG: 调试模式（同时输出日志到控制台）
    - BATTLEROW_LOCALE: 界面语言
    - BATTLEROW_EVENT_HISTORY: 事件总线保留的历史事件数
    """

    # ==================== 日志与调试 ====================
    log_level: str = field(
        default_factory=lambda: os.environ.get("BATTLEROW_LOG_LEVEL", "INFO")
    )
    log_file: str = field(
        default_factory=lambda: os.environ.get("BATTLEROW_LOG_FILE", "")
    )
    debug_mode: bool = field(
        default_factory=lambda: _get_env_bool("BATTLEROW_DEBUG", False)
    )

    # ==================== 界面 ====================
    locale: str = field(
        default_factory=lambda: os.environ.get("BATTLEROW_LOCALE", "zh_CN")
    )

    # ==================== 事件 ====================
    event_history_size: int = field(
        default_factory=lambda: _get_env_int("BATTLEROW_EVENT_HISTORY", 100)
    )

    @classmethod
    def from_env(cls) -> GameConfig:
        """从环境变量创建配置实例"""
        return cls()

    def _problems(self) -> list[tuple[str, str]]:
        problems: list[tuple[str, str]] = []
        if self.log_level.upper() not in _LOG_LEVELS:
            problems.append(
                ("log_level", f"log_level must be one of {_LOG_LEVELS}, got {self.log_level!r}")
            )
        if self.locale not in _LOCALES:
            problems.append(
                ("locale", f"locale must be one of {_LOCALES}, got {self.locale!r}")
            )
        if self.event_history_size < 1:
            problems.append((
                "event_history_size",
                f"event_history_size must be >= 1, got {self.event_history_size}",
            ))
        return problems

    def validate(self) -> list[str]:
        """校验配置，返回问题列表（空列表表示合法）"""
        return [message for _, message in self._problems()]

    def ensure_valid(self) -> GameConfig:
        """校验配置，不合法时抛出 ConfigurationError

        Returns:
            self，便于链式调用

        Raises:
            ConfigurationError: 第一个非法配置项记录在 config_key 中
        """
        problems = self._problems()
        if problems:
            raise ConfigurationError(
                message="; ".join(message for _, message in problems),
                config_key=problems[0][0],
            )
        return self


# 全局配置单例
_config: GameConfig | None = None


def get_config() -> GameConfig:
    """获取全局配置实例（懒加载）"""
    global _config
    if _config is None:
        _config = GameConfig.from_env()
    return _config


def reset_config() -> None:
    """重置配置（用于测试）"""
    global _config
    _config = None
