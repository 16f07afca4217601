"""界面与异常文案的翻译表。

用法::

    from i18n import t, set_locale, row_name

    set_locale("en_US")
    t("ui.board.total", strength=24)   # → "Total strength: 24"
    row_name("siege")                  # → "Siege"
"""

from __future__ import annotations

import importlib
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "zh_CN"
_SUPPORTED = ("zh_CN", "en_US")

_locale: str = DEFAULT_LOCALE
_tables: dict[str, dict[str, str]] = {}


def _table(locale: str) -> dict[str, str]:
    """按需导入 i18n/<locale>.py 中的 STRINGS"""
    if locale not in _tables:
        if locale not in _SUPPORTED:
            raise ValueError(f"Unsupported locale: {locale}")
        module = importlib.import_module(f"{__name__}.{locale}")
        _tables[locale] = module.STRINGS
    return _tables[locale]


def set_locale(locale: str) -> None:
    """切换当前语言，未知语言抛出 ValueError"""
    global _locale
    _table(locale)
    _locale = locale


def get_locale() -> str:
    return _locale


def get_available_locales() -> list[str]:
    return list(_SUPPORTED)


def t(key: str, **kwargs: object) -> str:
    """翻译 key 并用 kwargs 格式化。

    当前语言缺少 key 时回退到 zh_CN，仍缺失则返回 ``[key]``。
    格式化参数不全时返回未格式化的模板。
    """
    template = _table(_locale).get(key)
    if template is None and _locale != DEFAULT_LOCALE:
        template = _table(DEFAULT_LOCALE).get(key)
        if template is not None:
            logger.debug("i18n fallback: '%s' not in %s", key, _locale)
    if template is None:
        logger.warning("i18n missing key: '%s' (lang=%s)", key, _locale)
        return f"[{key}]"

    if not kwargs:
        return template
    try:
        return template.format_map(kwargs)
    except KeyError as e:
        logger.warning("i18n format error: key='%s', missing=%s", key, e)
        return template


def _enum_label(prefix: str, value: object) -> str:
    raw = str(getattr(value, "value", value))
    key = f"{prefix}.{raw}"
    if key in _table(_locale) or key in _table(DEFAULT_LOCALE):
        return t(key)
    return raw


def row_name(value: object) -> str:
    """行位置显示名，接受 RowPosition 或其字符串值；未知值原样返回"""
    return _enum_label("row", value)


def ability_name(value: object) -> str:
    """卡牌能力显示名，接受 CardAbility 或其字符串值；未知值原样返回"""
    return _enum_label("ability", value)
