# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Status lines for console users and debug tracing for developers.

Status lines (``info``, ``ok``, ``warn``, ``fail``) are printed through Rich
on stdout. Debug tracing uses per-module ``logging`` loggers below the
``shopctl`` logger, which stays silent unless ``SHOPCTL_DEBUG`` is set.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, NamedTuple

from rich.text import Text

from shopctl.runtime.console.manager import detect_tty, get_console_manager

DEBUG_FORMAT: Final[str] = "%(name)s: %(message)s"
ROOT_LOGGER: Final[str] = "shopctl"


class _Status(NamedTuple):
    symbol: str
    style: str


_INFO: Final = _Status("ℹ️ ", "cyan")
_OK: Final = _Status("✅ ", "green")
_WARN: Final = _Status("⚠️ ", "yellow")
_FAIL: Final = _Status("❌ ", "red")


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def _emit(status: _Status, message: str, *, use_emoji: bool, use_color: bool | None) -> None:
    color = detect_tty() if use_color is None else use_color
    line = Text(emoji(status.symbol, use_emoji) + message)
    if color:
        line.stylize(status.style)
    get_console_manager().get(color=color, emoji=use_emoji).print(line)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(_INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(_OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit(_WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an error line.

    Args:
        msg: Message to print.
        use_emoji: Prefix the line with an emoji.
        use_color: Force colour on or off; ``None`` follows terminal detection.
    """

    _emit(_FAIL, msg, use_emoji=use_emoji, use_color=use_color)


def configure_debug_logging(enabled: bool) -> None:
    """Route ``shopctl`` debug records to stderr when ``enabled``.

    The stderr handler is attached once per process; later calls only change
    the level, so bootstrapping twice does not duplicate records.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    if not enabled:
        logger.setLevel(logging.WARNING)
        return
    if not any(getattr(handler, "_shopctl_debug", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        setattr(handler, "_shopctl_debug", True)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


__all__ = ["DEBUG_FORMAT", "ROOT_LOGGER", "configure_debug_logging", "emoji", "fail", "info", "ok", "warn"]
