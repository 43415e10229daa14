# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich consoles shared by status output, tables and debug traces."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cache
from typing import TYPE_CHECKING

from rich.console import Console

from shopctl.interfaces.core import ConsoleManager

if TYPE_CHECKING:
    from shopctl.config.models import BootstrapSettings


def detect_tty(*, stderr: bool = False) -> bool:
    """Return ``True`` when the selected standard stream is a terminal."""

    stream = sys.stderr if stderr else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@dataclass(frozen=True, slots=True)
class ConsoleOptions:
    """Output preferences from ``SHOPCTL_COLOR`` and ``SHOPCTL_EMOJI``."""

    color: bool = True
    emoji: bool = True

    @classmethod
    def from_settings(cls, settings: BootstrapSettings) -> ConsoleOptions:
        return cls(color=settings.color, emoji=settings.emoji)


class RichConsoleManager(ConsoleManager):
    """Hand out one Rich console per combination of output preferences.

    The stream is looked up at print time, so a console obtained before
    ``sys.stdout`` is swapped (by pytest or Click's test runner) still
    writes to the replacement. Colour is only emitted on terminals.
    """

    def __init__(self) -> None:
        self._consoles: dict[tuple[ConsoleOptions, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        options = ConsoleOptions(color=color, emoji=emoji)
        terminal = detect_tty(stderr=stderr)
        key = (options, stderr, terminal)
        console = self._consoles.get(key)
        if console is None:
            styled = options.color and terminal
            console = Console(
                stderr=stderr,
                emoji=options.emoji,
                force_terminal=terminal,
                color_system="auto" if styled else None,
                no_color=not styled,
                soft_wrap=True,
                highlight=False,
            )
            self._consoles[key] = console
        return console

    def for_options(self, options: ConsoleOptions, *, stderr: bool = False) -> Console:
        """Return the console matching ``options``."""

        return self.get(color=options.color, emoji=options.emoji, stderr=stderr)


@cache
def get_console_manager() -> RichConsoleManager:
    """Return the console manager of this process."""

    return RichConsoleManager()


__all__ = [
    "ConsoleOptions",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
]
