# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers shared by console commands: errors, output and registration."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from rich.console import Console
from rich.text import Text

from shopctl.config.models import BootstrapSettings
from shopctl.interfaces.cli import CommandRegistrar
from shopctl.interfaces.commands import CommandCallable, CommandDefinition
from shopctl.interfaces.runtime import ServiceRegistryProtocol
from shopctl.runtime.console import ConsoleOptions, get_console_manager

from ...core.logging import fail as core_fail
from ...core.logging import info as core_info
from ...core.logging import ok as core_ok
from ...core.logging import warn as core_warn

_FIELD_PATTERN: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=(\S+)")


class CLIError(RuntimeError):
    """Failure of a console command carrying the exit status to report."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Status output for one console process.

    Status lines follow the emoji and colour choices of the bootstrap
    settings. Debug lines go to stderr and only when debugging is enabled.
    """

    options: ConsoleOptions
    debug_enabled: bool = False
    debug_console: Console = field(init=False, repr=False)

    def __post_init__(self) -> None:
        manager = get_console_manager()
        self.debug_console = manager.get(color=self.options.color, emoji=self.options.emoji, stderr=True)

    def fail(self, message: str) -> None:
        """Print ``message`` as a failure line.

        Args:
            message: Text explaining what went wrong.
        """

        core_fail(message, use_emoji=self.options.emoji, use_color=self.options.color)

    def warn(self, message: str) -> None:
        """Print ``message`` as a warning line."""

        core_warn(message, use_emoji=self.options.emoji, use_color=self.options.color)

    def ok(self, message: str) -> None:
        """Print ``message`` as a success line."""

        core_ok(message, use_emoji=self.options.emoji, use_color=self.options.color)

    def info(self, message: str) -> None:
        """Print ``message`` as an informational line."""

        core_info(message, use_emoji=self.options.emoji, use_color=self.options.color)

    def debug(self, message: str) -> None:
        """Print ``message`` to stderr with its ``key=value`` fields highlighted."""

        if not self.debug_enabled:
            return
        line = Text("[debug] ", style="bold cyan")
        position = 0
        for match in _FIELD_PATTERN.finditer(message):
            line.append(message[position : match.start()], style="dim")
            line.append(match.group(1), style="bold magenta")
            line.append("=", style="dim")
            line.append(match.group(2), style="bold green")
            position = match.end()
        line.append(message[position:], style="dim")
        self.debug_console.print(line)


def build_cli_logger(settings: BootstrapSettings) -> CLILogger:
    """Return a :class:`CLILogger` following the output flags of ``settings``."""

    return CLILogger(options=ConsoleOptions.from_settings(settings), debug_enabled=settings.debug)


def logger_for(container: ServiceRegistryProtocol) -> CLILogger:
    """Return a :class:`CLILogger` for the settings registered in ``container``."""

    return build_cli_logger(container.resolve("settings"))


def register_command(app: CommandRegistrar, command: CommandDefinition) -> CommandCallable:
    """Register ``command`` on ``app`` and return the registered callback.

    Args:
        app: Typer application receiving the command.
        command: Command definition contributed by a provider.

    Returns:
        CommandCallable: Callback as returned by the Typer decorator.
    """

    decorator: Callable[[CommandCallable], CommandCallable] = app.command(
        command.name,
        help=command.help_text,
        hidden=command.hidden,
    )
    return decorator(command.callback)


__all__: Final = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "logger_for",
    "register_command",
]
