# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command definitions exchanged between providers and the dispatcher."""

from __future__ import annotations

import inspect
from dataclasses import dataclass

from shopctl.interfaces.commands import CommandCallable


@dataclass(frozen=True, slots=True)
class Command:
    """A named command contributed to the console.

    Attributes:
        name: Name typed on the command line, e.g. ``deploy:mode:show``.
        callback: Typer callback executed when the command runs.
        help_text: Help text; the callback docstring is used when omitted.
        hidden: ``True`` to leave the command out of ``list`` and ``--help``.
    """

    name: str
    callback: CommandCallable
    help_text: str | None = None
    hidden: bool = False

    @property
    def description(self) -> str:
        """Return the first line of the help text."""

        text = self.help_text or inspect.getdoc(self.callback) or ""
        return text.strip().splitlines()[0] if text.strip() else ""


__all__ = ["Command"]
