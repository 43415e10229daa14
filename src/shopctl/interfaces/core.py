# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interfaces for the Rich console output layer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class ConsoleManager(Protocol):
    """Source of Rich consoles for a colour, emoji and stream choice."""

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return the console for the requested preferences."""
        ...


__all__ = ["ConsoleManager"]
