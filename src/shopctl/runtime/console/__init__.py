# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console utilities for runtime output."""

from __future__ import annotations

from shopctl.interfaces.core import ConsoleManager

from .manager import ConsoleOptions, RichConsoleManager, detect_tty, get_console_manager

__all__ = ["ConsoleManager", "ConsoleOptions", "RichConsoleManager", "detect_tty", "get_console_manager"]
