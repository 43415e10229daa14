# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""shopctl CLI package exports."""

from __future__ import annotations

from typing import Final

from .aggregator import AggregationResult, CommandAggregator, CommandSources
from .app import create_application, main
from .application import ConsoleApplication
from .command import Command

__all__: Final[list[str]] = [
    "AggregationResult",
    "Command",
    "CommandAggregator",
    "CommandSources",
    "ConsoleApplication",
    "create_application",
    "main",
]
