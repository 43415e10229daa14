# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers for console output and debug tracing."""

from __future__ import annotations

from .public import configure_debug_logging, emoji, fail, info, ok, warn

__all__ = [
    "configure_debug_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "warn",
]
