# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Cache command package."""

from __future__ import annotations

from .command import CacheCommands

__all__ = ["CacheCommands"]
