# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Product information command package."""

from __future__ import annotations

from .command import InfoCommands

__all__ = ["InfoCommands"]
