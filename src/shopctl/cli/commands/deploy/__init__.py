# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Deployment mode command package."""

from __future__ import annotations

from .command import DeployModeCommands

__all__ = ["DeployModeCommands"]
