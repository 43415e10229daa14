# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and the deployment configuration store."""

from __future__ import annotations

from .deployment import ENV_FILE_NAME, DeploymentConfig, expand_key_path
from .models import AppMode, BootstrapSettings, ConfigError, DeploymentSettings

__all__ = [
    "AppMode",
    "BootstrapSettings",
    "ConfigError",
    "DeploymentConfig",
    "DeploymentSettings",
    "ENV_FILE_NAME",
    "expand_key_path",
]
