# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deployment mode resolution."""

from __future__ import annotations

from shopctl.config.deployment import DeploymentConfig
from shopctl.config.models import AppMode


class AppState:
    """Report the mode the application runs in.

    An explicit override (``SHOPCTL_MODE``) wins over the mode stored in the
    deployment configuration, which in turn defaults to ``default``.
    """

    def __init__(self, deployment_config: DeploymentConfig, *, mode_override: AppMode | None = None) -> None:
        self._deployment_config = deployment_config
        self._mode_override = mode_override

    def get_mode(self) -> AppMode:
        if self._mode_override is not None:
            return self._mode_override
        return self._deployment_config.load().mode

    def is_production(self) -> bool:
        return self.get_mode() is AppMode.PRODUCTION

    def __repr__(self) -> str:
        return f"AppState(mode_override={self._mode_override!r})"


__all__ = ["AppState"]
