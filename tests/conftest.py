# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from shopctl.app.bootstrap import Bootstrap
from shopctl.config.deployment import DeploymentConfig

BootstrapFactory = Callable[..., Bootstrap]


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return an installation root carrying a minimal project manifest."""

    root = tmp_path / "shop"
    root.mkdir()
    (root / "pyproject.toml").write_text(
        '[project]\nname = "demo-shop"\nversion = "2.4.1"\n',
        encoding="utf-8",
    )
    return root


@pytest.fixture
def base_params(project_root: Path) -> dict[str, str]:
    """Return bootstrap parameters pointing at ``project_root`` with plain output."""

    return {
        "SHOPCTL_ROOT": str(project_root),
        "SHOPCTL_EMOJI": "0",
        "SHOPCTL_COLOR": "0",
    }


@pytest.fixture
def make_bootstrap(base_params: dict[str, str]) -> BootstrapFactory:
    """Return a factory building bootstraps for ``project_root``."""

    def _factory(**overrides: str) -> Bootstrap:
        return Bootstrap.create({**base_params, **overrides})

    return _factory


@pytest.fixture
def install(project_root: Path) -> Callable[..., DeploymentConfig]:
    """Return a helper that marks ``project_root`` as installed."""

    def _install(mode: str = "default") -> DeploymentConfig:
        config = DeploymentConfig(project_root / "etc" / "env.json")
        config.update({"install": {"date": "2025-01-01T00:00:00+00:00"}, "mode": mode})
        return config

    return _install
