# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the JSON deployment configuration store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shopctl.config import AppMode, ConfigError, DeploymentConfig
from shopctl.config.deployment import deep_merge, expand_key_path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    config = DeploymentConfig(tmp_path / "etc" / "env.json")
    assert config.load().mode is AppMode.DEFAULT
    assert config.is_available() is False
    assert config.get("install/date") is None
    assert config.get("db/host", "localhost") == "localhost"


def test_update_persists_sorted_json(tmp_path: Path) -> None:
    path = tmp_path / "etc" / "env.json"
    config = DeploymentConfig(path)
    config.update({"mode": "developer", "db": {"host": "db.local"}})

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["mode"] == "developer"
    assert data["db"] == {"host": "db.local"}
    assert list(data) == sorted(data)

    fresh = DeploymentConfig(path)
    assert fresh.load().mode is AppMode.DEVELOPER
    assert fresh.get("db/host") == "db.local"


def test_update_merges_nested_sections(tmp_path: Path) -> None:
    config = DeploymentConfig(tmp_path / "env.json")
    config.update({"db": {"host": "a", "port": 3306}})
    config.update({"db": {"host": "b"}})
    assert config.get("db") == {"host": "b", "port": 3306}


def test_install_date_marks_available(tmp_path: Path) -> None:
    config = DeploymentConfig(tmp_path / "env.json")
    config.update({"install": {"date": "2025-01-01"}})
    assert config.is_available() is True


def test_invalid_mode_rejected(tmp_path: Path) -> None:
    path = tmp_path / "env.json"
    config = DeploymentConfig(path)
    with pytest.raises(ConfigError):
        config.update({"mode": "staging"})
    assert not path.exists()


@pytest.mark.parametrize("payload", ["{not json", "[1, 2]", '{"mode": "staging"}'])
def test_malformed_file_raises(tmp_path: Path, payload: str) -> None:
    path = tmp_path / "env.json"
    path.write_text(payload, encoding="utf-8")
    with pytest.raises(ConfigError):
        DeploymentConfig(path).load()


def test_reset_rereads_file(tmp_path: Path) -> None:
    path = tmp_path / "env.json"
    config = DeploymentConfig(path)
    assert config.is_available() is False
    path.write_text('{"install": {"date": "2025-01-01"}}', encoding="utf-8")
    assert config.is_available() is False
    config.reset()
    assert config.is_available() is True


def test_delete(tmp_path: Path) -> None:
    path = tmp_path / "env.json"
    config = DeploymentConfig(path)
    assert config.delete() is False
    config.update({"install": {"date": "2025-01-01"}})
    assert config.delete() is True
    assert not path.exists()
    assert config.is_available() is False


def test_expand_key_path() -> None:
    assert expand_key_path("db/connection/host", "x") == {"db": {"connection": {"host": "x"}}}
    with pytest.raises(ConfigError):
        expand_key_path("db//host", "x")


def test_deep_merge_recurses_into_sections() -> None:
    base = {"db": {"host": "a", "port": 3306}, "mode": "default"}
    merged = deep_merge(base, {"db": {"host": "b"}, "mode": {"value": "x"}})
    assert merged == {"db": {"host": "b", "port": 3306}, "mode": {"value": "x"}}
    assert base["db"] == {"host": "a", "port": 3306}
