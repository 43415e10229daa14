# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from pathlib import Path

import pytest

from shopctl.app.metadata import ManifestFinder, ManifestNotFoundError, ProductMetadata


def test_product_metadata_reads_project_table(project_root: Path) -> None:
    metadata = ProductMetadata(ManifestFinder(project_root))
    assert metadata.get_version() == "2.4.1"
    assert metadata.get_name() == "demo-shop"


def test_missing_manifest(tmp_path: Path) -> None:
    finder = ManifestFinder(tmp_path)
    with pytest.raises(ManifestNotFoundError):
        finder.find_manifest()
    metadata = ProductMetadata(finder)
    assert metadata.get_version() == "UNKNOWN"
    assert metadata.get_name() == "shopctl"


def test_invalid_manifest_falls_back(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project\nversion = ", encoding="utf-8")
    assert ProductMetadata(ManifestFinder(tmp_path)).get_version() == "UNKNOWN"


def test_manifest_without_version(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.other]\nkey = "value"\n', encoding="utf-8")
    assert ProductMetadata(ManifestFinder(tmp_path)).get_version() == "UNKNOWN"
