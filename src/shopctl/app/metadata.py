# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Product name and version lookup from the project manifest."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Final

MANIFEST_FILE_NAME: Final[str] = "pyproject.toml"
UNKNOWN_VERSION: Final[str] = "UNKNOWN"
DEFAULT_PRODUCT_NAME: Final[str] = "shopctl"

LOGGER = logging.getLogger(__name__)


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the project root does not contain a manifest."""


class ManifestFinder:
    """Locate the project manifest of an installation."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def find_manifest(self) -> Path:
        """Return the path of ``pyproject.toml`` beneath the root.

        Raises:
            ManifestNotFoundError: If the manifest does not exist.
        """

        candidate = self._root / MANIFEST_FILE_NAME
        if not candidate.is_file():
            raise ManifestNotFoundError(f"{MANIFEST_FILE_NAME} not found in {self._root}")
        return candidate

    def __repr__(self) -> str:
        return f"ManifestFinder(root={str(self._root)!r})"


class ProductMetadata:
    """Expose the ``[project]`` table of the manifest."""

    def __init__(self, finder: ManifestFinder) -> None:
        self._finder = finder
        self._project: dict[str, Any] | None = None

    def get_version(self) -> str:
        """Return the product version or ``UNKNOWN`` when it cannot be determined."""

        version = self._read_project().get("version")
        return str(version) if version else UNKNOWN_VERSION

    def get_name(self) -> str:
        """Return the product name, defaulting to ``shopctl``."""

        name = self._read_project().get("name")
        return str(name) if name else DEFAULT_PRODUCT_NAME

    def _read_project(self) -> dict[str, Any]:
        if self._project is not None:
            return self._project
        try:
            manifest = self._finder.find_manifest()
            with manifest.open("rb") as handle:
                data = tomllib.load(handle)
        except (ManifestNotFoundError, tomllib.TOMLDecodeError, OSError) as exc:
            LOGGER.debug("product metadata unavailable error=%s", exc)
            data = {}
        project = data.get("project")
        self._project = dict(project) if isinstance(project, dict) else {}
        return self._project

    def __repr__(self) -> str:
        return f"ProductMetadata(finder={self._finder!r})"


__all__ = [
    "MANIFEST_FILE_NAME",
    "ManifestFinder",
    "ManifestNotFoundError",
    "ProductMetadata",
    "UNKNOWN_VERSION",
]
