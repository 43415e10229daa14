# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON-backed deployment configuration store."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, DeploymentSettings

ENV_FILE_NAME: Final[str] = "env.json"
KEY_PATH_SEPARATOR: Final[str] = "/"
INSTALL_DATE_PATH: Final[str] = "install/date"

LOGGER = logging.getLogger(__name__)


def expand_key_path(key_path: str, value: Any) -> dict[str, Any]:
    """Return a nested mapping assigning ``value`` at ``key_path``.

    Args:
        key_path: ``/``-separated path such as ``install/date``.
        value: Value stored at the innermost key.

    Returns:
        dict[str, Any]: Nested dictionary suitable for :meth:`DeploymentConfig.update`.

    Raises:
        ConfigError: If ``key_path`` contains empty segments.
    """

    segments = key_path.split(KEY_PATH_SEPARATOR)
    if not all(segment.strip() for segment in segments):
        raise ConfigError(f"invalid configuration key '{key_path}'")
    nested: Any = value
    for segment in reversed(segments):
        nested = {segment.strip(): nested}
    return nested


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``overrides`` merged in, recursing into nested mappings."""

    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class DeploymentConfig:
    """Read and write the deployment configuration of an installation.

    The file is read lazily on first access and cached until :meth:`reset`
    or a write through :meth:`update`.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._settings: DeploymentSettings | None = None

    @property
    def path(self) -> Path:
        """Return the location of the configuration file."""

        return self._path

    def load(self) -> DeploymentSettings:
        """Return the parsed settings, reading the file on first use.

        Returns:
            DeploymentSettings: Settings parsed from disk, or defaults when the file is missing.

        Raises:
            ConfigError: If the file is not valid JSON or violates the schema.
        """

        if self._settings is None:
            self._settings = self._read()
        return self._settings

    def is_available(self) -> bool:
        """Return ``True`` when the application has been installed."""

        return bool(self.get(INSTALL_DATE_PATH))

    def get(self, key_path: str, default: Any = None) -> Any:
        """Return the value stored at ``key_path`` or ``default``.

        Args:
            key_path: ``/``-separated path into the configuration.
            default: Value returned when any segment is missing.

        Returns:
            Any: Stored value or ``default``.
        """

        node: Any = self.load().model_dump(mode="json")
        for segment in key_path.split(KEY_PATH_SEPARATOR):
            if not isinstance(node, Mapping) or segment not in node:
                return default
            node = node[segment]
        return default if node is None else node

    def update(self, values: Mapping[str, Any]) -> DeploymentSettings:
        """Merge ``values`` into the configuration and persist the result.

        Args:
            values: Nested mapping merged recursively over the current settings.

        Returns:
            DeploymentSettings: Settings after the merge.

        Raises:
            ConfigError: If the merged settings violate the schema.
        """

        merged = deep_merge(self.load().model_dump(mode="json"), values)
        try:
            settings = DeploymentSettings.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"invalid deployment configuration: {exc}") from exc
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(settings.model_dump(mode="json"), indent=2, sort_keys=True)
        self._path.write_text(payload + "\n", encoding="utf-8")
        LOGGER.debug("deployment configuration written path=%s", self._path)
        self._settings = settings
        return settings

    def delete(self) -> bool:
        """Remove the configuration file; return whether a file was removed."""

        self._settings = None
        try:
            self._path.unlink()
        except FileNotFoundError:
            return False
        return True

    def reset(self) -> None:
        """Drop cached settings so the next access re-reads the file."""

        self._settings = None

    def _read(self) -> DeploymentSettings:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            LOGGER.debug("deployment configuration missing path=%s", self._path)
            return DeploymentSettings()
        except OSError as exc:
            raise ConfigError(f"unable to read {self._path}: {exc}") from exc
        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{self._path} is not valid JSON: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigError(f"{self._path} must contain a JSON object")
        try:
            return DeploymentSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"invalid deployment configuration in {self._path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"DeploymentConfig(path={str(self._path)!r})"


__all__ = [
    "DeploymentConfig",
    "ENV_FILE_NAME",
    "INSTALL_DATE_PATH",
    "deep_merge",
    "expand_key_path",
]
