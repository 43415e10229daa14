# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing bootstrap parameters and deployment settings."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class ConfigError(Exception):
    """Raised when bootstrap parameters or deployment settings are invalid."""


class AppMode(str, Enum):
    """Deployment modes understood by the application."""

    DEFAULT = "default"
    DEVELOPER = "developer"
    PRODUCTION = "production"


PARAM_ROOT: Final[str] = "SHOPCTL_ROOT"
PARAM_MODE: Final[str] = "SHOPCTL_MODE"
PARAM_ETC_DIR: Final[str] = "SHOPCTL_ETC_DIR"
PARAM_CACHE_DIR: Final[str] = "SHOPCTL_CACHE_DIR"
PARAM_GENERATION_DIR: Final[str] = "SHOPCTL_GENERATION_DIR"
PARAM_METADATA_DIR: Final[str] = "SHOPCTL_METADATA_DIR"
PARAM_VENDOR_PROVIDERS: Final[str] = "SHOPCTL_VENDOR_PROVIDERS"
PARAM_SETUP_COMMANDS: Final[str] = "SHOPCTL_SETUP_COMMANDS"
PARAM_EMOJI: Final[str] = "SHOPCTL_EMOJI"
PARAM_COLOR: Final[str] = "SHOPCTL_COLOR"
PARAM_DEBUG: Final[str] = "SHOPCTL_DEBUG"

_PARAM_FIELDS: Final[dict[str, str]] = {
    PARAM_ROOT: "root",
    PARAM_MODE: "mode",
    PARAM_ETC_DIR: "etc_dir",
    PARAM_CACHE_DIR: "cache_dir",
    PARAM_GENERATION_DIR: "generation_dir",
    PARAM_METADATA_DIR: "metadata_dir",
    PARAM_VENDOR_PROVIDERS: "vendor_providers",
    PARAM_SETUP_COMMANDS: "setup_commands",
    PARAM_EMOJI: "emoji",
    PARAM_COLOR: "color",
    PARAM_DEBUG: "debug",
}


class BootstrapSettings(BaseModel):
    """Settings derived from the environment and ``--bootstrap`` overrides."""

    model_config = ConfigDict(validate_assignment=True, frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    mode: AppMode | None = None
    etc_dir: Path | None = None
    cache_dir: Path | None = None
    generation_dir: Path | None = None
    metadata_dir: Path | None = None
    vendor_providers: tuple[str, ...] = ()
    setup_commands: bool = True
    emoji: bool = True
    color: bool = True
    debug: bool = False

    @field_validator("vendor_providers", mode="before")
    @classmethod
    def _split_providers(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(item.strip() for item in value.split(",") if item.strip())
        return value

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> BootstrapSettings:
        """Build settings from merged bootstrap parameters.

        Unknown keys are ignored so the full process environment can be passed
        through; empty values fall back to the defaults.

        Args:
            params: Environment merged with ``--bootstrap`` values.

        Returns:
            BootstrapSettings: Validated settings.

        Raises:
            ConfigError: If a recognised parameter holds an invalid value.
        """

        values = {
            field: params[key] for key, field in _PARAM_FIELDS.items() if params.get(key) not in (None, "")
        }
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(f"invalid bootstrap parameters: {exc}") from exc


class InstallSection(BaseModel):
    """Installation marker recorded by ``setup:install``."""

    model_config = ConfigDict(extra="allow")

    date: str | None = None


class DeploymentSettings(BaseModel):
    """Contents of the deployment configuration file."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    install: InstallSection = Field(default_factory=InstallSection)
    mode: AppMode = AppMode.DEFAULT


__all__ = [
    "AppMode",
    "BootstrapSettings",
    "ConfigError",
    "DeploymentSettings",
    "InstallSection",
    "PARAM_CACHE_DIR",
    "PARAM_COLOR",
    "PARAM_DEBUG",
    "PARAM_EMOJI",
    "PARAM_ETC_DIR",
    "PARAM_GENERATION_DIR",
    "PARAM_METADATA_DIR",
    "PARAM_MODE",
    "PARAM_ROOT",
    "PARAM_SETUP_COMMANDS",
    "PARAM_VENDOR_PROVIDERS",
]
