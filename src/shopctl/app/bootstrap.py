# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build the service container an installation's console runs against."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from shopctl.config.deployment import ENV_FILE_NAME, DeploymentConfig
from shopctl.config.models import BootstrapSettings
from shopctl.core.logging import configure_debug_logging
from shopctl.core.runtime import ServiceContainer, service_factory
from shopctl.interfaces.runtime import ServiceRegistryProtocol

from .filesystem import DirectoryCode, DirectoryList
from .generation import CompilerPreparation, GenerationDirectoryAccess
from .metadata import ManifestFinder, ProductMetadata
from .state import AppState

LOGGER = logging.getLogger(__name__)


def _directory_overrides(settings: BootstrapSettings) -> dict[DirectoryCode, Path]:
    candidates = {
        DirectoryCode.ETC: settings.etc_dir,
        DirectoryCode.CACHE: settings.cache_dir,
        DirectoryCode.GENERATION: settings.generation_dir,
        DirectoryCode.METADATA: settings.metadata_dir,
    }
    return {code: path for code, path in candidates.items() if path is not None}


def _directory_list(container: ServiceRegistryProtocol) -> DirectoryList:
    settings: BootstrapSettings = container.resolve("settings")
    return DirectoryList(root=settings.root, overrides=_directory_overrides(settings))


def _deployment_config(container: ServiceRegistryProtocol) -> DeploymentConfig:
    directories: DirectoryList = container.resolve("directory_list")
    return DeploymentConfig(directories.get_path(DirectoryCode.ETC) / ENV_FILE_NAME)


def _app_state(container: ServiceRegistryProtocol) -> AppState:
    settings: BootstrapSettings = container.resolve("settings")
    return AppState(container.resolve("deployment_config"), mode_override=settings.mode)


def _manifest_finder(container: ServiceRegistryProtocol) -> ManifestFinder:
    settings: BootstrapSettings = container.resolve("settings")
    return ManifestFinder(settings.root)


def _product_metadata(container: ServiceRegistryProtocol) -> ProductMetadata:
    return ProductMetadata(container.resolve("manifest_finder"))


def _generation_access(container: ServiceRegistryProtocol) -> GenerationDirectoryAccess:
    directories: DirectoryList = container.resolve("directory_list")
    return GenerationDirectoryAccess(directories.get_path(DirectoryCode.GENERATION))


def _compiler_preparation(container: ServiceRegistryProtocol) -> CompilerPreparation:
    directories: DirectoryList = container.resolve("directory_list")
    return CompilerPreparation(directories.get_path(DirectoryCode.GENERATION))


class Bootstrap:
    """Hold the container and settings produced for one console process."""

    def __init__(self, settings: BootstrapSettings, container: ServiceContainer) -> None:
        self._settings = settings
        self._container = container

    @classmethod
    def create(cls, params: Mapping[str, str], *, root: Path | None = None) -> Bootstrap:
        """Validate ``params`` and register the bootstrap services.

        Args:
            params: Environment merged with ``--bootstrap`` overrides.
            root: Optional project root overriding ``SHOPCTL_ROOT``.

        Returns:
            Bootstrap: Bootstrap exposing the populated container.

        Raises:
            ConfigError: If ``params`` contains invalid values.
        """

        settings = BootstrapSettings.from_params(params)
        if root is not None:
            settings = settings.model_copy(update={"root": root})
        settings = settings.model_copy(update={"root": settings.root.expanduser().absolute()})
        configure_debug_logging(settings.debug)
        LOGGER.debug("bootstrapping root=%s mode=%s", settings.root, settings.mode)

        container = ServiceContainer()
        container.register_instance("settings", settings)
        container.register("directory_list", service_factory("directory_list", _directory_list))
        container.register("deployment_config", service_factory("deployment_config", _deployment_config))
        container.register("app_state", service_factory("app_state", _app_state))
        container.register("manifest_finder", service_factory("manifest_finder", _manifest_finder))
        container.register("product_metadata", service_factory("product_metadata", _product_metadata))
        container.register("generation_access", service_factory("generation_access", _generation_access))
        container.register("compiler_preparation", service_factory("compiler_preparation", _compiler_preparation))
        return cls(settings, container)

    @property
    def settings(self) -> BootstrapSettings:
        """Return the validated bootstrap settings."""

        return self._settings

    @property
    def container(self) -> ServiceContainer:
        """Return the container holding the bootstrap services."""

        return self._container

    def __repr__(self) -> str:
        return f"Bootstrap(root={str(self._settings.root)!r})"


__all__ = ["Bootstrap"]
