# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Setup-phase commands available before and after installation."""

# Typer reads the callback annotations at runtime, so they stay unquoted.

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, Any, Final

import typer

from shopctl.app.filesystem import DirectoryCode, DirectoryList
from shopctl.app.generation import COMPILE_COMMAND
from shopctl.cli.command import Command
from shopctl.cli.core.shared import CLIError, CLILogger, logger_for
from shopctl.config.deployment import DeploymentConfig, deep_merge, expand_key_path
from shopctl.config.models import AppMode, ConfigError
from shopctl.interfaces.runtime import ServiceRegistryProtocol

SERVICES_MANIFEST: Final[str] = "services.json"


def parse_assignments(assignments: list[str]) -> dict[str, Any]:
    """Return a nested mapping built from ``KEY=VALUE`` assignments.

    Keys may use ``/`` to address nested sections; values that parse as JSON
    (numbers, booleans, ``null``, arrays, objects) keep their JSON type.

    Raises:
        CLIError: If an assignment lacks ``=`` or has an invalid key.
    """

    merged: dict[str, Any] = {}
    for assignment in assignments:
        key, separator, raw_value = assignment.partition("=")
        if not separator or not key.strip():
            raise CLIError(f"expected KEY=VALUE, got '{assignment}'")
        try:
            value: Any = json.loads(raw_value)
        except json.JSONDecodeError:
            value = raw_value
        try:
            nested = expand_key_path(key.strip(), value)
        except ConfigError as exc:
            raise CLIError(str(exc)) from exc
        merged = deep_merge(merged, nested)
    return merged


def update_deployment_config(config: DeploymentConfig, values: dict[str, Any], *, logger: CLILogger) -> None:
    """Persist ``values`` into ``config`` and raise ``CLIError`` on failure."""

    try:
        config.update(values)
    except (ConfigError, OSError) as exc:
        logger.fail(f"Unable to update {config.path}: {exc}")
        raise CLIError(str(exc)) from exc


def write_services_manifest(container: ServiceRegistryProtocol, *, logger: CLILogger) -> Path:
    """Write the sorted service identifiers of ``container`` to the metadata directory.

    Args:
        container: Service registry whose keys are recorded.
        logger: CLI logger used to report failures.

    Returns:
        Path: Location of the written manifest.

    Raises:
        CLIError: If the generation or metadata directory cannot be written.
    """

    directories: DirectoryList = container.resolve("directory_list")
    generation_dir = directories.get_path(DirectoryCode.GENERATION)
    metadata_dir = directories.get_path(DirectoryCode.METADATA)
    manifest = metadata_dir / SERVICES_MANIFEST
    try:
        generation_dir.mkdir(parents=True, exist_ok=True)
        metadata_dir.mkdir(parents=True, exist_ok=True)
        payload = {"services": sorted(container.keys())}
        manifest.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.fail(f"Compilation failed: {exc}")
        raise CLIError(str(exc)) from exc
    return manifest


class SetupCommandList:
    """Commands that install, configure and compile an installation."""

    def __init__(self, container: ServiceRegistryProtocol) -> None:
        self._container = container
        self._logger = logger_for(container)

    def get_commands(self) -> tuple[Command, ...]:
        """Return the setup commands.

        Returns:
            tuple[Command, ...]: Install, uninstall, configuration and compiler
            commands in listing order.
        """

        return (
            Command(name="setup:install", callback=self.install),
            Command(name="setup:uninstall", callback=self.uninstall),
            Command(name="setup:config:set", callback=self.config_set),
            Command(name=COMPILE_COMMAND, callback=self.compile_services),
        )

    @property
    def _deployment_config(self) -> DeploymentConfig:
        return self._container.resolve("deployment_config")

    def install(
        self,
        mode: Annotated[AppMode, typer.Option("--mode", help="Initial deployment mode.")] = AppMode.DEFAULT,
        force: Annotated[bool, typer.Option("--force", help="Reinstall over an existing installation.")] = False,
    ) -> None:
        """Install the application by writing the deployment configuration."""

        config = self._deployment_config
        if config.is_available() and not force:
            self._logger.fail(f"Application already installed ({config.path}); use --force to reinstall.")
            raise typer.Exit(code=1)
        installed_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
        try:
            update_deployment_config(
                config,
                {"install": {"date": installed_at}, "mode": mode.value},
                logger=self._logger,
            )
        except CLIError as exc:
            raise typer.Exit(code=exc.exit_code) from exc
        self._logger.ok(f"Installed in {mode.value} mode ({config.path})")

    def uninstall(self) -> None:
        """Remove the deployment configuration."""

        config = self._deployment_config
        if config.delete():
            self._logger.ok(f"Removed {config.path}")
        else:
            self._logger.info("Application is not installed; nothing to remove.")

    def config_set(
        self,
        assignments: Annotated[
            list[str],
            typer.Argument(metavar="KEY=VALUE...", help="Values to store; use '/' for nested keys."),
        ],
    ) -> None:
        """Set values in the deployment configuration."""

        try:
            values = parse_assignments(assignments)
        except CLIError as exc:
            self._logger.fail(str(exc))
            raise typer.Exit(code=exc.exit_code) from exc
        try:
            update_deployment_config(self._deployment_config, values, logger=self._logger)
        except CLIError as exc:
            raise typer.Exit(code=exc.exit_code) from exc
        for assignment in assignments:
            self._logger.ok(f"Set {assignment.partition('=')[0].strip()}")

    def compile_services(self) -> None:
        """Generate the service manifest and prepare the generation directory."""

        try:
            manifest = write_services_manifest(self._container, logger=self._logger)
        except CLIError as exc:
            raise typer.Exit(code=exc.exit_code) from exc
        self._logger.ok(f"Compiled service manifest to {manifest}")


__all__ = [
    "SERVICES_MANIFEST",
    "SetupCommandList",
    "parse_assignments",
    "update_deployment_config",
    "write_services_manifest",
]
