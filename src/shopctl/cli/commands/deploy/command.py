# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Deployment mode commands."""

# Typer reads the callback annotations at runtime, so they stay unquoted.

from typing import Annotated

import typer

from shopctl.app.state import AppState
from shopctl.cli.command import Command
from shopctl.cli.commands.setup import update_deployment_config
from shopctl.cli.core.shared import CLIError, logger_for
from shopctl.config.deployment import DeploymentConfig
from shopctl.config.models import AppMode
from shopctl.interfaces.runtime import ServiceRegistryProtocol


class DeployModeCommands:
    """Show and change the deployment mode of an installed application."""

    def __init__(self, container: ServiceRegistryProtocol) -> None:
        self._container = container
        self._logger = logger_for(container)

    def get_commands(self) -> tuple[Command, ...]:
        """Return the commands showing and switching the application mode."""

        return (
            Command(name="deploy:mode:show", callback=self.show),
            Command(name="deploy:mode:set", callback=self.set_mode),
        )

    def show(self) -> None:
        """Display the current deployment mode."""

        state: AppState = self._container.resolve("app_state")
        typer.echo(f"Current application mode: {state.get_mode().value}.")

    def set_mode(
        self,
        mode: Annotated[AppMode, typer.Argument(help="Mode to store in the deployment configuration.")],
    ) -> None:
        """Store a new deployment mode."""

        config: DeploymentConfig = self._container.resolve("deployment_config")
        try:
            update_deployment_config(config, {"mode": mode.value}, logger=self._logger)
        except CLIError as exc:
            raise typer.Exit(code=exc.exit_code) from exc
        self._logger.ok(f"Enabled {mode.value} mode.")
        state: AppState = self._container.resolve("app_state")
        if state.get_mode() is not mode:
            self._logger.warn(f"SHOPCTL_MODE overrides the stored mode; running in {state.get_mode().value} mode.")
