# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Built-in command providers."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from shopctl.interfaces.commands import CommandDefinition, CommandProviderFactory
from shopctl.interfaces.runtime import ServiceRegistryProtocol
from shopctl.plugins import load_module_command_providers

from .cache import CacheCommands
from .deploy import DeployModeCommands
from .info import InfoCommands
from .setup import SetupCommandList

__all__ = [
    "BUILTIN_MODULE_PROVIDERS",
    "CacheCommands",
    "DeployModeCommands",
    "InfoCommands",
    "ModuleCommandList",
    "SetupCommandList",
]

BUILTIN_MODULE_PROVIDERS: tuple[CommandProviderFactory, ...] = (
    DeployModeCommands,
    CacheCommands,
    InfoCommands,
)


class ModuleCommandList:
    """Commands contributed by the installed application's modules.

    Built-in modules come first, followed by providers registered under the
    ``shopctl.module_commands`` entry-point group.
    """

    def __init__(
        self,
        container: ServiceRegistryProtocol,
        *,
        plugins: Callable[[], Sequence[CommandProviderFactory]] = load_module_command_providers,
    ) -> None:
        self._container = container
        self._plugins = plugins

    def get_commands(self) -> tuple[CommandDefinition, ...]:
        """Return commands of every module provider in registration order."""

        commands: list[CommandDefinition] = []
        for provider_factory in (*BUILTIN_MODULE_PROVIDERS, *self._plugins()):
            commands.extend(provider_factory(self._container).get_commands())
        return tuple(commands)
