# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collect console commands from setup, module and vendor providers.

Sources are consulted in a fixed order:

1. the setup catalog, when one is supplied;
2. the module command list, once the deployment configuration reports an
   installed application;
3. every resolvable vendor provider from the explicit identifier list.

The first error stops aggregation. Commands gathered by earlier steps are kept
and the error is returned alongside them instead of being raised, so the
console can still start and report the failure after the chosen command ran.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from shopctl.config.deployment import DeploymentConfig
from shopctl.interfaces.commands import CommandDefinition, CommandProviderFactory
from shopctl.interfaces.runtime import ServiceRegistryProtocol
from shopctl.plugins import resolve_provider

LOGGER = logging.getLogger(__name__)

ProviderResolver = Callable[[str], CommandProviderFactory | None]


@dataclass(frozen=True, slots=True)
class CommandSources:
    """Optional command sources known at startup.

    Attributes:
        setup_catalog: Factory for the setup-phase catalog, or ``None`` when absent.
        module_commands: Factory for the installed-module command list, or ``None``.
        vendor_providers: Identifiers of vendor providers, in registration order.
    """

    setup_catalog: CommandProviderFactory | None = None
    module_commands: CommandProviderFactory | None = None
    vendor_providers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Commands gathered by :meth:`CommandAggregator.gather` and the fault that stopped it, if any."""

    commands: tuple[CommandDefinition, ...] = ()
    fault: Exception | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when every step contributed without raising."""

        return self.fault is None


class CommandAggregator:
    """Gather commands from :class:`CommandSources` against a bootstrap container."""

    def __init__(
        self,
        container: ServiceRegistryProtocol,
        sources: CommandSources,
        *,
        resolver: ProviderResolver = resolve_provider,
    ) -> None:
        self._container = container
        self._sources = sources
        self._resolver = resolver

    def gather(self) -> AggregationResult:
        """Return the combined commands; never raises.

        Returns:
            AggregationResult: Commands in source order plus the first error raised
            by any source. A failing step contributes none of its commands.
        """

        commands: list[CommandDefinition] = []
        try:
            setup_catalog = self._sources.setup_catalog
            if setup_catalog is not None:
                commands.extend(setup_catalog(self._container).get_commands())

            module_commands = self._sources.module_commands
            if module_commands is not None and self._is_installed():
                commands.extend(module_commands(self._container).get_commands())

            commands.extend(self._vendor_commands())
        except Exception as exc:  # pylint: disable=broad-exception-caught -- any provider failure is deferred
            LOGGER.debug("command aggregation stopped error=%r collected=%d", exc, len(commands))
            return AggregationResult(commands=tuple(commands), fault=exc)
        LOGGER.debug("command aggregation complete collected=%d", len(commands))
        return AggregationResult(commands=tuple(commands))

    def _is_installed(self) -> bool:
        deployment_config: DeploymentConfig = self._container.resolve("deployment_config")
        return deployment_config.is_available()

    def _vendor_commands(self) -> Sequence[CommandDefinition]:
        commands: list[CommandDefinition] = []
        for identifier in self._sources.vendor_providers:
            provider_factory = self._resolver(identifier)
            if provider_factory is None:
                LOGGER.debug("vendor provider skipped identifier=%r", identifier)
                continue
            commands.extend(provider_factory(self._container).get_commands())
        return commands


__all__ = ["AggregationResult", "CommandAggregator", "CommandSources", "ProviderResolver"]
