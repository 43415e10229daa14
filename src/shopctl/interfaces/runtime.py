# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interfaces for the bootstrap service container.

Command providers receive an object implementing
:class:`ServiceRegistryProtocol` and look up collaborators such as
``deployment_config`` or ``directory_list`` by name.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeAlias, runtime_checkable

Service: TypeAlias = Any
"""Any object bound in the container (stores, probes, factories)."""


@runtime_checkable
class ServiceFactory(Protocol):
    """Build a service, resolving its dependencies from ``container``."""

    def __call__(self, container: ServiceRegistryProtocol) -> Service: ...


@runtime_checkable
class ServiceRegistryProtocol(Protocol):
    """Named service lookup shared by the bootstrap and command providers."""

    def register(
        self,
        key: str,
        factory: ServiceFactory,
        *,
        singleton: bool = True,
        replace: bool = False,
    ) -> None:
        """Bind ``factory`` to ``key``; ``singleton`` services are built once."""
        ...

    def resolve(self, key: str) -> Service:
        """Return the service bound to ``key``."""
        ...

    def keys(self) -> tuple[str, ...]:
        """Return the bound keys in registration order."""
        ...

    def __contains__(self, key: str) -> bool: ...

    def __len__(self) -> int: ...


__all__ = [
    "Service",
    "ServiceFactory",
    "ServiceRegistryProtocol",
]
