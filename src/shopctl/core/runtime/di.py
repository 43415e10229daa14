# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Service container holding the bootstrap collaborators of one console process.

Services are registered as factories that receive the container, so a
factory can resolve its own dependencies. Factories run lazily on first
resolution; singleton results are kept for the lifetime of the container.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from shopctl.interfaces.runtime import Service, ServiceFactory, ServiceRegistryProtocol

LOGGER = logging.getLogger(__name__)


class ServiceResolutionError(KeyError):
    """Raised when a requested service has not been registered."""


class CircularDependencyError(ServiceResolutionError):
    """Raised when resolving a service requires the service itself."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        super().__init__(" -> ".join(chain))
        self.chain = chain


@dataclass(frozen=True, slots=True)
class _Binding:
    factory: ServiceFactory
    singleton: bool


class ServiceContainer(ServiceRegistryProtocol):
    """Registry of named service factories."""

    def __init__(self) -> None:
        self._bindings: dict[str, _Binding] = {}
        self._instances: dict[str, Service] = {}
        self._resolving: list[str] = []

    def register(
        self,
        key: str,
        factory: ServiceFactory,
        *,
        singleton: bool = True,
        replace: bool = False,
    ) -> None:
        """Bind ``factory`` to ``key``.

        Args:
            key: Service identifier, e.g. ``deployment_config``.
            factory: Callable building the service from this container.
            singleton: Keep the first instance and return it on later lookups.
            replace: Allow overriding an existing binding; a cached instance is dropped.

        Raises:
            ValueError: If ``key`` is already bound and ``replace`` is ``False``.
        """

        if key in self._bindings and not replace:
            raise ValueError(f"service '{key}' already registered")
        self._bindings[key] = _Binding(factory=factory, singleton=singleton)
        self._instances.pop(key, None)

    def register_instance(self, key: str, instance: Service, *, replace: bool = False) -> None:
        """Bind the ready-made ``instance`` to ``key``."""

        self.register(key, service_factory(key, lambda _: instance), replace=replace)

    def resolve(self, key: str) -> Service:
        """Return the service bound to ``key``.

        Raises:
            ServiceResolutionError: If ``key`` is not bound.
            CircularDependencyError: If building ``key`` requires ``key`` again.
        """

        if key in self._instances:
            return self._instances[key]
        binding = self._bindings.get(key)
        if binding is None:
            raise ServiceResolutionError(key)
        if key in self._resolving:
            raise CircularDependencyError((*self._resolving[self._resolving.index(key) :], key))
        self._resolving.append(key)
        try:
            service = binding.factory(self)
        finally:
            self._resolving.pop()
        if binding.singleton:
            self._instances[key] = service
        LOGGER.debug("service resolved key=%s singleton=%s", key, binding.singleton)
        return service

    def keys(self) -> tuple[str, ...]:
        """Return the bound keys in registration order."""

        return tuple(self._bindings)

    def __contains__(self, key: str) -> bool:
        return key in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        return f"ServiceContainer(keys=[{', '.join(sorted(self._bindings))}])"


@dataclass(frozen=True, slots=True)
class _NamedFactory(ServiceFactory):
    name: str
    builder: Callable[[ServiceRegistryProtocol], Service]

    def __call__(self, container: ServiceRegistryProtocol) -> Service:
        return self.builder(container)

    def __repr__(self) -> str:
        return f"{self.name}_factory"


def service_factory(name: str, builder: Callable[[ServiceRegistryProtocol], Service]) -> ServiceFactory:
    """Wrap ``builder`` as a :class:`ServiceFactory` whose repr names the service."""

    return _NamedFactory(name, builder)


__all__ = [
    "CircularDependencyError",
    "ServiceContainer",
    "ServiceResolutionError",
    "service_factory",
]
