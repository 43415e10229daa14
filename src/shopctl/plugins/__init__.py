# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry-point discovery and resolution of command providers.

Third-party packages contribute commands without modifying the console by
declaring entry points:

* ``shopctl.vendor_commands`` entries name vendor provider classes; only the
  identifiers are read at startup and the providers are resolved later by the
  command aggregator.
* ``shopctl.module_commands`` entries are loaded eagerly by the module command
  list once the application is installed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import import_module, metadata
from importlib.metadata import EntryPoint, EntryPoints
from typing import TypeAlias, TypeVar, cast

from shopctl.interfaces.commands import CommandProviderFactory

VENDOR_COMMANDS_GROUP = "shopctl.vendor_commands"
MODULE_COMMANDS_GROUP = "shopctl.module_commands"

_EntryPointSource: TypeAlias = EntryPoints | Mapping[str, Sequence[EntryPoint]]
_FactoryT = TypeVar("_FactoryT")

LOGGER = logging.getLogger(__name__)


def _select_entry_points(entries: _EntryPointSource, group: str) -> Iterable[EntryPoint]:
    """Return entry points exposed under ``group`` from ``entries``.

    Args:
        entries: Raw entry-point container returned by :func:`metadata.entry_points`.
        group: Name of the entry-point group to extract.

    Returns:
        Iterable[EntryPoint]: Entry points belonging to ``group``. When the
        container lacks the requested group an empty iterable is returned.
    """

    if hasattr(entries, "select"):
        return entries.select(group=group)
    if isinstance(entries, Mapping):
        return entries.get(group, ())
    return ()


def _group_entries(group: str) -> Iterable[EntryPoint]:
    return _select_entry_points(cast(_EntryPointSource, metadata.entry_points()), group)


def _discover_entry_points(group: str, loader: Callable[[EntryPoint], _FactoryT]) -> tuple[_FactoryT, ...]:
    """Return objects loaded from the entry-point ``group``.

    Entries that fail to import are skipped and logged at debug level.
    """

    loaded: list[_FactoryT] = []
    for entry in _group_entries(group):
        try:
            plugin = loader(entry)
        except (AttributeError, ImportError, ValueError, RuntimeError) as exc:
            LOGGER.debug("skipping entry point group=%s entry=%r error=%s", group, entry, exc)
            continue
        loaded.append(plugin)
    return tuple(loaded)


def discover_vendor_provider_ids() -> tuple[str, ...]:
    """Return vendor provider identifiers declared through entry points.

    Returns:
        tuple[str, ...]: ``module:attribute`` identifiers in discovery order,
        without duplicates.
    """

    identifiers: list[str] = []
    for entry in _group_entries(VENDOR_COMMANDS_GROUP):
        value = getattr(entry, "value", None)
        if isinstance(value, str) and value and value not in identifiers:
            identifiers.append(value)
    return tuple(identifiers)


def load_module_command_providers() -> tuple[CommandProviderFactory, ...]:
    """Return module command provider factories declared through entry points."""

    return _discover_entry_points(
        MODULE_COMMANDS_GROUP,
        loader=lambda entry: cast(CommandProviderFactory, entry.load()),
    )


def resolve_provider(identifier: str) -> CommandProviderFactory | None:
    """Return the provider named by ``identifier`` or ``None`` when unresolvable.

    Both ``package.module:Attribute`` and ``package.module.Attribute`` forms are
    accepted; the colon form may use dotted attribute paths. Relative module
    names are not resolvable.

    Args:
        identifier: Provider identifier from configuration or entry points.

    Returns:
        CommandProviderFactory | None: Callable provider factory when importable.
    """

    module_name, separator, attribute_path = identifier.strip().partition(":")
    if not separator:
        module_name, _, attribute_path = module_name.rpartition(".")
    if not module_name or module_name.startswith(".") or not attribute_path:
        LOGGER.debug("malformed provider identifier=%r", identifier)
        return None
    try:
        target: object = import_module(module_name)
        for attribute in attribute_path.split("."):
            target = getattr(target, attribute)
    except (ImportError, AttributeError, ValueError) as exc:
        LOGGER.debug("provider not resolvable identifier=%r error=%s", identifier, exc)
        return None
    if not callable(target):
        LOGGER.debug("provider is not callable identifier=%r", identifier)
        return None
    return cast(CommandProviderFactory, target)


__all__ = [
    "MODULE_COMMANDS_GROUP",
    "VENDOR_COMMANDS_GROUP",
    "discover_vendor_provider_ids",
    "load_module_command_providers",
    "resolve_provider",
]
