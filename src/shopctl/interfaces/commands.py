# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols implemented by command providers contributing to the console."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Sequence
from typing import Protocol, TypeAlias, runtime_checkable

from .runtime import ServiceRegistryProtocol

CommandResult: TypeAlias = int | None
CommandCallable: TypeAlias = Callable[..., CommandResult]


@runtime_checkable
class CommandDefinition(Protocol):
    """Describe a named command registered with the dispatcher."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the command name typed on the command line."""

    @property
    @abstractmethod
    def callback(self) -> CommandCallable:
        """Return the Typer callback executed when the command runs."""

    @property
    @abstractmethod
    def help_text(self) -> str | None:
        """Return the help text; ``None`` falls back to the callback docstring."""

    @property
    @abstractmethod
    def hidden(self) -> bool:
        """Return whether the command is omitted from listings."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Return the one-line summary shown by ``list``."""


@runtime_checkable
class CommandProvider(Protocol):
    """Object exposing a list of commands to register with the console."""

    @abstractmethod
    def get_commands(self) -> Sequence[CommandDefinition]:
        """Return the commands contributed by the provider.

        Returns:
            Sequence[CommandDefinition]: Commands in the order they should be listed.
        """


CommandProviderFactory: TypeAlias = Callable[[ServiceRegistryProtocol], CommandProvider]
"""Provider classes are constructed with the bootstrap container."""


__all__ = [
    "CommandCallable",
    "CommandDefinition",
    "CommandProvider",
    "CommandProviderFactory",
    "CommandResult",
]
