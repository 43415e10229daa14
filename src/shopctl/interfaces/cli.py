# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol for applications that accept command registrations."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CommandRegistrar(Protocol):
    """Subset of :class:`typer.Typer` used to register console commands."""

    def command(self, name: str | None = None, **kwargs: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Return a decorator registering a command named ``name``."""
        ...


__all__ = ["CommandRegistrar"]
