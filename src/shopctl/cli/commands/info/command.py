# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Product information commands."""

from __future__ import annotations

import typer

from shopctl.app.metadata import ProductMetadata
from shopctl.cli.command import Command
from shopctl.interfaces.runtime import ServiceRegistryProtocol


class InfoCommands:
    """Report product metadata."""

    def __init__(self, container: ServiceRegistryProtocol) -> None:
        self._container = container

    def get_commands(self) -> tuple[Command, ...]:
        """Return the ``info:version`` command."""

        return (Command(name="info:version", callback=self.version),)

    def version(self) -> None:
        """Display the product name and version."""

        metadata: ProductMetadata = self._container.resolve("product_metadata")
        typer.echo(f"{metadata.get_name()} {metadata.get_version()}")
