# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Cache maintenance commands."""

from __future__ import annotations

import shutil

import typer

from shopctl.app.filesystem import DirectoryCode, DirectoryList
from shopctl.cli.command import Command
from shopctl.cli.core.shared import logger_for
from shopctl.interfaces.runtime import ServiceRegistryProtocol


class CacheCommands:
    """Commands operating on the cache directory."""

    def __init__(self, container: ServiceRegistryProtocol) -> None:
        self._container = container
        self._logger = logger_for(container)

    def get_commands(self) -> tuple[Command, ...]:
        """Return the cache commands.

        Returns:
            tuple[Command, ...]: The ``cache:clean`` command.
        """

        return (Command(name="cache:clean", callback=self.clean),)

    def clean(self) -> None:
        """Remove everything below the cache directory."""

        directories: DirectoryList = self._container.resolve("directory_list")
        cache_dir = directories.get_path(DirectoryCode.CACHE)
        if not cache_dir.is_dir():
            self._logger.warn(f"Cache directory {cache_dir} does not exist.")
            return
        removed = 0
        try:
            for entry in cache_dir.iterdir():
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
                removed += 1
        except OSError as exc:
            self._logger.fail(f"Unable to clean {cache_dir}: {exc}")
            raise typer.Exit(code=1) from exc
        self._logger.ok(f"Removed {removed} entries from {cache_dir}")
