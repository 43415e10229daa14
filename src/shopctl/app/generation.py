# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Generation directory access checks and compiler preparation."""

from __future__ import annotations

import logging
import os
import shutil
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import Final

COMPILE_COMMAND: Final[str] = "setup:di:compile"
_HELP_FLAGS: Final[frozenset[str]] = frozenset({"--help", "-h"})

LOGGER = logging.getLogger(__name__)


class GenerationDirectoryAccess:
    """Check that the console user can read and write the generation directory."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Return the generation directory being checked."""

        return self._path

    def check(self) -> bool:
        """Return ``True`` when the generation directory is usable.

        An existing directory must be readable, writable and searchable and
        must accept creating and deleting a probe file; a missing directory
        must be creatable.

        Returns:
            bool: ``True`` when read/write access is available.
        """

        if not self._path.exists():
            try:
                self._path.mkdir(parents=True)
            except OSError as exc:
                LOGGER.debug("generation directory cannot be created path=%s error=%s", self._path, exc)
                return False
            return True
        if not self._path.is_dir():
            LOGGER.debug("generation path is not a directory path=%s", self._path)
            return False
        if not os.access(self._path, os.R_OK | os.W_OK | os.X_OK):
            LOGGER.debug("generation directory permissions insufficient path=%s", self._path)
            return False
        probe = self._path / f"{uuid.uuid4().hex}.tmp"
        try:
            probe.write_bytes(b"")
            probe.unlink()
        except OSError as exc:
            LOGGER.debug("generation directory is not writable path=%s error=%s", self._path, exc)
            return False
        return True

    def __repr__(self) -> str:
        return f"GenerationDirectoryAccess(path={str(self._path)!r})"


class CompilerPreparation:
    """Clear stale generated code before the compiler command runs."""

    def __init__(self, generation_dir: Path) -> None:
        self._generation_dir = generation_dir

    def handle_compiler_environment(self, argv: Sequence[str]) -> bool:
        """Delete the generation directory when ``argv`` invokes the compiler.

        Args:
            argv: Dispatcher arguments (without the program name).

        Returns:
            bool: ``True`` when the directory was removed.
        """

        command = next((argument for argument in argv if not argument.startswith("-")), None)
        if command != COMPILE_COMMAND or _HELP_FLAGS.intersection(argv):
            return False
        if not self._generation_dir.exists():
            return False
        shutil.rmtree(self._generation_dir)
        LOGGER.debug("cleared generation directory path=%s", self._generation_dir)
        return True

    def __repr__(self) -> str:
        return f"CompilerPreparation(generation_dir={str(self._generation_dir)!r})"


__all__ = ["COMPILE_COMMAND", "CompilerPreparation", "GenerationDirectoryAccess"]
