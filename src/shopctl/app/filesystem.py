# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Well-known directories of an installation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final


class DirectoryCode(str, Enum):
    """Identifiers for the directories the console reads or writes."""

    ETC = "etc"
    CACHE = "cache"
    GENERATION = "generation"
    METADATA = "metadata"


DEFAULT_DIRECTORIES: Final[Mapping[DirectoryCode, Path]] = {
    DirectoryCode.ETC: Path("etc"),
    DirectoryCode.CACHE: Path("var") / "cache",
    DirectoryCode.GENERATION: Path("generated") / "code",
    DirectoryCode.METADATA: Path("generated") / "metadata",
}


@dataclass(frozen=True, slots=True)
class DirectoryList:
    """Resolve directory codes to absolute paths beneath ``root``.

    Relative overrides are resolved against ``root``; absolute ones are used verbatim.
    """

    root: Path
    overrides: Mapping[DirectoryCode, Path] = field(default_factory=dict)

    def get_path(self, code: DirectoryCode) -> Path:
        """Return the absolute path registered for ``code``."""

        relative = self.overrides.get(code, DEFAULT_DIRECTORIES[code])
        if relative.is_absolute():
            return relative
        return self.root / relative


__all__ = ["DEFAULT_DIRECTORIES", "DirectoryCode", "DirectoryList"]
