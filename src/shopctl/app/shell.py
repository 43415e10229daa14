# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse query-string style ``--name=key=value&...`` command-line parameters."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Final
from urllib.parse import parse_qsl

BOOTSTRAP_PARAMETER: Final[str] = "bootstrap"


class ComplexParameter:
    """A single CLI option whose value packs several key/value pairs.

    ``--bootstrap=SHOPCTL_MODE=developer&SHOPCTL_DEBUG=1`` yields
    ``{"SHOPCTL_MODE": "developer", "SHOPCTL_DEBUG": "1"}``. Only the first
    matching argument is honoured.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._pattern = re.compile(rf"^--{re.escape(name)}=(.+)$")

    @property
    def name(self) -> str:
        """Return the option name without leading dashes."""

        return self._name

    def get_from_string(self, value: str) -> dict[str, str]:
        """Return the pairs packed into ``value`` or an empty mapping when it does not match."""

        match = self._pattern.match(value)
        if match is None:
            return {}
        return dict(parse_qsl(match.group(1), keep_blank_values=True))

    def get_from_argv(self, argv: Iterable[str]) -> dict[str, str]:
        """Return the pairs from the first matching argument in ``argv``."""

        for argument in argv:
            parsed = self.get_from_string(argument)
            if parsed:
                return parsed
        return {}

    def merge_from_argv(self, argv: Iterable[str], into: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return ``into`` overlaid with the pairs parsed from ``argv``.

        Args:
            argv: Command-line arguments to scan.
            into: Base values, usually the process environment.

        Returns:
            dict[str, str]: New mapping where parsed pairs win over ``into``.
        """

        merged = dict(into or {})
        merged.update(self.get_from_argv(argv))
        return merged

    def strip_from_argv(self, argv: Iterable[str]) -> list[str]:
        """Return ``argv`` without any occurrence of this option."""

        return [argument for argument in argv if self._pattern.match(argument) is None]


__all__ = ["BOOTSTRAP_PARAMETER", "ComplexParameter"]
