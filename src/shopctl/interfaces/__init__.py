# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols shared between the bootstrap, the dispatcher and command providers.

Import the specific modules (``shopctl.interfaces.commands``,
``shopctl.interfaces.runtime``) directly; this package exports nothing.
"""

__all__: tuple[str, ...] = ()
