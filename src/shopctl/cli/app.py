# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI entry point wiring the bootstrap, command sources and console application."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from typing import Final

from shopctl.app.bootstrap import Bootstrap
from shopctl.app.shell import BOOTSTRAP_PARAMETER, ComplexParameter
from shopctl.config.models import BootstrapSettings, ConfigError
from shopctl.core.logging import fail
from shopctl.plugins import discover_vendor_provider_ids

from .aggregator import CommandSources
from .application import RETURN_FAILURE, UNKNOWN, ConsoleApplication
from .commands import ModuleCommandList, SetupCommandList

APP_NAME: Final[str] = "shopctl"


def default_sources(settings: BootstrapSettings) -> CommandSources:
    """Return the command sources of a regular console process.

    Vendor providers declared through entry points come first, followed by
    those named in ``SHOPCTL_VENDOR_PROVIDERS``.

    Args:
        settings: Validated bootstrap settings.

    Returns:
        CommandSources: Sources handed to the command aggregator.
    """

    vendor_providers = list(discover_vendor_provider_ids())
    for identifier in settings.vendor_providers:
        if identifier not in vendor_providers:
            vendor_providers.append(identifier)
    return CommandSources(
        setup_catalog=SetupCommandList if settings.setup_commands else None,
        module_commands=ModuleCommandList,
        vendor_providers=tuple(vendor_providers),
    )


def create_application(
    argv: Sequence[str],
    environ: Mapping[str, str] | None = None,
    *,
    name: str = APP_NAME,
    version: str = UNKNOWN,
    sources: CommandSources | None = None,
) -> ConsoleApplication:
    """Bootstrap and return the console application for ``argv``.

    Args:
        argv: Raw arguments, possibly including ``--bootstrap=...``.
        environ: Environment used as bootstrap parameters; defaults to ``os.environ``.
        name: Application name.
        version: Application version; ``UNKNOWN`` reads it from the project manifest.
        sources: Optional command sources overriding :func:`default_sources`.

    Returns:
        ConsoleApplication: Application ready to dispatch.

    Raises:
        ConfigError: If the bootstrap parameters are invalid.
    """

    bootstrap_param = ComplexParameter(BOOTSTRAP_PARAMETER)
    params = bootstrap_param.merge_from_argv(argv, os.environ if environ is None else environ)
    bootstrap = Bootstrap.create(params)
    return ConsoleApplication(
        bootstrap,
        name=name,
        version=version,
        sources=sources or default_sources(bootstrap.settings),
        argv=bootstrap_param.strip_from_argv(argv),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the console for ``argv`` (defaults to ``sys.argv[1:]``) and return its exit code."""

    raw_argv = list(sys.argv[1:] if argv is None else argv)
    try:
        application = create_application(raw_argv)
    except ConfigError as exc:
        fail(str(exc), use_emoji=False)
        return RETURN_FAILURE
    return application.run(ComplexParameter(BOOTSTRAP_PARAMETER).strip_from_argv(raw_argv))


__all__ = ["APP_NAME", "create_application", "default_sources", "main"]
