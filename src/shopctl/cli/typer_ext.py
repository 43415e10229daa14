# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer classes for namespaced console commands.

Console commands are named ``namespace:action`` (``cache:clean``,
``setup:di:compile``). The group keeps them in the order they were
gathered, and command help lists positional arguments before options
sorted by their long name.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Final

import typer
from typer.core import TyperCommand, TyperGroup

if TYPE_CHECKING:
    import click
    from click.formatting import HelpFormatter

NAMESPACE_SEPARATOR: Final[str] = ":"


def command_namespace(name: str) -> str:
    """Return the namespace of ``name``; commands without one yield ``""``."""

    namespace, separator, _ = name.partition(NAMESPACE_SEPARATOR)
    return namespace if separator else ""


def group_by_namespace(names: Iterable[str]) -> list[tuple[str, list[str]]]:
    """Group ``names`` by namespace, un-namespaced commands first.

    Namespaces appear in the order of their first command; names keep their
    relative order inside a namespace.
    """

    groups: dict[str, list[str]] = {}
    for name in names:
        groups.setdefault(command_namespace(name), []).append(name)
    ungrouped = groups.pop("", [])
    return ([("", ungrouped)] if ungrouped else []) + list(groups.items())


def _option_sort_key(param: click.Parameter) -> str:
    names = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_names = [name for name in names if name.startswith("--")]
    chosen = long_names[0] if long_names else (names[0] if names else param.name or "")
    return chosen.lstrip("-").lower()


class ConsoleCommand(TyperCommand):
    """Command rendering arguments first and options alphabetically."""

    def format_options(self, ctx: click.Context, formatter: HelpFormatter) -> None:
        arguments: list[tuple[str, str]] = []
        options: list[tuple[str, tuple[str, str]]] = []
        for param in self.get_params(ctx):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if param.param_type_name == "argument":
                arguments.append(record)
            else:
                options.append((_option_sort_key(param), record))
        if arguments:
            with formatter.section("Arguments"):
                formatter.write_dl(arguments)
        if options:
            with formatter.section("Options"):
                formatter.write_dl([record for _, record in sorted(options, key=lambda item: item[0])])


class ConsoleGroup(TyperGroup):
    """Group listing commands in gathering order, sectioned by namespace."""

    command_class = ConsoleCommand

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return command names in the order they were registered."""

        return list(self.commands)

    def format_commands(self, ctx: click.Context, formatter: HelpFormatter) -> None:
        visible: list[tuple[str, click.Command]] = []
        for name in self.list_commands(ctx):
            command = self.get_command(ctx, name)
            if command is not None and not command.hidden:
                visible.append((name, command))
        if not visible:
            return
        commands = dict(visible)
        limit = formatter.width - 6 - max(len(name) for name, _ in visible)
        for namespace, names in group_by_namespace(commands):
            rows = [(name, commands[name].get_short_help_str(limit)) for name in names]
            with formatter.section(namespace or "Commands"):
                formatter.write_dl(rows)


class ConsoleTyper(typer.Typer):
    """Typer application building :class:`ConsoleGroup` and :class:`ConsoleCommand` objects."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("cls", ConsoleGroup)
        super().__init__(*args, **kwargs)

    def command(self, name: str | None = None, *, cls: type[TyperCommand] | None = None, **kwargs: Any) -> Any:
        return super().command(name, cls=cls or ConsoleCommand, **kwargs)


def create_console_typer(*, help_text: str) -> ConsoleTyper:
    """Return a :class:`ConsoleTyper` with completion and pretty exceptions disabled.

    Rich help rendering is switched off so help output goes through the
    namespace-aware formatters of :class:`ConsoleGroup` and :class:`ConsoleCommand`.
    """

    return ConsoleTyper(
        help=help_text,
        add_completion=False,
        pretty_exceptions_enable=False,
        rich_markup_mode=None,
    )


__all__ = [
    "ConsoleCommand",
    "ConsoleGroup",
    "ConsoleTyper",
    "NAMESPACE_SEPARATOR",
    "command_namespace",
    "create_console_typer",
    "group_by_namespace",
]
