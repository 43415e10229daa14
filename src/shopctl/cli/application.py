# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console application wiring the aggregated commands onto Typer."""

# Typer reads the callback annotations at runtime, so they stay unquoted.

import logging
import sys
from collections.abc import Sequence
from typing import Annotated, Final

import typer
import typer.main
from rich import box
from rich.table import Table
from rich.text import Text

from shopctl.app.bootstrap import Bootstrap
from shopctl.app.filesystem import DirectoryCode, DirectoryList
from shopctl.app.generation import CompilerPreparation, GenerationDirectoryAccess
from shopctl.app.metadata import ProductMetadata
from shopctl.app.state import AppState
from shopctl.interfaces.commands import CommandDefinition
from shopctl.runtime.console import ConsoleOptions, get_console_manager

from .aggregator import AggregationResult, CommandAggregator, CommandSources, ProviderResolver
from .command import Command
from .core.shared import CLIError, logger_for, register_command
from .typer_ext import ConsoleGroup, ConsoleTyper, create_console_typer, group_by_namespace

RETURN_SUCCESS: Final[int] = 0
RETURN_FAILURE: Final[int] = 1
UNKNOWN: Final[str] = "UNKNOWN"
DEFAULT_PROG_NAME: Final[str] = "shopctl"

LOGGER = logging.getLogger(__name__)


class ConsoleApplication:
    """Command-line application for one installation.

    Construction checks the generation directory (outside production mode),
    prepares the compiler environment, resolves the version and gathers
    commands. A failure while gathering commands does not stop the console:
    it is reported and re-raised after the selected command has run.
    """

    def __init__(
        self,
        bootstrap: Bootstrap,
        *,
        name: str = UNKNOWN,
        version: str = UNKNOWN,
        sources: CommandSources | None = None,
        argv: Sequence[str] = (),
        resolver: ProviderResolver | None = None,
        prog_name: str = DEFAULT_PROG_NAME,
    ) -> None:
        """Bootstrap the console and gather its commands.

        Args:
            bootstrap: Bootstrap holding the service container.
            name: Application name shown by ``list`` and ``--version``.
            version: Application version; ``UNKNOWN`` reads it from product metadata.
            sources: Optional command sources; ``None`` yields built-in commands only.
            argv: Dispatcher arguments, used to prepare the compiler environment.
            resolver: Optional vendor provider resolver override.
            prog_name: Program name used in usage lines.
        """

        self._bootstrap = bootstrap
        self._logger = logger_for(bootstrap.container)
        self._prog_name = prog_name

        if not self._generation_directory_accessible():
            access: GenerationDirectoryAccess = bootstrap.container.resolve("generation_access")
            self._logger.fail(
                "Command line user does not have read and write permissions on the generation directory "
                f"({access.path}). Please address this issue before using the command line."
            )
            sys.exit(RETURN_SUCCESS)

        compiler_preparation: CompilerPreparation = bootstrap.container.resolve("compiler_preparation")
        compiler_preparation.handle_compiler_environment(argv)

        if version == UNKNOWN:
            metadata: ProductMetadata = bootstrap.container.resolve("product_metadata")
            version = metadata.get_version()
        self.name = name
        self.version = version

        aggregator_kwargs = {} if resolver is None else {"resolver": resolver}
        aggregator = CommandAggregator(bootstrap.container, sources or CommandSources(), **aggregator_kwargs)
        self._aggregation = aggregator.gather()
        self._logger.debug(
            f"commands gathered count={len(self._aggregation.commands)} failed={not self._aggregation.ok}"
        )

    @property
    def bootstrap(self) -> Bootstrap:
        """Return the bootstrap the console was built from."""

        return self._bootstrap

    @property
    def aggregation(self) -> AggregationResult:
        """Return the gathered commands and the fault recorded while gathering them, if any."""

        return self._aggregation

    @property
    def commands(self) -> tuple[CommandDefinition, ...]:
        """Return the dispatcher's built-in commands followed by the gathered ones."""

        return (*self.default_commands(), *self._aggregation.commands)

    def default_commands(self) -> tuple[Command, ...]:
        """Return the commands the dispatcher always provides."""

        return (
            Command(name="help", callback=self._help_command, help_text="Display help for a command."),
            Command(name="list", callback=self._list_command, help_text="List the available commands."),
        )

    def build_typer(self) -> ConsoleTyper:
        """Return a Typer application registering every command."""

        app = create_console_typer(help_text=f"{self.name} {self.version}")
        app.callback(invoke_without_command=True, result_callback=self._exit_with_result)(self._root_callback)
        for command in self.commands:
            register_command(app, command)
        return app

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the command selected by ``argv`` (defaults to ``sys.argv[1:]``)."""

        return self.do_run(sys.argv[1:] if argv is None else argv)

    def do_run(self, argv: Sequence[str]) -> int:
        """Dispatch ``argv`` and surface any fault recorded while gathering commands.

        Args:
            argv: Dispatcher arguments without the program name.

        Returns:
            int: Exit code of the selected command.

        Raises:
            Exception: The fault recorded during command aggregation, if any.
        """

        exit_code = self._dispatch(argv)
        fault = self._aggregation.fault
        if fault is not None:
            self._logger.fail(self._remediation_message())
            raise fault
        return exit_code

    def _dispatch(self, argv: Sequence[str]) -> int:
        command = typer.main.get_command(self.build_typer())
        try:
            command.main(args=list(argv), prog_name=self._prog_name)
        except SystemExit as exc:
            return _exit_status(exc.code)
        except CLIError as exc:
            # Commands contributed by other packages may still raise CLIError directly.
            self._logger.fail(str(exc))
            return exc.exit_code
        return RETURN_SUCCESS

    def _generation_directory_accessible(self) -> bool:
        state: AppState = self._bootstrap.container.resolve("app_state")
        if state.is_production():
            LOGGER.debug("production mode, generation directory check skipped")
            return True
        access: GenerationDirectoryAccess = self._bootstrap.container.resolve("generation_access")
        return access.check()

    def _remediation_message(self) -> str:
        directories: DirectoryList = self._bootstrap.container.resolve("directory_list")
        paths = ", ".join(
            str(directories.get_path(code))
            for code in (DirectoryCode.CACHE, DirectoryCode.GENERATION, DirectoryCode.METADATA)
        )
        return (
            "We're sorry, an error occurred. Try clearing the cache and code generation directories. "
            f"Currently they are: {paths}."
        )

    def _root_callback(
        self,
        ctx: typer.Context,
        show_version: Annotated[
            bool,
            typer.Option("--version", "-V", is_eager=True, help="Display the application version."),
        ] = False,
    ) -> None:
        if show_version:
            typer.echo(f"{self.name} {self.version}")
            raise typer.Exit(RETURN_SUCCESS)
        if ctx.invoked_subcommand is None:
            self._render_list()

    def _exit_with_result(self, result: object, **_params: object) -> None:
        """Turn a non-zero integer returned by a command into its exit status."""

        if isinstance(result, int) and not isinstance(result, bool) and result != RETURN_SUCCESS:
            raise typer.Exit(code=result)

    def _list_command(self) -> None:
        """List the available commands."""

        self._render_list()

    def _help_command(
        self,
        ctx: typer.Context,
        command_name: Annotated[
            str | None,
            typer.Argument(metavar="COMMAND", help="Command to describe."),
        ] = None,
    ) -> None:
        """Display help for a command."""

        root = ctx.find_root()
        if command_name is None:
            typer.echo(root.get_help())
            return
        group = root.command
        command = group.get_command(root, command_name) if isinstance(group, ConsoleGroup) else None
        if command is None:
            self._logger.fail(f'Command "{command_name}" is not defined.')
            raise typer.Exit(code=RETURN_FAILURE)
        with command.context_class(command, info_name=command_name, parent=root) as command_ctx:
            typer.echo(command.get_help(command_ctx))

    def _render_list(self) -> None:
        # A later registration under the same name replaces the earlier one in place.
        registered: dict[str, CommandDefinition] = {}
        for command in self.commands:
            registered[command.name] = command
        visible = {name: command for name, command in registered.items() if not command.hidden}
        table = Table(title=f"{self.name} {self.version}", box=box.SIMPLE, expand=False)
        table.add_column("Command", style="bold green", no_wrap=True)
        table.add_column("Description", overflow="fold")
        for namespace, names in group_by_namespace(visible):
            if namespace:
                table.add_row(f"[bold yellow]{namespace}[/]", "")
            for command_name in names:
                label = f" {command_name}" if namespace else command_name
                table.add_row(Text(label), Text(visible[command_name].description))
        options = ConsoleOptions.from_settings(self._bootstrap.settings)
        get_console_manager().for_options(options).print(table)


def _exit_status(code: object) -> int:
    if code is None:
        return RETURN_SUCCESS
    return code if isinstance(code, int) else RETURN_FAILURE


__all__ = [
    "ConsoleApplication",
    "DEFAULT_PROG_NAME",
    "RETURN_FAILURE",
    "RETURN_SUCCESS",
    "UNKNOWN",
]
