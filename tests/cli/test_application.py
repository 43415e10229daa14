# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the console application lifecycle."""

from __future__ import annotations

from pathlib import Path

import pytest

from shopctl.cli import Command, CommandSources, ConsoleApplication
from shopctl.cli.application import RETURN_FAILURE, RETURN_SUCCESS
from shopctl.cli.commands import ModuleCommandList
from shopctl.interfaces.runtime import ServiceRegistryProtocol


class _GreetingCommands:
    def __init__(self, container: ServiceRegistryProtocol) -> None:
        self.container = container

    def get_commands(self) -> tuple[Command, ...]:
        return (Command(name="greet", callback=self.greet, help_text="Say hello."),)

    def greet(self) -> None:
        print("hello from greet")


class _BrokenCommands:
    def __init__(self, container: ServiceRegistryProtocol) -> None:
        self.container = container

    def get_commands(self) -> tuple[Command, ...]:
        raise RuntimeError("vendor catalog exploded")


def _block_generation_dir(project_root: Path) -> Path:
    blocker = project_root / "generated" / "code"
    blocker.parent.mkdir(parents=True)
    blocker.write_text("", encoding="utf-8")
    return blocker


def test_built_in_commands_only(make_bootstrap) -> None:
    application = ConsoleApplication(make_bootstrap(), name="shopctl")
    assert [command.name for command in application.commands] == ["help", "list"]
    assert application.aggregation.ok


def test_version_is_read_from_manifest(make_bootstrap) -> None:
    application = ConsoleApplication(make_bootstrap(), name="demo")
    assert application.version == "2.4.1"
    assert ConsoleApplication(make_bootstrap(), version="9.9").version == "9.9"


def test_precheck_failure_exits_with_success_status(make_bootstrap, project_root: Path, capsys) -> None:
    _block_generation_dir(project_root)
    sources = CommandSources(setup_catalog=_GreetingCommands)
    with pytest.raises(SystemExit) as excinfo:
        ConsoleApplication(make_bootstrap(), sources=sources)
    assert excinfo.value.code == RETURN_SUCCESS
    output = capsys.readouterr().out
    assert "does not have read and write permissions" in output
    assert "hello from greet" not in output


def test_precheck_is_skipped_in_production(make_bootstrap, project_root: Path, capsys) -> None:
    _block_generation_dir(project_root)
    application = ConsoleApplication(
        make_bootstrap(SHOPCTL_MODE="production"),
        sources=CommandSources(setup_catalog=_GreetingCommands),
    )
    assert application.run(["greet"]) == RETURN_SUCCESS
    assert "hello from greet" in capsys.readouterr().out


def test_precheck_uses_stored_production_mode(make_bootstrap, project_root: Path, install) -> None:
    install(mode="production")
    _block_generation_dir(project_root)
    application = ConsoleApplication(make_bootstrap())
    assert application.aggregation.ok


def test_fault_is_raised_after_command_runs(make_bootstrap, project_root: Path, capsys) -> None:
    sources = CommandSources(setup_catalog=_GreetingCommands, vendor_providers=("acme:Broken",))
    application = ConsoleApplication(
        make_bootstrap(),
        sources=sources,
        resolver={"acme:Broken": _BrokenCommands}.get,
    )
    assert [command.name for command in application.commands] == ["help", "list", "greet"]

    with pytest.raises(RuntimeError, match="vendor catalog exploded"):
        application.run(["greet"])
    output = capsys.readouterr().out
    assert "hello from greet" in output
    assert "Try clearing the cache and code generation directories" in output
    assert str(project_root / "var" / "cache") in output


def test_list_renders_commands(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(
        make_bootstrap(),
        name="shopctl",
        sources=CommandSources(setup_catalog=_GreetingCommands),
    )
    assert application.run(["list"]) == RETURN_SUCCESS
    output = capsys.readouterr().out
    assert "shopctl 2.4.1" in output
    assert "greet" in output
    assert "Say hello." in output


def test_list_shows_built_in_commands(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap())
    assert application.run(["list"]) == RETURN_SUCCESS
    output = capsys.readouterr().out
    assert "help" in output
    assert "Display help for a command." in output
    assert "List the available commands." in output


def test_list_uses_first_docstring_line(make_bootstrap, capsys) -> None:
    class _Documented:
        def __init__(self, container: ServiceRegistryProtocol) -> None:
            self.container = container

        def get_commands(self) -> tuple[Command, ...]:
            return (
                Command(name="report:build", callback=self.build),
                Command(name="report:secret", callback=self.build, hidden=True),
            )

        def build(self) -> None:
            """Build the sales report.

            Reads every order placed since the last run.
            """

    application = ConsoleApplication(make_bootstrap(), sources=CommandSources(setup_catalog=_Documented))
    assert application.run(["list"]) == RETURN_SUCCESS
    output = capsys.readouterr().out
    assert "Build the sales report." in output
    assert "Reads every order" not in output
    assert "report:secret" not in output


def test_no_arguments_lists_commands(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap(), sources=CommandSources(setup_catalog=_GreetingCommands))
    assert application.run([]) == RETURN_SUCCESS
    assert "greet" in capsys.readouterr().out


def test_version_option(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap(), name="shopctl")
    assert application.run(["--version"]) == RETURN_SUCCESS
    assert capsys.readouterr().out.strip() == "shopctl 2.4.1"


def test_help_for_command(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap(), sources=CommandSources(setup_catalog=_GreetingCommands))
    assert application.run(["help", "greet"]) == RETURN_SUCCESS
    assert "Say hello." in capsys.readouterr().out


def test_help_for_unknown_command_fails(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap())
    assert application.run(["help", "nope"]) == RETURN_FAILURE
    assert 'Command "nope" is not defined.' in capsys.readouterr().out


def test_unknown_command_is_a_usage_error(make_bootstrap) -> None:
    application = ConsoleApplication(make_bootstrap())
    assert application.run(["nope"]) == 2


def test_invalid_option_is_a_usage_error(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap())
    assert application.run(["list", "--no-such-option"]) == 2
    assert "--no-such-option" in capsys.readouterr().err


def test_help_without_command_shows_usage(make_bootstrap, capsys) -> None:
    application = ConsoleApplication(make_bootstrap(), sources=CommandSources(setup_catalog=_GreetingCommands))
    assert application.run(["help"]) == RETURN_SUCCESS
    output = capsys.readouterr().out
    assert "Usage:" in output
    assert "greet" in output


def test_command_exit_code_is_returned(make_bootstrap) -> None:
    class _Failing:
        def __init__(self, container: ServiceRegistryProtocol) -> None:
            self.container = container

        def get_commands(self) -> tuple[Command, ...]:
            return (Command(name="fail", callback=self.fail),)

        def fail(self) -> int:
            return 3

    application = ConsoleApplication(make_bootstrap(), sources=CommandSources(setup_catalog=_Failing))
    assert application.run(["fail"]) == 3


def test_list_groups_commands_by_namespace(make_bootstrap, install, capsys) -> None:
    install()
    application = ConsoleApplication(make_bootstrap(), sources=CommandSources(module_commands=ModuleCommandList))
    assert application.run(["list"]) == RETURN_SUCCESS
    output = capsys.readouterr().out
    assert output.index("deploy") < output.index("deploy:mode:show")
    assert output.index("cache") < output.index("cache:clean")


def test_debug_output_goes_to_stderr(make_bootstrap, capsys) -> None:
    ConsoleApplication(make_bootstrap(SHOPCTL_DEBUG="1"))
    captured = capsys.readouterr()
    assert "commands gathered count=0 failed=False" in captured.err
    assert "commands gathered" not in captured.out
