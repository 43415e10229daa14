# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from importlib import metadata
from typing import Any

import pytest

from shopctl.cli.commands import CacheCommands
from shopctl.plugins import (
    MODULE_COMMANDS_GROUP,
    VENDOR_COMMANDS_GROUP,
    discover_vendor_provider_ids,
    load_module_command_providers,
    resolve_provider,
)


class _FakeEntryPoint:
    def __init__(self, value: Any, identifier: str = "") -> None:
        self._value = value
        self.value = identifier

    def load(self) -> Any:
        return self._value


def test_load_module_command_providers_handles_absence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(metadata, "entry_points", lambda: {})
    assert load_module_command_providers() == ()
    assert discover_vendor_provider_ids() == ()


def test_load_module_command_providers_filters_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    class _BadEntryPoint:
        def load(self) -> None:
            raise ImportError("boom")

    entries = {
        MODULE_COMMANDS_GROUP: (_BadEntryPoint(), _FakeEntryPoint(lambda: 42)),
    }
    monkeypatch.setattr(metadata, "entry_points", lambda: entries)
    providers = load_module_command_providers()
    assert len(providers) == 1
    assert providers[0]() == 42


def test_discover_vendor_provider_ids_select_api(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Container:
        def select(self, *, group: str):
            if group == VENDOR_COMMANDS_GROUP:
                return (
                    _FakeEntryPoint(None, "acme.console:Commands"),
                    _FakeEntryPoint(None, "acme.console:Commands"),
                    _FakeEntryPoint(None, "beta.cli:Provider"),
                )
            return ()

    monkeypatch.setattr(metadata, "entry_points", lambda: _Container())
    assert discover_vendor_provider_ids() == ("acme.console:Commands", "beta.cli:Provider")


def test_select_api_is_preferred_over_mapping_lookup(monkeypatch: pytest.MonkeyPatch) -> None:
    class _SelectableGroups(dict):
        def select(self, *, group: str):
            return (_FakeEntryPoint(None, "acme.console:Commands"),) if group == VENDOR_COMMANDS_GROUP else ()

        def get(self, key, default=None):  # pragma: no cover - must not be called
            raise AssertionError("group lookup goes through select")

    monkeypatch.setattr(metadata, "entry_points", lambda: _SelectableGroups())
    assert discover_vendor_provider_ids() == ("acme.console:Commands",)


def test_vendor_ids_are_not_loaded(monkeypatch: pytest.MonkeyPatch) -> None:
    class _ExplodingEntryPoint:
        value = "acme.console:Commands"

        def load(self) -> None:  # pragma: no cover - must not be called
            raise AssertionError("vendor providers are resolved lazily")

    monkeypatch.setattr(metadata, "entry_points", lambda: {VENDOR_COMMANDS_GROUP: (_ExplodingEntryPoint(),)})
    assert discover_vendor_provider_ids() == ("acme.console:Commands",)


@pytest.mark.parametrize(
    "identifier",
    [
        "shopctl.cli.commands:CacheCommands",
        "shopctl.cli.commands.CacheCommands",
        " shopctl.cli.commands:CacheCommands ",
    ],
)
def test_resolve_provider_accepts_both_forms(identifier: str) -> None:
    assert resolve_provider(identifier) is CacheCommands


def test_resolve_provider_dotted_attribute_path() -> None:
    provider = resolve_provider("shopctl.cli.commands:CacheCommands.get_commands")
    assert provider is CacheCommands.get_commands


@pytest.mark.parametrize(
    "identifier",
    [
        "",
        "CacheCommands",
        "shopctl.cli.commands:",
        "missing_vendor_package.console:Commands",
        "shopctl.cli.commands:DoesNotExist",
        "shopctl.cli.commands:__all__",
        ".relative.module:Provider",
        ".commands.CacheCommands",
    ],
)
def test_resolve_provider_returns_none_when_unresolvable(identifier: str) -> None:
    assert resolve_provider(identifier) is None
