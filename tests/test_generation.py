# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for generation directory checks and compiler preparation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from shopctl.app.generation import COMPILE_COMMAND, CompilerPreparation, GenerationDirectoryAccess


def test_access_creates_missing_directory(tmp_path: Path) -> None:
    target = tmp_path / "generated" / "code"
    assert GenerationDirectoryAccess(target).check() is True
    assert target.is_dir()


def test_access_leaves_no_probe_behind(tmp_path: Path) -> None:
    assert GenerationDirectoryAccess(tmp_path).check() is True
    assert list(tmp_path.iterdir()) == []


def test_access_rejects_regular_file(tmp_path: Path) -> None:
    target = tmp_path / "code"
    target.write_text("not a directory", encoding="utf-8")
    assert GenerationDirectoryAccess(target).check() is False


def test_access_rejects_unreadable_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(os, "access", lambda path, mode: not mode & os.R_OK)
    assert GenerationDirectoryAccess(tmp_path).check() is False
    assert list(tmp_path.iterdir()) == []


def test_access_rejects_uncreatable_directory(tmp_path: Path) -> None:
    blocker = tmp_path / "generated"
    blocker.write_text("", encoding="utf-8")
    assert GenerationDirectoryAccess(blocker / "code").check() is False


def _populated(directory: Path) -> Path:
    (directory / "Acme").mkdir(parents=True)
    (directory / "Acme" / "Proxy.py").write_text("", encoding="utf-8")
    return directory


def test_compiler_preparation_clears_generation_directory(tmp_path: Path) -> None:
    generated = _populated(tmp_path / "generated")
    assert CompilerPreparation(generated).handle_compiler_environment([COMPILE_COMMAND]) is True
    assert not generated.exists()


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["list"],
        [COMPILE_COMMAND, "--help"],
        ["-h", COMPILE_COMMAND],
        ["cache:clean", COMPILE_COMMAND],
    ],
)
def test_compiler_preparation_keeps_directory(tmp_path: Path, argv: list[str]) -> None:
    generated = _populated(tmp_path / "generated")
    assert CompilerPreparation(generated).handle_compiler_environment(argv) is False
    assert (generated / "Acme" / "Proxy.py").exists()


def test_compiler_preparation_without_directory(tmp_path: Path) -> None:
    preparation = CompilerPreparation(tmp_path / "missing")
    assert preparation.handle_compiler_environment(["-v", COMPILE_COMMAND]) is False
