# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for resolving the set of paths to hash."""

from __future__ import annotations

from pathlib import Path

import pytest

from srihash.config import HashConfig
from srihash.constants import ExitCode
from srihash.errors import DirectoryNotFoundError
from srihash.resolver import resolve_paths, scan_directory


def _populate(directory: Path) -> None:
    directory.mkdir(exist_ok=True)
    for name in ("b.js", "a.txt", "a.css"):
        (directory / name).write_text(name, encoding="utf-8")


def test_filter_selects_matching_entries_only(tmp_path: Path) -> None:
    _populate(tmp_path)

    paths = scan_directory(tmp_path, "*.css")

    assert paths == [str(tmp_path / "a.css")]


def test_default_filter_lists_entries_in_lexical_order(tmp_path: Path) -> None:
    _populate(tmp_path)

    paths = scan_directory(tmp_path, "*")

    assert paths == [str(tmp_path / name) for name in ("a.css", "a.txt", "b.js")]


def test_scan_is_not_recursive(tmp_path: Path) -> None:
    nested = tmp_path / "vendor"
    nested.mkdir()
    (nested / "deep.js").write_text("deep", encoding="utf-8")
    (tmp_path / "top.js").write_text("top", encoding="utf-8")

    paths = scan_directory(tmp_path, "*.js")

    assert paths == [str(tmp_path / "top.js")]


def test_missing_directory_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(DirectoryNotFoundError) as excinfo:
        scan_directory(tmp_path / "nowhere", "*")

    assert excinfo.value.exit_code == ExitCode.NOT_FOUND


def test_file_in_place_of_directory_raises_not_found(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(DirectoryNotFoundError):
        scan_directory(target, "*")


def test_explicit_files_precede_directory_entries_without_dedup(tmp_path: Path) -> None:
    _populate(tmp_path)
    duplicate = str(tmp_path / "a.css")
    config = HashConfig(files=("*.js", duplicate), directory=tmp_path, filter="*.css")

    paths = resolve_paths(config)

    assert paths == ["*.js", duplicate, duplicate]


def test_explicit_files_kept_as_given() -> None:
    config = HashConfig(files=("./static/app.js", "static//site.css"))

    assert resolve_paths(config) == ["./static/app.js", "static//site.css"]


def test_entries_are_joined_with_directory_as_given(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    _populate(tmp_path / "static")

    paths = scan_directory("./static/", "*.css")

    assert paths == ["./static/a.css"]
