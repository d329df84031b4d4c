# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the ordered set of paths hashed during a run."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable

from .config import HashConfig
from .errors import ConfigurationError, DirectoryNotFoundError


def resolve_paths(config: HashConfig) -> list[str]:
    """Return every path to hash for ``config`` in output order.

    Explicit files come first, exactly as given and never glob-expanded,
    followed by the matching entries of ``config.directory``. Duplicates are
    kept.

    Args:
        config: Validated configuration for the run.

    Returns:
        list[str]: Paths in the order their result lines are emitted.

    Raises:
        DirectoryNotFoundError: If the directory to scan does not exist.
    """

    paths = list(config.files)
    if config.directory is not None:
        paths.extend(scan_directory(config.directory, config.filter))
    return paths


def scan_directory(directory: str | os.PathLike[str], pattern: str) -> list[str]:
    """Return immediate entries of ``directory`` whose name matches ``pattern``.

    Args:
        directory: Directory listed without recursion.
        pattern: Shell-style glob applied to entry names.

    Returns:
        list[str]: Matching entries joined with ``directory`` as given, sorted
        by name.

    Raises:
        DirectoryNotFoundError: If ``directory`` is missing or not a directory.
        ConfigurationError: If the directory cannot be listed.
    """

    base = os.fspath(directory)
    if not os.path.isdir(base):
        raise DirectoryNotFoundError(base)
    try:
        with os.scandir(base) as entries:
            names = sorted(entry.name for entry in entries)
    except OSError as exc:
        raise ConfigurationError(f"Unable to list directory '{base}': {exc.strerror or exc}") from exc
    return [os.path.join(base, name) for name in _match_names(names, pattern)]


def _match_names(names: Iterable[str], pattern: str) -> list[str]:
    return [name for name in names if fnmatch.fnmatch(name, pattern)]


__all__ = ["resolve_paths", "scan_directory"]
