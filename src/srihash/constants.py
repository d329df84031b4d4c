# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for the srihash package."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class ExitCode(IntEnum):
    """Process exit statuses reported by the command line."""

    OK = 0
    CONFIGURATION = 1
    ALGORITHM = 2
    NOT_FOUND = 3
    HASH_FAILURE = 4
    INTERRUPTED = 99


DEFAULT_ALGORITHM: Final[str] = "sha384"
DEFAULT_FILTER: Final[str] = "*"
RESULT_SEPARATOR: Final[str] = " --> "
READ_CHUNK_SIZE: Final[int] = 64 * 1024

PROJECT_CONFIG_NAME: Final[str] = ".srihash.toml"
PYPROJECT_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "srihash"

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_FILTER",
    "ExitCode",
    "PROJECT_CONFIG_NAME",
    "PYPROJECT_NAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "READ_CHUNK_SIZE",
    "RESULT_SEPARATOR",
]
