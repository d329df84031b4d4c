# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations and normalisation for the hashing command."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Annotated, Final

import typer

from ..algorithms import HashAlgorithm
from ..errors import ConfigurationError

_FILE_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[,\s]+")

FILE_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--file",
        "-f",
        help="File to hash (repeatable; commas or spaces separate several paths).",
        show_default=False,
    ),
]
DIRECTORY_OPTION = Annotated[
    str | None,
    typer.Option(
        "--directory",
        "-d",
        help="Directory whose immediate entries are hashed.",
        show_default=False,
    ),
]
FILTER_OPTION = Annotated[
    str | None,
    typer.Option(
        "--filter",
        help="Glob restricting directory entries.  [default: *]",
        show_default=False,
    ),
]
ALGORITHM_OPTION = Annotated[
    str | None,
    typer.Option(
        "--algorithm",
        "-a",
        help="Digest algorithm: sha256, sha384 or sha512.  [default: sha384]",
        show_default=False,
    ),
]
SHA256_OPTION = Annotated[bool, typer.Option("--sha256", help="Shortcut for --algorithm sha256.")]
SHA384_OPTION = Annotated[bool, typer.Option("--sha384", help="Shortcut for --algorithm sha384.")]
SHA512_OPTION = Annotated[bool, typer.Option("--sha512", help="Shortcut for --algorithm sha512.")]
COLOR_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--color/--no-color",
        help="Force or disable styled output (default: only on terminals).",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in status messages."),
]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Emit debug traces.")]
QUIET_OPTION = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Suppress the summary written to stderr."),
]


def split_file_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return individual paths from repeated, comma or space separated values.

    Args:
        values: Raw ``--file`` values in the order supplied.

    Returns:
        tuple[str, ...]: Non-empty path fragments preserving order.
    """

    if not values:
        return ()
    paths: list[str] = []
    for entry in values:
        paths.extend(fragment for fragment in _FILE_SEPARATORS.split(entry) if fragment)
    return tuple(paths)


def select_algorithm(
    algorithm: str | None,
    *,
    sha256: bool = False,
    sha384: bool = False,
    sha512: bool = False,
) -> str | None:
    """Return the algorithm requested by ``--algorithm`` or a shortcut flag.

    Args:
        algorithm: Value of ``--algorithm`` when given.
        sha256: Whether ``--sha256`` was passed.
        sha384: Whether ``--sha384`` was passed.
        sha512: Whether ``--sha512`` was passed.

    Returns:
        str | None: Requested algorithm name, ``None`` when nothing was chosen.

    Raises:
        ConfigurationError: If the selections contradict each other.
        UnknownAlgorithmError: If ``algorithm`` is not an SRI algorithm.
    """

    flagged = [
        member
        for member, enabled in (
            (HashAlgorithm.SHA256, sha256),
            (HashAlgorithm.SHA384, sha384),
            (HashAlgorithm.SHA512, sha512),
        )
        if enabled
    ]
    if len(flagged) > 1:
        names = ", ".join(f"--{member.value}" for member in flagged)
        raise ConfigurationError(f"Conflicting algorithm flags: {names}")
    if algorithm is None:
        return flagged[0].value if flagged else None
    requested = HashAlgorithm.parse(algorithm)
    if flagged and flagged[0] is not requested:
        raise ConfigurationError(f"--{flagged[0].value} conflicts with --algorithm {algorithm}")
    return requested.value


@dataclass(slots=True)
class HashCLIOptions:
    """Capture the values supplied to the hashing command."""

    files: tuple[str, ...]
    directory: str | None
    filter_pattern: str | None
    algorithm: str | None
    color: bool | None
    emoji: bool
    debug: bool
    quiet: bool

    @property
    def has_input(self) -> bool:
        """Return ``True`` when at least one file source was supplied."""

        return bool(self.files) or self.directory is not None


__all__ = [
    "ALGORITHM_OPTION",
    "COLOR_OPTION",
    "DEBUG_OPTION",
    "DIRECTORY_OPTION",
    "EMOJI_OPTION",
    "FILE_OPTION",
    "FILTER_OPTION",
    "HashCLIOptions",
    "QUIET_OPTION",
    "SHA256_OPTION",
    "SHA384_OPTION",
    "SHA512_OPTION",
    "select_algorithm",
    "split_file_values",
]
