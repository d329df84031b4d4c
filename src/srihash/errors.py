# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error hierarchy raised before or during a hashing run."""

from __future__ import annotations

from .constants import ExitCode


class SRIHashError(Exception):
    """Base error carrying the exit status associated with the failure."""

    exit_code: ExitCode = ExitCode.CONFIGURATION

    def __init__(self, message: str, *, exit_code: ExitCode | None = None) -> None:
        """Initialise the error with a message and optional exit code override.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status overriding the class default.
        """

        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigurationError(SRIHashError):
    """Raised when command-line or project configuration is invalid."""

    exit_code = ExitCode.CONFIGURATION


class MissingInputError(ConfigurationError):
    """Raised when neither files nor a directory were supplied."""

    def __init__(self) -> None:
        super().__init__("No file or directory specified; use --file and/or --directory")


class UnknownAlgorithmError(SRIHashError):
    """Raised when the requested digest algorithm is not an SRI algorithm."""

    exit_code = ExitCode.ALGORITHM

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown hash algorithm '{name}' (expected sha256, sha384 or sha512)")
        self.name = name


class HashCapabilityError(SRIHashError):
    """Raised when the interpreter cannot provide the requested digest."""

    exit_code = ExitCode.ALGORITHM


class DirectoryNotFoundError(SRIHashError):
    """Raised when the directory to scan does not exist."""

    exit_code = ExitCode.NOT_FOUND

    def __init__(self, directory: str) -> None:
        super().__init__(f"Directory '{directory}' does not exist")
        self.directory = directory


class HashFailureError(SRIHashError):
    """Raised when the digest primitive fails in an unexpected way."""

    exit_code = ExitCode.HASH_FAILURE


__all__ = [
    "ConfigurationError",
    "DirectoryNotFoundError",
    "HashCapabilityError",
    "HashFailureError",
    "MissingInputError",
    "SRIHashError",
    "UnknownAlgorithmError",
]
