# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and helpers for a hashing run."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .algorithms import HashAlgorithm
from .constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_FILTER,
    PROJECT_CONFIG_NAME,
    PYPROJECT_NAME,
    PYPROJECT_SECTION_KEY,
    PYPROJECT_TOOL_KEY,
)
from .errors import ConfigurationError


class HashConfig(BaseModel):
    """Describe which files to hash and how."""

    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm = HashAlgorithm(DEFAULT_ALGORITHM)
    files: tuple[str, ...] = ()
    directory: str | None = None
    filter: str = DEFAULT_FILTER

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: Any) -> HashAlgorithm:
        """Reject unknown algorithm names with a typed error."""

        if not isinstance(value, str):
            raise ValueError("algorithm must be a string")
        return HashAlgorithm.parse(value)

    @field_validator("directory", mode="before")
    @classmethod
    def _keep_directory_as_given(cls, value: Any) -> Any:
        return os.fspath(value) if isinstance(value, os.PathLike) else value

    @field_validator("filter")
    @classmethod
    def _require_filter(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("filter must not be blank")
        return value

    @model_validator(mode="after")
    def _require_source(self) -> HashConfig:
        if not self.files and self.directory is None:
            raise ValueError("no file or directory specified")
        return self


class ProjectDefaults(BaseModel):
    """Defaults read from ``.srihash.toml`` or ``[tool.srihash]``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    algorithm: str | None = None
    filter: str | None = None


def build_config(
    *,
    files: Sequence[str] = (),
    directory: str | os.PathLike[str] | None = None,
    algorithm: str | None = None,
    filter_pattern: str | None = None,
    defaults: ProjectDefaults | None = None,
) -> HashConfig:
    """Return a validated :class:`HashConfig` merging CLI values over defaults.

    Args:
        files: Explicit file paths in the order supplied.
        directory: Optional directory to scan, kept as typed.
        algorithm: Algorithm name given on the command line, if any.
        filter_pattern: Glob filter given on the command line, if any.
        defaults: Project-level defaults consulted for unset values.

    Returns:
        HashConfig: Validated, immutable configuration.

    Raises:
        ConfigurationError: If the merged values are invalid.
        UnknownAlgorithmError: If the algorithm name is not recognised.
    """

    defaults = defaults or ProjectDefaults()
    try:
        return HashConfig(
            algorithm=_first_set(algorithm, defaults.algorithm, DEFAULT_ALGORITHM),
            files=tuple(files),
            directory=directory,
            filter=_first_set(filter_pattern, defaults.filter, DEFAULT_FILTER),
        )
    except ValidationError as exc:
        raise ConfigurationError(_describe_validation_error(exc)) from exc


def _first_set(*candidates: str | None) -> str:
    """Return the first candidate that was set, even when it is blank."""

    return next(candidate for candidate in candidates if candidate is not None)


def load_project_defaults(root: Path) -> ProjectDefaults:
    """Return project defaults discovered in ``root``.

    ``.srihash.toml`` wins over ``pyproject.toml``; missing files yield empty
    defaults.

    Args:
        root: Directory searched for configuration files.

    Returns:
        ProjectDefaults: Parsed defaults, empty when nothing is configured.

    Raises:
        ConfigurationError: If a configuration file is malformed.
    """

    dedicated = root / PROJECT_CONFIG_NAME
    if dedicated.is_file():
        return _parse_defaults(_read_toml(dedicated), source=dedicated)
    pyproject = root / PYPROJECT_NAME
    if pyproject.is_file():
        tool_section = _read_toml(pyproject).get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return ProjectDefaults()
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return ProjectDefaults()
        if not isinstance(section, Mapping):
            raise ConfigurationError(f"[tool.{PYPROJECT_SECTION_KEY}] in {pyproject} must be a table")
        return _parse_defaults(section, source=pyproject)
    return ProjectDefaults()


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Unable to read {path}: {exc}") from exc


def _parse_defaults(payload: Mapping[str, Any], *, source: Path) -> ProjectDefaults:
    try:
        return ProjectDefaults.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {source}: {_describe_validation_error(exc)}") from exc


def _describe_validation_error(exc: ValidationError) -> str:
    """Return a compact, user-facing summary of ``exc``."""

    messages: list[str] = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        message = str(cause) if cause is not None else error["msg"]
        location = ".".join(str(part) for part in error["loc"])
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages)


__all__ = [
    "HashConfig",
    "ProjectDefaults",
    "build_config",
    "load_project_defaults",
]
