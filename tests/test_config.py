# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for configuration models and project defaults."""

from __future__ import annotations

from pathlib import Path

import pytest

from srihash.algorithms import HashAlgorithm
from srihash.config import ProjectDefaults, build_config, load_project_defaults
from srihash.constants import ExitCode
from srihash.errors import ConfigurationError, UnknownAlgorithmError


def test_build_config_defaults() -> None:
    config = build_config(files=["app.js"])

    assert config.algorithm is HashAlgorithm.SHA384
    assert config.filter == "*"
    assert config.files == ("app.js",)
    assert config.directory is None


def test_build_config_requires_a_source() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        build_config()

    assert excinfo.value.exit_code == ExitCode.CONFIGURATION
    assert "no file or directory" in str(excinfo.value)


def test_build_config_rejects_blank_filter(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        build_config(directory=tmp_path, filter_pattern="  ")

    assert "filter" in str(excinfo.value)


def test_build_config_rejects_unknown_algorithm() -> None:
    with pytest.raises(UnknownAlgorithmError):
        build_config(files=["app.js"], algorithm="md5")


def test_command_line_values_override_defaults(tmp_path: Path) -> None:
    defaults = ProjectDefaults(algorithm="sha512", filter="*.js")

    inherited = build_config(directory=tmp_path, defaults=defaults)
    overridden = build_config(directory=tmp_path, algorithm="sha256", filter_pattern="*.css", defaults=defaults)

    assert inherited.algorithm is HashAlgorithm.SHA512
    assert inherited.filter == "*.js"
    assert overridden.algorithm is HashAlgorithm.SHA256
    assert overridden.filter == "*.css"


def test_load_defaults_without_files(tmp_path: Path) -> None:
    assert load_project_defaults(tmp_path) == ProjectDefaults()


def test_load_defaults_from_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "site"\n\n[tool.srihash]\nalgorithm = "sha256"\nfilter = "*.js"\n',
        encoding="utf-8",
    )

    defaults = load_project_defaults(tmp_path)

    assert defaults == ProjectDefaults(algorithm="sha256", filter="*.js")


def test_pyproject_without_section_yields_empty_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "site"\n', encoding="utf-8")

    assert load_project_defaults(tmp_path) == ProjectDefaults()


def test_dedicated_file_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.srihash]\nalgorithm = "sha256"\n', encoding="utf-8")
    (tmp_path / ".srihash.toml").write_text('algorithm = "sha512"\n', encoding="utf-8")

    assert load_project_defaults(tmp_path).algorithm == "sha512"


def test_unknown_default_keys_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".srihash.toml").write_text('algorithm = "sha512"\nrecursive = true\n', encoding="utf-8")

    with pytest.raises(ConfigurationError) as excinfo:
        load_project_defaults(tmp_path)

    assert "recursive" in str(excinfo.value)


def test_malformed_toml_is_a_configuration_error(tmp_path: Path) -> None:
    (tmp_path / ".srihash.toml").write_text("algorithm = \n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_project_defaults(tmp_path)


def test_blank_default_algorithm_is_not_replaced(tmp_path: Path) -> None:
    (tmp_path / ".srihash.toml").write_text('algorithm = ""\n', encoding="utf-8")
    defaults = load_project_defaults(tmp_path)

    with pytest.raises(UnknownAlgorithmError):
        build_config(files=["app.js"], defaults=defaults)


def test_blank_default_filter_is_not_replaced(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.srihash]\nfilter = ""\n', encoding="utf-8")
    defaults = load_project_defaults(tmp_path)

    with pytest.raises(ConfigurationError) as excinfo:
        build_config(directory=tmp_path, defaults=defaults)

    assert "filter must not be blank" in str(excinfo.value)


def test_directory_is_kept_as_typed(tmp_path: Path) -> None:
    assert build_config(directory="./static/").directory == "./static/"
    assert build_config(directory=tmp_path).directory == str(tmp_path)
