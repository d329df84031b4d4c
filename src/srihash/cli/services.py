# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services backing the hashing command."""

from __future__ import annotations

from pathlib import Path

from ..algorithms import ensure_available
from ..config import HashConfig, ProjectDefaults, build_config, load_project_defaults
from ..constants import ExitCode
from ..errors import MissingInputError, SRIHashError
from ..hashing import hash_paths
from ..reporting import OutputStyle, RunSummary, emit_results
from ..resolver import resolve_paths
from .options import HashCLIOptions
from .shared import CLILogger


def load_run_config(options: HashCLIOptions, *, root: Path, logger: CLILogger) -> HashConfig:
    """Return the validated configuration for ``options``.

    Args:
        options: Normalised command-line values.
        root: Directory searched for project defaults.
        logger: Logger receiving debug traces.

    Returns:
        HashConfig: Configuration merged from CLI values and project defaults.

    Raises:
        MissingInputError: If neither files nor a directory were supplied.
        ConfigurationError: If values or project defaults are invalid.
        UnknownAlgorithmError: If the algorithm name is not recognised.
    """

    if not options.has_input:
        raise MissingInputError()
    defaults = load_project_defaults(root)
    if defaults != ProjectDefaults():
        logger.debug(f"defaults algorithm={defaults.algorithm} filter={defaults.filter}")
    config = build_config(
        files=options.files,
        directory=options.directory,
        algorithm=options.algorithm,
        filter_pattern=options.filter_pattern,
        defaults=defaults,
    )
    logger.debug(
        f"algorithm={config.algorithm.value} files={len(config.files)} "
        f"directory={config.directory} filter={config.filter}",
    )
    return config


def run(config: HashConfig, *, style: OutputStyle, logger: CLILogger, quiet: bool = False) -> ExitCode:
    """Hash every path selected by ``config`` and print one line per path.

    Args:
        config: Validated configuration for the run.
        style: Presentation flags for result lines.
        logger: Logger used for status and error messages.
        quiet: Whether to suppress the closing summary.

    Returns:
        ExitCode: ``OK`` when the batch completed, otherwise the code of the
        error that aborted it.
    """

    try:
        ensure_available(config.algorithm)
        paths = resolve_paths(config)
        for path in paths:
            logger.debug(f"path={path}")
        summary = emit_results(hash_paths(paths, config.algorithm), style)
    except SRIHashError as exc:
        logger.fail(exc.message)
        return exc.exit_code
    except KeyboardInterrupt:
        logger.fail("Interrupted")
        return ExitCode.INTERRUPTED
    if not quiet:
        emit_summary(summary, logger=logger)
    return ExitCode.OK


def emit_summary(summary: RunSummary, *, logger: CLILogger) -> None:
    """Log how many paths were hashed and how many failed.

    Args:
        summary: Counts gathered while results were printed.
        logger: Logger used to emit the summary.
    """

    if summary.failed:
        logger.warn(f"{len(summary.failed)} of {summary.total} file(s) could not be hashed")
    elif summary.total:
        logger.ok(f"Hashed {summary.total} file(s)")
    else:
        logger.warn("No files matched")


__all__ = ["emit_summary", "load_run_config", "run"]
