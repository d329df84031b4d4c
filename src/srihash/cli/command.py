# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command computing SRI digests."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..constants import ExitCode
from ..errors import MissingInputError, SRIHashError
from ..reporting import OutputStyle
from .options import (
    ALGORITHM_OPTION,
    COLOR_OPTION,
    DEBUG_OPTION,
    DIRECTORY_OPTION,
    EMOJI_OPTION,
    FILE_OPTION,
    FILTER_OPTION,
    QUIET_OPTION,
    SHA256_OPTION,
    SHA384_OPTION,
    SHA512_OPTION,
    HashCLIOptions,
    select_algorithm,
    split_file_values,
)
from .services import load_run_config, run
from .shared import build_cli_logger


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"srihash {__version__}")
        raise typer.Exit(code=0)


VERSION_OPTION = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the version and exit.",
    ),
]


def hash_command(
    ctx: typer.Context,
    file: FILE_OPTION = None,
    directory: DIRECTORY_OPTION = None,
    filter_pattern: FILTER_OPTION = None,
    algorithm: ALGORITHM_OPTION = None,
    sha256: SHA256_OPTION = False,
    sha384: SHA384_OPTION = False,
    sha512: SHA512_OPTION = False,
    color: COLOR_OPTION = None,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
    quiet: QUIET_OPTION = False,
    version: VERSION_OPTION = False,
) -> None:
    """Print Sub-Resource Integrity digests for files.

    Each line reads ``<path> --> <algorithm>-<base64 digest>``; files that are
    missing or unreadable are reported inline without stopping the run.
    """

    logger = build_cli_logger(emoji=emoji, debug=debug, color=color)
    try:
        options = HashCLIOptions(
            files=split_file_values(file),
            directory=directory,
            filter_pattern=filter_pattern,
            algorithm=select_algorithm(algorithm, sha256=sha256, sha384=sha384, sha512=sha512),
            color=color,
            emoji=emoji,
            debug=debug,
            quiet=quiet,
        )
        config = load_run_config(options, root=Path.cwd(), logger=logger)
    except MissingInputError as exc:
        logger.fail(exc.message)
        typer.echo(ctx.get_usage(), err=True)
        raise typer.Exit(code=exc.exit_code) from exc
    except SRIHashError as exc:
        logger.fail(exc.message)
        raise typer.Exit(code=exc.exit_code) from exc
    except KeyboardInterrupt as exc:
        logger.fail("Interrupted")
        raise typer.Exit(code=ExitCode.INTERRUPTED) from exc

    style = OutputStyle.detect(color=color, emoji=emoji)
    raise typer.Exit(code=run(config, style=style, logger=logger, quiet=quiet))


__all__ = ["hash_command"]
