# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import signal
from collections.abc import Sequence

from ..constants import ExitCode
from .command import hash_command
from .typer_ext import Abort, SortedHelpCommand, TyperAppConfig, UsageError, create_typer

PROG_NAME = "srihash"

app = create_typer(config=TyperAppConfig(name=PROG_NAME, help_text="Compute Sub-Resource Integrity digests."))
app.command(cls=SortedHelpCommand)(hash_command)


def install_signal_handlers() -> None:
    """Route SIGTERM through ``KeyboardInterrupt`` like SIGINT."""

    signal.signal(signal.SIGTERM, signal.default_int_handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status.

    Usage errors detected by Click map to the configuration exit status and an
    interrupt outside the hashing loop maps to the interrupted status.

    Args:
        argv: Arguments excluding the program name; ``sys.argv`` when omitted.

    Returns:
        int: Process exit status.
    """

    install_signal_handlers()
    try:
        result = app(
            args=list(argv) if argv is not None else None,
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except UsageError as exc:
        exc.show()
        return ExitCode.CONFIGURATION
    except (Abort, KeyboardInterrupt):
        return ExitCode.INTERRUPTED
    return int(result or 0)


__all__ = ["app", "install_signal_handlers", "main"]
