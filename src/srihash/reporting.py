# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render hash results as output lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from rich.text import Text

from .console import detect_tty, get_console_manager
from .constants import RESULT_SEPARATOR
from .hashing import HashOutcome, HashResult


@dataclass(frozen=True, slots=True)
class OutputStyle:
    """Presentation flags resolved once per run."""

    color: bool = False
    emoji: bool = False

    @classmethod
    def detect(cls, *, color: bool | None = None, emoji: bool = False) -> OutputStyle:
        """Return a style honouring ``color`` or, when unset, the terminal.

        Args:
            color: Explicit colour preference; ``None`` checks stdout.
            emoji: Whether emoji glyphs are allowed.

        Returns:
            OutputStyle: Immutable presentation flags.
        """

        return cls(color=detect_tty() if color is None else color, emoji=emoji)


@dataclass(slots=True)
class RunSummary:
    """Counts gathered while results are emitted."""

    total: int = 0
    failed: list[str] = field(default_factory=list)

    def record(self, result: HashResult) -> None:
        self.total += 1
        if not result.ok:
            self.failed.append(result.path)


def format_result(result: HashResult) -> str:
    """Return the plain-text line describing ``result``.

    Args:
        result: Outcome of hashing a single path.

    Returns:
        str: ``<path> --> <integrity>`` or an ``ERROR`` line.
    """

    if result.outcome is HashOutcome.OK:
        return f"{result.path}{RESULT_SEPARATOR}{result.integrity}"
    if result.outcome is HashOutcome.NOT_FOUND:
        return f"{result.path}{RESULT_SEPARATOR}ERROR: file does not exist"
    return f"{result.path}{RESULT_SEPARATOR}ERROR: unable to hash file ({result.reason})"


def render_result(result: HashResult, style: OutputStyle) -> Text:
    """Return ``result`` as styled Rich text."""

    text = Text(format_result(result))
    if not style.color:
        return text
    path_end = len(result.path)
    text.stylize("bold", 0, path_end)
    text.stylize("green" if result.ok else "red", path_end + len(RESULT_SEPARATOR))
    return text


def emit_results(results: Iterable[HashResult], style: OutputStyle) -> RunSummary:
    """Print each result to stdout as soon as it is available.

    Args:
        results: Hash results in output order.
        style: Presentation flags for the run.

    Returns:
        RunSummary: Counts of emitted and failed results.
    """

    console = get_console_manager().get(color=style.color, emoji=style.emoji)
    summary = RunSummary()
    for result in results:
        console.print(render_result(result, style))
        summary.record(result)
    return summary


__all__ = [
    "OutputStyle",
    "RunSummary",
    "emit_results",
    "format_result",
    "render_result",
]
