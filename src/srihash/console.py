# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal, TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (stdout by default) is a terminal.

    Args:
        stream: Stream to inspect; ``sys.stdout`` when omitted.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances keyed by presentation flags."""

    def __init__(self) -> None:
        self._cache: dict[tuple[bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a console configured for the requested preferences.

        Consoles write to whatever ``sys.stdout``/``sys.stderr`` is current at
        print time, so redirected streams are honoured.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when Rich should render emoji codes.
            stderr: ``True`` to target standard error instead of stdout.

        Returns:
            Console: Cached or newly constructed console.
        """

        key = (color, emoji, stderr)
        if key not in self._cache:
            color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = (
                "auto" if color else None
            )
            self._cache[key] = Console(
                color_system=color_system,
                force_terminal=color or None,
                no_color=not color,
                emoji=emoji,
                highlight=False,
                soft_wrap=True,
                stderr=stderr,
            )
        return self._cache[key]

    def __call__(self, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        """Return a console; alias for :meth:`get`."""

        return self.get(color=color, emoji=emoji, stderr=stderr)


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`.

    Returns:
        RichConsoleManager: Singleton console manager bound to the process.
    """

    return RichConsoleManager()


__all__ = [
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
]
