# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer glue: application factory, sorted help and exception types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Literal

import typer
from typer.core import TyperCommand

if TYPE_CHECKING:
    from click.core import Parameter
    from click.formatting import HelpFormatter

# Typer either re-exports click or runs on its own copy of it; its
# ``BadParameter`` always derives from the ``UsageError`` in use.
UsageError: Final = next(base for base in typer.BadParameter.__mro__ if base.__name__ == "UsageError")
Abort: Final[type[BaseException]] = typer.Abort


@dataclass(frozen=True, slots=True)
class TyperAppConfig:
    """Settings applied when building a Typer application."""

    help_text: str
    name: str | None = None
    add_completion: bool = False
    rich_markup_mode: Literal["markdown", "rich"] | None = None


class SortedHelpCommand(TyperCommand):
    """Command whose ``--help`` lists options alphabetically by long name."""

    def format_options(self, ctx: typer.Context, formatter: HelpFormatter) -> None:
        """Write the options section ordered by :func:`_sort_key`.

        Args:
            ctx: Context of the command being described.
            formatter: Help formatter receiving the definition list.
        """

        records = [
            (_sort_key(param), position, record)
            for position, param in enumerate(self.get_params(ctx))
            if (record := param.get_help_record(ctx)) is not None
        ]
        if not records:
            return
        with formatter.section("Options"):
            formatter.write_dl([record for *_, record in sorted(records)])


def _sort_key(param: Parameter) -> str:
    """Return the first long option name of ``param`` without dashes."""

    names = (*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ()))
    long_name = next((name for name in names if name.startswith("--")), param.name or "")
    return long_name.lstrip("-").lower()


def create_typer(*, config: TyperAppConfig) -> typer.Typer:
    """Return a Typer application configured from ``config``.

    Args:
        config: Application-level help and behaviour settings.

    Returns:
        typer.Typer: Application ready for command registration.
    """

    return typer.Typer(
        name=config.name,
        help=config.help_text,
        add_completion=config.add_completion,
        rich_markup_mode=config.rich_markup_mode,
    )


__all__ = [
    "Abort",
    "SortedHelpCommand",
    "TyperAppConfig",
    "UsageError",
    "create_typer",
]
