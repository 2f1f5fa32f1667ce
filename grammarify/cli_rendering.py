"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
cleaning reports and shorthand listings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import NoReturn

import typer

from .errors import NormalizationStageError
from .models.datatypes import CleaningReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, NormalizationStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_cleaning_report(report: CleaningReport) -> None:
    """Print report counters as indented `key: value` rows."""

    for key, value in report.as_counters().items():
        typer.echo(f"  {key}: {value}")


def echo_shorthand_entries(entries: Mapping[str, str]) -> None:
    """Print shorthand entries sorted by key."""

    for key in sorted(entries):
        typer.echo(f"{key}\t{entries[key]}")
