"""Command-line interface for Grammarify.

Responsibilities:
- Expose user-facing commands for sentence normalization.
- Convert CLI arguments into `GrammarifyConfig` and run the engine.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_cleaning_report,
    echo_shorthand_entries,
    exit_with_command_error,
)
from .config import ConfigLoader, GrammarifyConfig
from .engine import Grammarify
from .errors import NormalizationStageError
from .telemetry.logger import StageLogger

app = typer.Typer(
    name="grammarify",
    no_args_is_help=True,
    help="Grammarify CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to a YAML config with `substitutions`."),
]
SubstitutionOption = Annotated[
    list[str] | None,
    typer.Option("--sub", help="Extra shorthand entry as KEY=VALUE. Repeatable."),
]


def _load_config(config_path: Path | None) -> GrammarifyConfig:
    """Load YAML config when requested, else environment config, as stage errors."""

    if config_path is None:
        try:
            return ConfigLoader.from_env()
        except ValueError as exc:
            raise NormalizationStageError(
                stage="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix `GRAMMARIFY_SUBSTITUTIONS` or `GRAMMARIFY_DISCONNECTED_WORDS`.",
            ) from exc

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise NormalizationStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise NormalizationStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc


def _build_engine(
    config_path: Path | None,
    substitutions: list[str] | None,
    run_logger: StageLogger | None = None,
) -> Grammarify:
    """Resolve config plus `--sub` overrides and construct the engine."""

    config = _load_config(config_path)
    if substitutions:
        try:
            overrides = ConfigLoader.parse_substitution_pairs(substitutions, "`--sub`")
            config = config.with_substitutions(overrides)
            config.validate()
        except ValueError as exc:
            raise NormalizationStageError(
                stage="config",
                detail=str(exc),
                hint="Pass overrides as `--sub brb=be right back`.",
            ) from exc
    return Grammarify.from_config(config, run_logger=run_logger)


def _read_stdin_sentences() -> list[str]:
    """Read non-blank stdin lines, one sentence per line."""

    stream = typer.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream if line.strip()]


@app.command("clean")
def clean_command(
    text: Annotated[
        list[str] | None,
        typer.Argument(help="Sentences to clean. Reads stdin lines when omitted."),
    ] = None,
    config: ConfigOption = None,
    sub: SubstitutionOption = None,
    report: Annotated[
        bool,
        typer.Option("--report", help="Print per-stage counters after each sentence."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Stream stage logs to stderr."),
    ] = False,
) -> None:
    """Clean each sentence and print one result per line."""

    try:
        engine = _build_engine(config, sub, run_logger=StageLogger() if verbose else None)
        sentences = text or _read_stdin_sentences()
        reports = [engine.clean_with_report(sentence) for sentence in sentences]
    except Exception as exc:
        exit_with_command_error("clean", exc)

    for cleaning_report in reports:
        typer.echo(cleaning_report.cleaned_text)
        if report:
            echo_cleaning_report(cleaning_report)


@app.command("shorthand")
def shorthand_command(
    word: Annotated[
        str | None,
        typer.Argument(help="Shorthand to look up. Lists every entry when omitted."),
    ] = None,
    config: ConfigOption = None,
    sub: SubstitutionOption = None,
) -> None:
    """Look up one shorthand expansion or list the merged table."""

    try:
        engine = _build_engine(config, sub)
        if word is None:
            echo_shorthand_entries(engine.shorthand_map)
            return
        expansion = engine.shorthand_map.lookup(word)
        if expansion is None:
            raise NormalizationStageError(
                stage="lookup",
                detail=f"No shorthand entry for `{word}`.",
                hint=f"Add one with `--sub {word.lower()}=<expansion>`.",
            )
    except Exception as exc:
        exit_with_command_error("shorthand", exc)

    typer.echo(expansion)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
