"""Structured stage logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level normalization logs.
- Route every line through `loguru` with a plain `{message}` format.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class StageLogger:
    """Emit deterministic stage logs for observable normalization activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured stage log line."""

        line = f"[stage] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start event."""

        self._emit("DEBUG", "start", stage)

    def log_stage_complete(self, stage: str, **counters: object) -> None:
        """Emit a stage-complete event with optional counters."""

        self._emit("INFO", "complete", stage, **counters)

    def log_stage_skipped(self, stage: str, reason: str) -> None:
        """Emit an event for a stage that was intentionally not applied."""

        self._emit("INFO", "skipped", stage, reason=reason)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without input text in the payload."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
