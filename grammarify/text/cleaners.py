"""Deterministic string-level repair rules.

Responsibilities:
- Provide composable cleanup rules applied before tokenization.
- Keep period, ellipsis and punctuation spacing repair predictable.
"""

from __future__ import annotations

import re
from typing import Protocol

_ASCII_DIGITS = frozenset("0123456789")


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class NormalizeQuotes:
    """Normalize curly quote characters."""

    def apply(self, text: str) -> str:
        """Convert Unicode single and double quotes to ASCII equivalents."""

        text = re.sub("[\u2018\u2019]", "'", text)
        return re.sub("[\u201c\u201d]", '"', text)


class RepairPeriodsAndEllipses:
    """Collapse malformed period runs into single periods or ellipses.

    A run is any stretch of spaces and periods that starts right after a word
    character and ends before a word character or at the end of the text.
    Runs with two or more periods become ``"... "``. Runs with one period
    become ``". "`` only when the run starts with a space, so ``pig.ran`` and
    ``3.5`` are left alone.
    """

    _LEADING_RE = re.compile(r"^[\s.]+")
    _PERIOD_RUN_RE = re.compile(r"\b[ .]*\.[ .]*(?:\b|\Z)", re.ASCII)

    def apply(self, text: str) -> str:
        """Strip leading whitespace and periods, then repair each period run."""

        text = self._LEADING_RE.sub("", text)
        return self._PERIOD_RUN_RE.sub(self._replace_run, text)

    @staticmethod
    def _replace_run(match: re.Match[str]) -> str:
        run = match.group(0)
        if run.count(".") >= 2:
            return "... "
        if not run.startswith(" "):
            return run
        return ". "


class RepairSpaceAfterCharacter:
    """Ensure exactly one space after a punctuation character.

    The space is dropped when a digit follows the run, which keeps numeric
    grouping such as ``3,000`` or ``10:30`` intact.
    """

    def __init__(self, character: str) -> None:
        """Compile the leading-strip and run patterns for one character."""

        if len(character) != 1:
            raise ValueError("`character` must be exactly one character.")
        escaped = re.escape(character)
        self.character = character
        self._leading_re = re.compile(rf"^[\s{escaped}.]+")
        self._run_re = re.compile(
            rf"\b[ {escaped}]*{escaped}[ {escaped}]*(?:\b|\Z)",
            re.ASCII,
        )

    def apply(self, text: str) -> str:
        """Strip leading occurrences and normalize spacing around each run."""

        text = self._leading_re.sub("", text)
        return self._run_re.sub(self._replace_run, text)

    def _replace_run(self, match: re.Match[str]) -> str:
        end = match.end()
        if match.string[end : end + 1] in _ASCII_DIGITS:
            return self.character
        return f"{self.character} "


# Applied in this order, one character at a time.
SPACED_CHARACTERS = (",", ";", ":", "%")


class TextCleaner:
    """Apply a sequence of deterministic string-level rules."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules or [
            NormalizeQuotes(),
            RepairPeriodsAndEllipses(),
            *(RepairSpaceAfterCharacter(character) for character in SPACED_CHARACTERS),
        ]

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return current
