"""Core datatypes shared across Grammarify modules.

Responsibilities:
- Represent immutable records exchanged between normalization stages.
- Provide explicit typing for deterministic diagnostics.

Key types:
- `StretchSpan`, `AssemblyResult`, and `CleaningReport`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StretchSpan:
    """A run of at least two identical adjacent characters inside one token.

    Attributes:
        start_index: Index of the first character of the run.
        end_index: Index of the last character of the run. The run still holds
            `end_index - start_index` removable duplicates.
    """

    start_index: int
    end_index: int

    @property
    def length(self) -> int:
        """Return the number of duplicates that can still be removed."""

        return self.end_index - self.start_index

    def shrink(self) -> StretchSpan:
        """Return a copy with one fewer removable duplicate."""

        return StretchSpan(start_index=self.start_index, end_index=self.end_index - 1)


@dataclass(frozen=True, slots=True)
class AssemblyResult:
    """Output of the sentence assembly pass."""

    text: str
    duplicates_removed: int
    terminal_period_added: bool


@dataclass(frozen=True, slots=True)
class CleaningReport:
    """Structured output of one `clean` invocation.

    Attributes:
        original_text: Input text exactly as supplied.
        cleaned_text: Final normalized sentence.
        url_guarded: Whether the input was returned untouched because it looks like a URL.
        stretched_tokens_fixed: Tokens replaced by the de-stretching search.
        shorthand_expansions: Tokens replaced by shorthand expansions.
        words_rejoined: Token pairs merged into a single known word.
        duplicates_removed: Repeated function words dropped during assembly.
        terminal_period_added: Whether a final period was appended.
    """

    original_text: str
    cleaned_text: str
    url_guarded: bool = False
    stretched_tokens_fixed: int = 0
    shorthand_expansions: int = 0
    words_rejoined: int = 0
    duplicates_removed: int = 0
    terminal_period_added: bool = False

    def as_counters(self) -> dict[str, int]:
        """Return integer counters in a stable key order for CLI rendering."""

        return {
            "stretched_tokens_fixed": self.stretched_tokens_fixed,
            "shorthand_expansions": self.shorthand_expansions,
            "words_rejoined": self.words_rejoined,
            "duplicates_removed": self.duplicates_removed,
            "terminal_period_added": int(self.terminal_period_added),
            "url_guarded": int(self.url_guarded),
        }
