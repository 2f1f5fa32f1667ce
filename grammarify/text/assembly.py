"""Final sentence assembly pass.

Responsibilities:
- Drop repeated function words such as ``the the``.
- Capitalize the first token and tokens that follow terminal punctuation,
  except right after an ellipsis.
- Join tokens with single spaces and close the sentence with a period when
  it does not already end in terminal punctuation.
"""

from __future__ import annotations

from ..models.datatypes import AssemblyResult

FUNCTION_WORDS = frozenset({"the", "a", "an", "and", "but", "or", "nor", "for", "so", "yet"})
TERMINAL_ENDINGS = (".", "!", "?", '"')
_ELLIPSIS_TAIL = ".."


def ending_punctuation(token: str) -> str:
    """Return the terminal punctuation marker carried by `token`.

    The first of ``.``, ``!`` and ``?`` found anywhere in the token wins, in
    that order. Tokens without any of them carry an empty marker.
    """

    for marker in (".", "!", "?"):
        if marker in token:
            return marker
    return ""


def capitalize_first(token: str) -> str:
    """Uppercase the first character and keep the rest untouched."""

    return token[:1].upper() + token[1:]


class SentenceAssembler:
    """Assemble normalized tokens into one sentence string."""

    def __init__(self, function_words: frozenset[str] = FUNCTION_WORDS) -> None:
        """Initialize with the set of words safe to drop when doubled."""

        self.function_words = function_words

    def assemble(self, tokens: list[str]) -> AssemblyResult:
        """Return the assembled sentence with duplicate and period diagnostics."""

        kept = self._drop_duplicates(tokens)
        duplicates_removed = len(tokens) - len(kept)
        if not kept:
            return AssemblyResult(
                text="",
                duplicates_removed=duplicates_removed,
                terminal_period_added=False,
            )

        pieces: list[str] = []
        for index, token in enumerate(kept):
            if index == 0 or self._starts_sentence(kept, index):
                token = capitalize_first(token)
            if index != 0 and token != ".":
                token = " " + token
            pieces.append(token)

        terminal_period_added = not kept[-1].endswith(TERMINAL_ENDINGS)
        if terminal_period_added:
            pieces.append(".")
        return AssemblyResult(
            text="".join(pieces),
            duplicates_removed=duplicates_removed,
            terminal_period_added=terminal_period_added,
        )

    def _drop_duplicates(self, tokens: list[str]) -> list[str]:
        """Drop a function word that repeats the token right before it."""

        kept: list[str] = []
        for token in tokens:
            lowered = token.lower()
            if kept and lowered == kept[-1].lower() and lowered in self.function_words:
                continue
            kept.append(token)
        return kept

    def _starts_sentence(self, tokens: list[str], index: int) -> bool:
        """Return whether the token at `index` follows a sentence terminator."""

        previous = tokens[index - 1]
        if not ending_punctuation(previous):
            return False
        if not previous.endswith(TERMINAL_ENDINGS):
            return False
        if previous.endswith(_ELLIPSIS_TAIL):
            return False
        return index < 2 or not tokens[index - 2].endswith(_ELLIPSIS_TAIL)
