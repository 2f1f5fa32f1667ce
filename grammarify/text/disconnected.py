"""Rejoin single words that were typed as two tokens."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_DISCONNECTED_WORDS: tuple[str, ...] = (
    "awesome",
    "everything",
    "herself",
    "himself",
    "nowhere",
    "today",
    "yourself",
)


class DisconnectedWordJoiner:
    """Merge adjacent token pairs whose concatenation is a known word.

    Matching is case-insensitive and the canonical lowercase word replaces
    the pair. After a merge the new token is compared with its next
    neighbour again, so ``every thing`` and ``to day`` both collapse.
    """

    def __init__(self, words: Iterable[str] = DEFAULT_DISCONNECTED_WORDS) -> None:
        """Initialize with an ordered sequence of known single words."""

        self.words = tuple(word.lower() for word in words)
        self._known = frozenset(self.words)

    def apply(self, tokens: list[str]) -> list[str]:
        """Return tokens with disconnected words rejoined."""

        return self.rejoin(tokens)[0]

    def rejoin(self, tokens: list[str]) -> tuple[list[str], int]:
        """Return rejoined tokens and the number of merges performed."""

        joined: list[str] = []
        merges = 0
        for token in tokens:
            if joined:
                candidate = (joined[-1] + token).lower()
                if candidate in self._known:
                    joined[-1] = candidate
                    merges += 1
                    continue
            joined.append(token)
        return joined, merges
