"""Collapse stretched words toward known shorthand spellings.

Responsibilities:
- Locate runs of repeated adjacent characters inside a token.
- Search single-character deletions, guided by a pivot span, until the
  shortened token is a key of the shorthand table.

The search is a heuristic, not an enumeration of every deletion order. A
token whose surviving letters never form a known key is left untouched, so
``sooo`` stays ``sooo`` while ``whaaaaat`` becomes ``what``.
"""

from __future__ import annotations

from ..models.datatypes import StretchSpan
from .shorthand import ShorthandMap


def find_stretch_spans(token: str) -> tuple[StretchSpan, ...]:
    """Return every maximal run of two or more identical adjacent characters."""

    spans: list[StretchSpan] = []
    in_run = False
    for index in range(1, len(token)):
        if token[index] != token[index - 1]:
            in_run = False
            continue
        if in_run:
            spans[-1] = StretchSpan(start_index=spans[-1].start_index, end_index=index)
        else:
            spans.append(StretchSpan(start_index=index - 1, end_index=index))
            in_run = True
    return tuple(spans)


def unstretch(
    token: str,
    spans: tuple[StretchSpan, ...],
    pivot: int,
    shorthand_map: ShorthandMap,
) -> str | None:
    """Run one pivot attempt and return the dictionary form, or `None`.

    Each step first checks whether the current spelling is a shorthand key,
    then gives up once every span is exhausted. Otherwise it trims one
    duplicate from the span selected by the pivot (the last span for pivot 0)
    or, when that span is already exhausted, moves the pivot one span back.
    Other spans keep their original indices after a deletion.
    """

    span_count = len(spans)
    while True:
        expansion = shorthand_map.lookup(token)
        if expansion is not None:
            return expansion
        if sum(span.length for span in spans) == 0:
            return None

        selected = pivot - 1 if pivot > 0 else span_count - 1
        span = spans[selected]
        if span.length > 0:
            start = span.start_index
            token = token[:start] + token[start + 1 :]
            spans = spans[:selected] + (span.shrink(),) + spans[selected + 1 :]
        else:
            pivot = pivot - 1 if pivot > 0 else span_count - 1


class Destretcher:
    """Replace stretched tokens with the first successful pivot attempt."""

    def __init__(self, shorthand_map: ShorthandMap) -> None:
        """Initialize with the shared shorthand table."""

        self._map = shorthand_map

    def apply(self, tokens: list[str]) -> list[str]:
        """Return tokens with stretched words collapsed where possible."""

        return self.destretch(tokens)[0]

    def destretch(self, tokens: list[str]) -> tuple[list[str], int]:
        """Return de-stretched tokens and the number of replaced tokens."""

        fixed_tokens: list[str] = []
        fixed_count = 0
        for token in tokens:
            fixed = self.fix_token(token)
            if fixed is None:
                fixed_tokens.append(token)
                continue
            fixed_tokens.append(fixed)
            fixed_count += 1
        return fixed_tokens, fixed_count

    def fix_token(self, token: str) -> str | None:
        """Return the replacement for one token, or `None` when nothing matched."""

        spans = find_stretch_spans(token)
        for pivot in range(len(spans)):
            fixed = unstretch(token, spans, pivot, self._map)
            if fixed is not None:
                return fixed
        return None
