"""Behavioral properties of `Grammarify.clean` over representative sentences."""

from __future__ import annotations

import pytest

from grammarify import Grammarify

_ENGINE = Grammarify()

_SENTENCES = [
    "ur gr8",
    "sooo good",
    "the the dog ran",
    "every thing is fine",
    "I have 3,000 dollars",
    "I was thinking yesterday... to test you.",
    "hi .how are u",
    "omg!! that was gr8",
    "ill be there in 2 hrs",
    "wait..what , no way",
]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ur gr8", "Your great."),
        ("sooo good", "Sooo good."),
        ("the the dog ran", "The dog ran."),
        ("every thing is fine", "Everything is fine."),
        ("I have 3,000 dollars", "I have 3,000 dollars."),
        ("I was thinking yesterday... to test you.", "I was thinking yesterday... to test you."),
        ("wait..what , no way", "Wait... what, no way."),
    ],
)
def test_reference_sentences(raw: str, expected: str) -> None:
    """Reference inputs should clean to their documented outputs."""

    assert _ENGINE.clean(raw) == expected


@pytest.mark.parametrize("raw", _SENTENCES)
def test_cleaned_sentences_end_in_terminal_punctuation(raw: str) -> None:
    """Every non-URL sentence with words should end in `.`, `!`, `?` or `"`."""

    assert _ENGINE.clean(raw)[-1] in '.!?"'


@pytest.mark.parametrize("raw", _SENTENCES)
def test_cleaning_is_idempotent(raw: str) -> None:
    """Cleaning an already cleaned sentence should not change it again."""

    once = _ENGINE.clean(raw)

    assert _ENGINE.clean(once) == once


@pytest.mark.parametrize(
    "raw",
    ["http://example.com", "see //comment here", "ur gr8 at https://x.io/a..b"],
)
def test_url_guard_returns_input_unchanged(raw: str) -> None:
    """Inputs containing `//` are never modified."""

    assert _ENGINE.clean(raw) == raw


def test_unfixed_stretched_token_keeps_original_characters() -> None:
    """A stretched word with no dictionary match keeps every letter."""

    assert _ENGINE.clean("preettyyyy cool") == "Preettyyyy cool."
