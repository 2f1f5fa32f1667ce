"""Token helpers shared by token-level normalization stages."""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import InvalidArgumentError


def tokenize(text: str) -> list[str]:
    """Split text on whitespace and drop empty tokens."""

    return text.split()


def coerce_tokens(value: object, operation: str) -> list[str]:
    """Return a fresh token list from text or a sequence of string tokens.

    Text is split on single spaces with empty tokens dropped. The returned list
    is always a copy, so stages never mutate the caller's sequence.

    Raises:
        InvalidArgumentError: If `value` is neither text nor a sequence of strings.
    """

    if isinstance(value, str):
        return [token for token in value.split(" ") if token]
    if isinstance(value, Sequence) and all(isinstance(token, str) for token in value):
        return list(value)
    raise InvalidArgumentError(
        f"`{operation}` expects a string or a sequence of string tokens, "
        f"got {type(value).__name__}."
    )
