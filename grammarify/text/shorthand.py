"""Shorthand dictionary and token expansion.

Responsibilities:
- Hold the built-in chat-shorthand table and merge caller overrides into it.
- Replace shorthand tokens while preserving their trailing punctuation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import re
from types import MappingProxyType

DEFAULT_SHORTHAND: Mapping[str, str] = MappingProxyType(
    {
        "2night": "tonight",
        "2nite": "tonight",
        "afaik": "as far as I know",
        "afk": "away from keyboard",
        "asap": "as soon as possible",
        "asl": "American Sign Language",
        "b/c": "because",
        "bc": "because",
        "bf": "boyfriend",
        "brb": "be right back",
        "btw": "by the way",
        "couldnt": "couldn't",
        "cu": "see you",
        "cuz": "because",
        "diy": "do it yourself",
        "dont": "don't",
        "dosent": "doesn't",
        "eachother": "each other",
        "eg": "example",
        "els": "else",
        "faq": "frequently asked questions",
        "ftw": "for the win",
        "fyi": "for your information",
        "gf": "girlfriend",
        "gl": "good luck",
        "glhf": "good luck, have fun",
        "goodluck": "good luck",
        "gotta": "got to",
        "gr8": "great",
        "hada": "had a",
        "hbu": "how about you",
        "hes": "he's",
        "hf": "have fun",
        "hmu": "hit me up",
        "howre": "how're",
        "howve": "how've",
        "hr": "hour",
        "hrs": "hours",
        "i": "I",
        "id": "I'd",
        "idk": "I don't know",
        "iirc": "if I remember correctly",
        "ill": "I'll",
        "im": "I'm",
        "isnt": "isn't",
        "itll": "it'll",
        "itt": "in this thread",
        "ive": "I've",
        "kinda": "kind of",
        "lol": "LOL",
        "msg": "message",
        "n/a": "N/A",
        "na": "N/A",
        "nite": "night",
        "noob": "newbie",
        "omg": "oh my God",
        "op": "original poster",
        "pls": "please",
        "plx": "please",
        "plz": "please",
        "pov": "point of view",
        "ppl": "people",
        "rofl": "ROFL",
        "rtfm": "read the fucking manual",
        "shes": "she's",
        "tba": "to be announced",
        "tbh": "to be honest",
        "thatll": "that'll",
        "thats": "that's",
        "theres": "there's",
        "theyd": "they'd",
        "theyll": "they'll",
        "theyre": "they're",
        "theyve": "they've",
        "tho": "though",
        "thru": "through",
        "tryna": "trying to",
        "ty": "thank you",
        "tyvm": "thank you very much",
        "u": "you",
        "ur": "your",
        "w": "with",
        "w/": "with",
        "w/o": "without",
        "wanna": "want to",
        "weve": "we've",
        "whaaat": "what",
        "whaat": "what",
        "whens": "when's",
        "wheres": "where's",
        "whos": "who's",
        "whys": "why's",
        "wk": "week",
        "wks": "weeks",
        "wo": "without",
        "wont": "won't",
        "wouldnt": "wouldn't",
        "wtf": "what the fuck",
        "wth": "what the Hell",
        "wya": "where are you at",
        "yknow": "you know",
        "ymmv": "your mileage may vary",
        "youd": "you'd",
        "youll": "you'll",
        "youre": "you're",
        "youve": "you've",
    }
)


class ShorthandMap(Mapping[str, str]):
    """Immutable lowercase shorthand table shared by de-stretching and expansion."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str]) -> None:
        """Freeze a validated copy of `entries` with lowercase keys."""

        frozen: dict[str, str] = {}
        for key, expansion in entries.items():
            if not isinstance(key, str) or not key.strip():
                raise ValueError("Shorthand keys must be non-empty strings.")
            if not isinstance(expansion, str) or not expansion.strip():
                raise ValueError(f"Shorthand `{key}` must map to a non-empty string.")
            frozen[key.lower()] = expansion
        self._entries = MappingProxyType(frozen)

    @classmethod
    def merged(cls, overrides: Mapping[str, str] | None = None) -> ShorthandMap:
        """Return the default table merged with `overrides`; overrides win."""

        entries = dict(DEFAULT_SHORTHAND)
        for key, expansion in (overrides or {}).items():
            entries[key.lower() if isinstance(key, str) else key] = expansion
        return cls(entries)

    def lookup(self, word: str) -> str | None:
        """Return the expansion for `word` compared case-insensitively."""

        return self._entries.get(word.lower())

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ShorthandMap({len(self._entries)} entries)"


class ShorthandExpander:
    """Replace shorthand tokens with their expansions.

    Only tokens shaped as a word (letters, digits, apostrophes, slashes)
    followed by an optional run of ``? ! . ; +`` are considered. The trailing
    run is re-appended to the expansion, so ``u?`` becomes ``you?``.
    """

    _TOKEN_RE = re.compile(r"([A-Za-z0-9'/]*)([?!.;+]*)")

    def __init__(self, shorthand_map: ShorthandMap) -> None:
        """Initialize with the shared shorthand table."""

        self._map = shorthand_map

    def apply(self, tokens: list[str]) -> list[str]:
        """Return tokens with shorthand expanded."""

        return self.expand(tokens)[0]

    def expand(self, tokens: list[str]) -> tuple[list[str], int]:
        """Return expanded tokens and the number of replaced tokens."""

        expanded: list[str] = []
        replacements = 0
        for token in tokens:
            match = self._TOKEN_RE.fullmatch(token)
            expansion = self._map.lookup(match.group(1)) if match else None
            if expansion is None:
                expanded.append(token)
                continue
            expanded.append(expansion + match.group(2))
            replacements += 1
        return expanded, replacements
