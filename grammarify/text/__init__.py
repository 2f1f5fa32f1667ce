"""Text normalization stages.

This package provides the deterministic repair, de-stretching, expansion,
rejoin and assembly building blocks composed by `Grammarify`.
"""

from .assembly import SentenceAssembler
from .cleaners import (
    NormalizeQuotes,
    RepairPeriodsAndEllipses,
    RepairSpaceAfterCharacter,
    TextCleaner,
)
from .disconnected import DEFAULT_DISCONNECTED_WORDS, DisconnectedWordJoiner
from .shorthand import DEFAULT_SHORTHAND, ShorthandExpander, ShorthandMap
from .stretching import Destretcher, find_stretch_spans, unstretch

__all__ = [
    "DEFAULT_DISCONNECTED_WORDS",
    "DEFAULT_SHORTHAND",
    "Destretcher",
    "DisconnectedWordJoiner",
    "NormalizeQuotes",
    "RepairPeriodsAndEllipses",
    "RepairSpaceAfterCharacter",
    "SentenceAssembler",
    "ShorthandExpander",
    "ShorthandMap",
    "TextCleaner",
    "find_stretch_spans",
    "unstretch",
]
