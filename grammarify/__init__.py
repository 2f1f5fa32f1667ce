"""Top-level package for Grammarify.

This package provides a deterministic normalization pass that turns chat-style
sentences into capitalized, punctuated sentences. The main entry point is
`Grammarify`.
"""

from .engine import Grammarify

__all__ = ["Grammarify", "__version__"]

__version__ = "0.1.0"
