"""Basic smoke tests for project wiring.

These tests verify only import-level and basic object creation behavior.
"""

import grammarify
from grammarify import Grammarify
from grammarify.config import GrammarifyConfig
from grammarify.text import DEFAULT_DISCONNECTED_WORDS, DEFAULT_SHORTHAND


def test_engine_can_be_instantiated() -> None:
    """Engine class should be constructible without overrides."""

    engine = Grammarify()
    assert len(engine.shorthand_map) == len(DEFAULT_SHORTHAND)
    assert engine.disconnected_words == DEFAULT_DISCONNECTED_WORDS


def test_config_dataclass_defaults() -> None:
    """Config should default to no overrides."""

    config = GrammarifyConfig()
    assert dict(config.substitutions) == {}
    assert config.disconnected_words == ()


def test_package_exposes_version() -> None:
    """Package should expose a version string."""

    assert grammarify.__version__
