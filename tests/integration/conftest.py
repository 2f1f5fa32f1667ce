"""Integration-test fixtures for deterministic CLI configuration."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_grammarify_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of CLI tests."""

    monkeypatch.delenv("GRAMMARIFY_SUBSTITUTIONS", raising=False)
    monkeypatch.delenv("GRAMMARIFY_DISCONNECTED_WORDS", raising=False)
