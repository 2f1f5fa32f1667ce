"""Unit tests for the `Grammarify` orchestrator and its token-level operations."""

from __future__ import annotations

import io

import pytest

from grammarify import Grammarify
from grammarify.config import GrammarifyConfig
from grammarify.errors import InvalidArgumentError
from grammarify.telemetry.logger import StageLogger


def test_clean_runs_the_full_pipeline() -> None:
    """Shorthand, stretching, spacing and capitalization should combine."""

    engine = Grammarify()

    assert engine.clean("whaaaaat r u doing") == "What r you doing."
    assert engine.clean("hi .how are u") == "Hi. How are you."
    assert engine.clean("omg!! that was gr8") == "Oh my God!! That was great."
    assert engine.clean("hello,world") == "Hello, world."


def test_clean_normalizes_curly_quotes() -> None:
    """Curly quotes should be straightened and count as terminal punctuation."""

    assert Grammarify().clean("“hey” he said") == '"hey" he said.'
    assert Grammarify().clean("he said “hey”") == 'He said "hey"'


def test_clean_returns_empty_for_empty_or_blank_input() -> None:
    """Empty input and input with no surviving tokens clean to an empty string."""

    engine = Grammarify()

    assert engine.clean("") == ""
    assert engine.clean("   ") == ""
    assert engine.clean("...") == ""


def test_clean_with_report_counts_each_stage() -> None:
    """The report should expose per-stage counters."""

    report = Grammarify().clean_with_report("ill be there in 2 hrs")

    assert report.cleaned_text == "I'll be there in 2 hours."
    assert report.stretched_tokens_fixed == 1
    assert report.shorthand_expansions == 1
    assert report.words_rejoined == 0
    assert report.duplicates_removed == 0
    assert report.terminal_period_added is True
    assert report.url_guarded is False


def test_url_input_is_returned_untouched() -> None:
    """Anything containing `//` should bypass the pipeline."""

    text = "check http://example.com ur gr8"
    report = Grammarify().clean_with_report(text)

    assert report.cleaned_text == text
    assert report.url_guarded is True


def test_substitution_overrides_feed_stretching_and_expansion() -> None:
    """Caller entries should be visible to both dictionary consumers."""

    engine = Grammarify({"hey": "hello", "SMH": "shaking my head"})

    assert engine.clean("heyyy u") == "Hello you."
    assert engine.clean("smh") == "Shaking my head."


def test_extra_disconnected_words_are_appended() -> None:
    """Configured words should be rejoined alongside the defaults."""

    engine = Grammarify(disconnected_words=["cannot"])

    assert engine.clean("i can not go every thing") == "I cannot go everything."
    assert engine.disconnected_words[-1] == "cannot"


def test_from_config_uses_substitutions_and_words() -> None:
    """Engines built from config should honor both settings."""

    config = GrammarifyConfig(substitutions={"idc": "I don't care"}, disconnected_words=("into",))

    engine = Grammarify.from_config(config)

    assert engine.clean("idc in to it") == "I don't care into it."


def test_token_operations_accept_text_and_token_sequences() -> None:
    """Token operations should accept strings or token lists."""

    engine = Grammarify()

    assert engine.fix_stretching("whaaat  is up") == ["what", "is", "up"]
    assert engine.fix_shorthand(["brb"]) == ["be right back"]
    assert engine.fix_separated("every thing") == ["everything"]


def test_token_operations_do_not_mutate_caller_tokens() -> None:
    """Input token lists should be left as supplied."""

    tokens = ["u", "every", "thing"]

    Grammarify().fix_shorthand(tokens)
    Grammarify().fix_separated(tokens)

    assert tokens == ["u", "every", "thing"]


def test_type_contract_violations_fail_fast() -> None:
    """Non-text, non-token input should raise `InvalidArgumentError`."""

    engine = Grammarify()

    with pytest.raises(InvalidArgumentError, match="fix_shorthand"):
        engine.fix_shorthand(42)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        engine.fix_separated(["every", 1])  # type: ignore[list-item]
    with pytest.raises(TypeError):
        engine.fix_stretching(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError, match="clean"):
        engine.clean(None)  # type: ignore[arg-type]


def test_stage_logger_records_stage_events() -> None:
    """A configured stage logger should receive complete and skipped events."""

    sink = io.StringIO()
    engine = Grammarify(run_logger=StageLogger(sink=sink))

    engine.clean("whaaaat is up")
    engine.clean("see https://example.com")

    lines = sink.getvalue().splitlines()
    assert "[stage] level=INFO stage=destretch event=complete fixed=1" in lines
    assert "[stage] level=INFO stage=assemble event=complete duplicates=0" in lines
    assert "[stage] level=INFO stage=guard event=skipped reason=url" in lines
    assert not any("event=start" in line for line in lines)


def test_stage_logger_debug_level_includes_start_events() -> None:
    """Start events are emitted at debug level."""

    sink = io.StringIO()
    engine = Grammarify(run_logger=StageLogger(sink=sink, level="DEBUG"))

    engine.clean("ur gr8")

    assert "[stage] level=DEBUG stage=repair event=start" in sink.getvalue().splitlines()


def test_clean_capitalizes_after_leading_newline_or_tab() -> None:
    """Leading newlines and tabs should not hide the first word from capitalization."""

    engine = Grammarify()

    assert engine.clean("\n...hello there") == "Hello there."
    assert engine.clean("\t. hi") == "Hi."
