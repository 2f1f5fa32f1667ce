"""Sentence normalization engine.

Responsibilities:
- Compose string repair, tokenization, de-stretching, shorthand expansion,
  word rejoin and sentence assembly into one `clean` call.
- Hold the immutable shorthand table and disconnected-word list built once
  at construction time.

Key public types:
- `Grammarify`: the engine; `clean` and `clean_with_report` are its entry points.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Callable, TypeVar

from .errors import InvalidArgumentError
from .models.datatypes import CleaningReport
from .telemetry.logger import StageLogger
from .text.assembly import SentenceAssembler
from .text.cleaners import TextCleaner
from .text.disconnected import DEFAULT_DISCONNECTED_WORDS, DisconnectedWordJoiner
from .text.shorthand import ShorthandExpander, ShorthandMap
from .text.stretching import Destretcher
from .text.tokens import coerce_tokens, tokenize

if TYPE_CHECKING:
    from .config import GrammarifyConfig

_StageResult = TypeVar("_StageResult")

URL_MARKER = "//"


class Grammarify:
    """Turn one informally written sentence into a cleaner, punctuated sentence."""

    def __init__(
        self,
        substitution_map: Mapping[str, str] | None = None,
        *,
        disconnected_words: Iterable[str] = (),
        run_logger: StageLogger | None = None,
    ) -> None:
        """Build the merged shorthand table and the stage pipeline.

        Args:
            substitution_map: Caller entries merged over the built-in shorthand
                table; caller entries win on key collision.
            disconnected_words: Extra known words appended to the default
                disconnected-word list.
            run_logger: Optional stage logger; the engine is silent without one.
        """

        self.shorthand_map = ShorthandMap.merged(substitution_map)
        self._cleaner = TextCleaner()
        self._destretcher = Destretcher(self.shorthand_map)
        self._expander = ShorthandExpander(self.shorthand_map)
        self._joiner = DisconnectedWordJoiner(
            (*DEFAULT_DISCONNECTED_WORDS, *disconnected_words)
        )
        self._assembler = SentenceAssembler()
        self._run_logger = run_logger

    @classmethod
    def from_config(
        cls,
        config: GrammarifyConfig,
        run_logger: StageLogger | None = None,
    ) -> Grammarify:
        """Create an engine from a validated configuration."""

        config.validate()
        return cls(
            config.substitutions,
            disconnected_words=config.disconnected_words,
            run_logger=run_logger,
        )

    @property
    def disconnected_words(self) -> tuple[str, ...]:
        """Return the known single words used by the rejoin stage."""

        return self._joiner.words

    def clean(self, text: str) -> str:
        """Return the normalized form of `text`."""

        return self.clean_with_report(text).cleaned_text

    def clean_with_report(self, text: str) -> CleaningReport:
        """Normalize `text` and return the result with per-stage counters."""

        if not isinstance(text, str):
            raise InvalidArgumentError(f"`clean` expects a string, got {type(text).__name__}.")
        if not text:
            return CleaningReport(original_text=text, cleaned_text="")
        if URL_MARKER in text:
            if self._run_logger is not None:
                self._run_logger.log_stage_skipped("guard", reason="url")
            return CleaningReport(original_text=text, cleaned_text=text, url_guarded=True)

        repaired = self._run_stage("repair", lambda: self._cleaner.clean(text))
        tokens = tokenize(repaired)
        tokens, stretched = self._run_stage(
            "destretch",
            lambda: self._destretcher.destretch(tokens),
            describe=lambda result: {"fixed": result[1]},
        )
        tokens, expanded = self._run_stage(
            "expand",
            lambda: self._expander.expand(tokens),
            describe=lambda result: {"expanded": result[1]},
        )
        tokens, rejoined = self._run_stage(
            "rejoin",
            lambda: self._joiner.rejoin(tokens),
            describe=lambda result: {"merged": result[1]},
        )
        assembled = self._run_stage(
            "assemble",
            lambda: self._assembler.assemble(tokens),
            describe=lambda result: {"duplicates": result.duplicates_removed},
        )
        return CleaningReport(
            original_text=text,
            cleaned_text=assembled.text,
            stretched_tokens_fixed=stretched,
            shorthand_expansions=expanded,
            words_rejoined=rejoined,
            duplicates_removed=assembled.duplicates_removed,
            terminal_period_added=assembled.terminal_period_added,
        )

    def fix_stretching(self, value: str | list[str]) -> list[str]:
        """Collapse stretched tokens of text or a token sequence."""

        return self._destretcher.apply(coerce_tokens(value, "fix_stretching"))

    def fix_shorthand(self, value: str | list[str]) -> list[str]:
        """Expand shorthand tokens of text or a token sequence."""

        return self._expander.apply(coerce_tokens(value, "fix_shorthand"))

    def fix_separated(self, value: str | list[str]) -> list[str]:
        """Rejoin disconnected words of text or a token sequence."""

        return self._joiner.apply(coerce_tokens(value, "fix_separated"))

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        describe: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure events."""

        if self._run_logger is None:
            return action()

        self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            raise
        context = describe(result) if describe is not None else {}
        self._run_logger.log_stage_complete(stage_name, **context)
        return result
