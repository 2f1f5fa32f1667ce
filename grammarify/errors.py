"""Domain exceptions for normalization and CLI diagnostics."""

from __future__ import annotations


class NormalizationStageError(RuntimeError):
    """Raised when a specific normalization or configuration stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped normalization error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class InvalidArgumentError(TypeError):
    """Raised when a token-level operation receives neither text nor tokens."""
