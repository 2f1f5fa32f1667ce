"""Shared typed data models for Grammarify.

This package contains dataclasses used across text stages to avoid
cross-module coupling and circular imports.
"""

from .datatypes import AssemblyResult, CleaningReport, StretchSpan

__all__ = [
    "AssemblyResult",
    "CleaningReport",
    "StretchSpan",
]
