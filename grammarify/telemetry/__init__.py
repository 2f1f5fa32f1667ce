"""Telemetry and observability helpers.

This package emits deterministic stage events for auditing normalization runs.
"""

from .logger import StageLogger

__all__ = ["StageLogger"]
