"""Error hierarchy for outcome combinators."""

from __future__ import annotations

from typing import Any


class OutcomeError(Exception):
    """Base error for all outcome combinator errors."""

    def __init__(
        self,
        message: str,
        *,
        outcome: Any = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.outcome = outcome
        self.cause = cause


class InvalidOutcomeError(OutcomeError):
    """A value that is not an acceptable Outcome reached a combinator."""


class UnsupportedOutcomeError(OutcomeError):
    """An Outcome whose form lies outside the operation's defined inputs."""


class PayloadShapeError(OutcomeError):
    """Single-payload access on a bare or multi-payload Outcome."""
