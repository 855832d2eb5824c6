"""Scalar combinators: each consumes one Outcome."""

from __future__ import annotations

from typing import Any, Callable

from outcomes.errors import UnsupportedOutcomeError
from outcomes.outcome import SUCCESS, Outcome, Status, is_failure, is_success


def summarize(outcome: Outcome) -> Outcome:
    """Drop the payload of a success, keep a failure as is.

    Useful when the success value means nothing to the caller and only
    "did it work, and if not why" matters.

        >>> summarize(success(42))
        Outcome('success')
        >>> summarize(failure("not_found"))
        Outcome('failure', 'not_found')
    """
    if is_success(outcome):
        return SUCCESS
    if is_failure(outcome):
        return outcome
    raise UnsupportedOutcomeError(
        f"summarize expects a success or failure outcome, got {outcome!r}",
        outcome=outcome,
    )


def tap_if_success(outcome: Outcome, fn: Callable[[Any], Any]) -> Outcome:
    """Call ``fn(value)`` for a single-payload success; always return ``outcome``."""
    if is_success(outcome) and outcome.is_single:
        fn(outcome.payload[0])
    return outcome


def tap_if_bare_success(outcome: Outcome, fn: Callable[[], Any]) -> Outcome:
    """Call ``fn()`` for the bare success tag; always return ``outcome``."""
    if is_success(outcome) and outcome.is_bare:
        fn()
    return outcome


def map_success(outcome: Outcome, fn: Callable[[Any], Any]) -> Outcome:
    """Transform the value of a single-payload success.

    ``fn`` may return a plain value, which becomes a new success, or a
    success/failure outcome (bare or single payload), which is returned as
    is. Returning a failure is how a follow-up fallible step reports that it
    did not work:

        >>> map_success(success(42), lambda v: v + 1)
        Outcome('success', 43)
        >>> map_success(success(42), lambda v: failure("next step failed"))
        Outcome('failure', 'next step failed')

    Anything other than a single-payload success passes through untouched.
    """
    if not (is_success(outcome) and outcome.is_single):
        return outcome
    return _flatten(fn(outcome.payload[0]), Status.SUCCESS)


def map_failure(outcome: Outcome, fn: Callable[[Any], Any]) -> Outcome:
    """Transform the reason of a single-payload failure, like ``map_success``."""
    if not (is_failure(outcome) and outcome.is_single):
        return outcome
    return _flatten(fn(outcome.payload[0]), Status.FAILURE)


def unwrap_or(outcome: Outcome, default: Any) -> Any:
    """Return the value of a single-payload success, or ``default`` for a failure.

    Bare or multi-payload successes and other tags have no sensible answer
    and raise UnsupportedOutcomeError.
    """
    if is_success(outcome) and outcome.is_single:
        return outcome.payload[0]
    if is_failure(outcome):
        return default
    raise UnsupportedOutcomeError(
        f"unwrap_or expects a single-payload success or a failure, got {outcome!r}",
        outcome=outcome,
    )


def _flatten(result: Any, status: Status) -> Outcome:
    if (is_success(result) or is_failure(result)) and not result.is_multi:
        return result
    return Outcome(status, (result,))
