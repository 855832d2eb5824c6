"""Combinators over sequences of outcomes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from outcomes.errors import InvalidOutcomeError
from outcomes.outcome import Outcome, is_failure, is_success, success

logger = logging.getLogger(__name__)


def map_while_success(items: Iterable[Any], fn: Callable[[Any], Outcome]) -> Outcome:
    """Map ``fn`` over ``items``, stopping at the first failure.

    ``fn`` must return a single-payload success or a failure. The first
    failure is returned unchanged and no later item is passed to ``fn``;
    otherwise the collected values come back as ``success([...])`` in input
    order.
    """
    values: list[Any] = []
    for index, item in enumerate(items):
        result = fn(item)
        if is_failure(result):
            logger.debug("map_while_success halted at index %d", index)
            return result
        if not (is_success(result) and result.is_single):
            raise InvalidOutcomeError(
                f"Mapped function must return a single-payload success or a failure, got {result!r}",
                outcome=result,
            )
        values.append(result.payload[0])
    return success(values)


def reject_failures(items: Iterable[Any]) -> list[Any]:
    """Drop failure outcomes, keeping everything else in its original form."""
    return [item for item in items if not is_failure(item)]


def filter_successes(items: Iterable[Any]) -> list[Any]:
    return [item for item in items if is_success(item)]
