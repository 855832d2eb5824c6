"""Group outcomes by tag and fold them into a single outcome."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from outcomes.errors import InvalidOutcomeError
from outcomes.outcome import Outcome, Status, failure, success

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_TAGS: tuple[str, ...] = (Status.SUCCESS.value, Status.FAILURE.value)


def group_by_tag(
    outcomes: Iterable[Outcome],
    required_tags: Iterable[str | Status] = DEFAULT_REQUIRED_TAGS,
) -> dict[str, list[Any]]:
    """Partition outcomes into ``{tag: [payload, ...]}``, keeping input order.

    Every tag in ``required_tags`` is present in the result, mapped to an
    empty list when nothing carried it. A bare outcome contributes its own
    tag as the payload, a multi-payload outcome contributes its payload tuple.

        >>> group_by_tag([success(1), failure(2), success(3), Outcome.of("other", 5)])
        {'success': [1, 3], 'failure': [2], 'other': [5]}
        >>> group_by_tag([Outcome.of("foo", 1)], ["baz"])
        {'baz': [], 'foo': [1]}
    """
    groups: dict[str, list[Any]] = {_tag_key(tag): [] for tag in required_tags}
    for outcome in outcomes:
        if not isinstance(outcome, Outcome):
            raise InvalidOutcomeError(f"Cannot group non-outcome value {outcome!r}", outcome=outcome)
        groups.setdefault(outcome.tag, []).append(_grouping_value(outcome))
    return groups


def collect_errors(outcomes: Iterable[Outcome]) -> Outcome:
    """Fold many outcomes into one.

    All successes give ``success([values...])``. Any failure gives
    ``failure([reasons...])``. Any tag other than success/failure is treated
    as an error too: the failure list then starts with a dict of those tags
    and their payloads, followed by the genuine failure reasons.
    """
    groups = group_by_tag(outcomes)
    successes = groups.pop(Status.SUCCESS.value)
    failures = groups.pop(Status.FAILURE.value)

    if groups:
        logger.debug("Anomalous tags collected as errors: %s", ", ".join(groups))
        return failure([groups, *failures])
    if failures:
        return failure(failures)
    return success(successes)


def _tag_key(tag: str | Status) -> str:
    return tag.value if isinstance(tag, Status) else tag


def _grouping_value(outcome: Outcome) -> Any:
    if outcome.is_bare:
        return outcome.tag
    if outcome.is_single:
        return outcome.payload[0]
    return outcome.payload
