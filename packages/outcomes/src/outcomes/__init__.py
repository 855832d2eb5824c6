"""Combinators for tagged success/failure outcome values."""

import logging

from outcomes.combinators import (
    map_failure,
    map_success,
    summarize,
    tap_if_bare_success,
    tap_if_success,
    unwrap_or,
)
from outcomes.errors import (
    InvalidOutcomeError,
    OutcomeError,
    PayloadShapeError,
    UnsupportedOutcomeError,
)
from outcomes.grouping import DEFAULT_REQUIRED_TAGS, collect_errors, group_by_tag
from outcomes.outcome import (
    FAILURE,
    SUCCESS,
    Outcome,
    Status,
    failure,
    is_failure,
    is_success,
    success,
)
from outcomes.pipeline import Pipeline
from outcomes.sequence import filter_successes, map_while_success, reject_failures

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_REQUIRED_TAGS",
    "FAILURE",
    "InvalidOutcomeError",
    "Outcome",
    "OutcomeError",
    "PayloadShapeError",
    "Pipeline",
    "SUCCESS",
    "Status",
    "UnsupportedOutcomeError",
    "collect_errors",
    "failure",
    "filter_successes",
    "group_by_tag",
    "is_failure",
    "is_success",
    "map_failure",
    "map_success",
    "map_while_success",
    "reject_failures",
    "success",
    "summarize",
    "tap_if_bare_success",
    "tap_if_success",
    "unwrap_or",
]
