"""Fluent wrapper for chaining combinators at a call site.

    Pipeline(repo.insert(post)).tap_if_success(track_created).summarize()

reads the same as the nested function calls it replaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from outcomes import combinators
from outcomes.errors import InvalidOutcomeError
from outcomes.outcome import Outcome, is_failure, is_success


@dataclass(frozen=True, slots=True)
class Pipeline:
    outcome: Outcome

    def __post_init__(self) -> None:
        if not isinstance(self.outcome, Outcome):
            raise InvalidOutcomeError(
                f"Pipeline needs an Outcome, got {self.outcome!r}", outcome=self.outcome
            )

    @property
    def is_success(self) -> bool:
        return is_success(self.outcome)

    @property
    def is_failure(self) -> bool:
        return is_failure(self.outcome)

    def map_success(self, fn: Callable[[Any], Any]) -> Pipeline:
        return Pipeline(combinators.map_success(self.outcome, fn))

    def map_failure(self, fn: Callable[[Any], Any]) -> Pipeline:
        return Pipeline(combinators.map_failure(self.outcome, fn))

    def tap_if_success(self, fn: Callable[[Any], Any]) -> Pipeline:
        combinators.tap_if_success(self.outcome, fn)
        return self

    def tap_if_bare_success(self, fn: Callable[[], Any]) -> Pipeline:
        combinators.tap_if_bare_success(self.outcome, fn)
        return self

    def summarize(self) -> Outcome:
        return combinators.summarize(self.outcome)

    def unwrap_or(self, default: Any) -> Any:
        return combinators.unwrap_or(self.outcome, default)
