"""Outcome model: tagged values with zero, one or many payload values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from outcomes.errors import PayloadShapeError


class Status(str, Enum):
    """Privileged tags recognized by every combinator."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class Outcome:
    """A tag plus an ordered payload tuple.

    ``payload == ()`` is the bare form, one element the single-payload form,
    two or more the multi-payload form.
    """

    tag: str
    payload: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        # Enum members become plain strings so grouping keys never mix the two.
        if isinstance(self.tag, Enum):
            object.__setattr__(self, "tag", self.tag.value)
        if not isinstance(self.payload, tuple):
            object.__setattr__(self, "payload", tuple(self.payload))

    @classmethod
    def of(cls, tag: str | Status, *values: Any) -> Outcome:
        return cls(tag=tag, payload=values)

    @property
    def is_bare(self) -> bool:
        return len(self.payload) == 0

    @property
    def is_single(self) -> bool:
        return len(self.payload) == 1

    @property
    def is_multi(self) -> bool:
        return len(self.payload) > 1

    @property
    def value(self) -> Any:
        if not self.is_single:
            raise PayloadShapeError(
                f"{self.tag!r} outcome carries {len(self.payload)} payload values, expected 1",
                outcome=self,
            )
        return self.payload[0]

    def __repr__(self) -> str:
        if self.is_bare:
            return f"Outcome({self.tag!r})"
        values = ", ".join(repr(v) for v in self.payload)
        return f"Outcome({self.tag!r}, {values})"


SUCCESS = Outcome(Status.SUCCESS)
FAILURE = Outcome(Status.FAILURE)


def success(*values: Any) -> Outcome:
    """Build a success outcome; no arguments gives the bare success tag."""
    return Outcome(Status.SUCCESS, values)


def failure(*values: Any) -> Outcome:
    """Build a failure outcome; no arguments gives the bare failure tag."""
    return Outcome(Status.FAILURE, values)


def is_success(outcome: Any) -> bool:
    return isinstance(outcome, Outcome) and outcome.tag == Status.SUCCESS.value


def is_failure(outcome: Any) -> bool:
    return isinstance(outcome, Outcome) and outcome.tag == Status.FAILURE.value
