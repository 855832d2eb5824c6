"""Tests for summarize, tap, map and unwrap combinators."""

import pytest

from outcomes.combinators import (
    map_failure,
    map_success,
    summarize,
    tap_if_bare_success,
    tap_if_success,
    unwrap_or,
)
from outcomes.errors import UnsupportedOutcomeError
from outcomes.outcome import FAILURE, SUCCESS, Outcome, failure, success


class TestSummarize:
    def test_drops_success_payload(self):
        assert summarize(success(42)) == SUCCESS

    def test_bare_success(self):
        assert summarize(SUCCESS) == SUCCESS

    def test_keeps_failure(self):
        outcome = failure("not_found")
        assert summarize(outcome) is outcome

    def test_idempotent(self):
        for outcome in [success(1), SUCCESS, failure("x"), FAILURE]:
            assert summarize(summarize(outcome)) == summarize(outcome)

    def test_other_tag_unsupported(self):
        with pytest.raises(UnsupportedOutcomeError):
            summarize(Outcome.of("pending", 1))


class TestTapIfSuccess:
    def test_calls_with_value_and_returns_input(self):
        seen = []
        outcome = success(42)
        result = tap_if_success(outcome, lambda v: seen.append(v) or "ignored")
        assert result is outcome
        assert seen == [42]

    @pytest.mark.parametrize(
        "outcome",
        [SUCCESS, failure("x"), FAILURE, success(1, 2), Outcome.of("other", 1)],
    )
    def test_skips_other_forms(self, outcome):
        calls = []
        assert tap_if_success(outcome, calls.append) is outcome
        assert calls == []

    def test_function_errors_propagate(self):
        def boom(_):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            tap_if_success(success(1), boom)


class TestTapIfBareSuccess:
    def test_calls_without_arguments(self):
        calls = []
        assert tap_if_bare_success(SUCCESS, lambda: calls.append("called")) is SUCCESS
        assert calls == ["called"]

    @pytest.mark.parametrize("outcome", [success(1), FAILURE, failure("x")])
    def test_skips_other_forms(self, outcome):
        calls = []
        assert tap_if_bare_success(outcome, lambda: calls.append("called")) is outcome
        assert calls == []


class TestMapSuccess:
    def test_plain_value_is_wrapped(self):
        assert map_success(success(42), lambda v: v + 1) == success(43)

    def test_success_result_returned_verbatim(self):
        assert map_success(success(42), lambda v: success(v + 1)) == success(43)

    def test_failure_result_retags(self):
        result = map_success(success(42), lambda _: failure("Next operation failed"))
        assert result == failure("Next operation failed")

    def test_bare_results_returned_verbatim(self):
        assert map_success(success(1), lambda _: SUCCESS) == SUCCESS
        assert map_success(success(1), lambda _: FAILURE) == FAILURE

    def test_multi_payload_result_is_wrapped(self):
        inner = success(1, 2)
        assert map_success(success(0), lambda _: inner) == success(inner)

    def test_other_tag_result_is_wrapped(self):
        inner = Outcome.of("other", 1)
        assert map_success(success(0), lambda _: inner) == success(inner)

    def test_none_is_wrapped(self):
        assert map_success(success(1), lambda _: None) == success(None)

    @pytest.mark.parametrize(
        "outcome", [failure("check_notice"), FAILURE, SUCCESS, Outcome.of("other", 1)]
    )
    def test_passes_through_without_calling(self, outcome):
        def never(_):
            raise AssertionError("should not be called")

        assert map_success(outcome, never) is outcome


class TestMapFailure:
    def test_plain_value_is_wrapped_as_failure(self):
        assert map_failure(failure("check_notice"), lambda _: "custom") == failure("custom")

    def test_success_result_recovers(self):
        assert map_failure(failure("missing"), lambda _: success(0)) == success(0)

    def test_success_passes_through(self):
        outcome = success(42)
        assert map_failure(outcome, lambda _: "not called") is outcome

    def test_bare_failure_passes_through(self):
        assert map_failure(FAILURE, lambda _: "not called") is FAILURE


class TestUnwrapOr:
    def test_success_value(self):
        assert unwrap_or(success(42), 0) == 42

    def test_failure_default(self):
        assert unwrap_or(failure("not_found"), None) is None
        assert unwrap_or(failure("not_found"), "default") == "default"

    def test_bare_failure_default(self):
        assert unwrap_or(FAILURE, "default") == "default"

    def test_falsy_success_value(self):
        assert unwrap_or(success(0), 5) == 0

    @pytest.mark.parametrize(
        "outcome", [SUCCESS, success(1, 2), Outcome.of("other", 1), None]
    )
    def test_unsupported_inputs_raise(self, outcome):
        with pytest.raises(UnsupportedOutcomeError):
            unwrap_or(outcome, "default")
