"""Unit tests for classification trace records."""

import pytest

from civic_triage.models.classification import ClassificationResult
from civic_triage.orchestration.metadata import (
    AttemptOutcome,
    AttemptRecord,
    ClassificationState,
    ClassificationTrace,
)


def record(outcome=AttemptOutcome.SUCCESS, result=None, provider="sarvam"):
    return AttemptRecord(
        provider=provider,
        state=ClassificationState.PRIMARY_ATTEMPT,
        outcome=outcome,
        latency_ms=1200,
        result=result,
    )


class TestAttemptRecord:

    def test_usable_needs_success_and_result(self):
        assert record(result=ClassificationResult.default()).usable
        assert not record(result=None).usable
        assert not record(AttemptOutcome.DEGENERATE, ClassificationResult.default()).usable
        assert not record(AttemptOutcome.TRANSPORT_ERROR).usable


class TestClassificationTrace:

    def test_minimal_trace(self):
        trace = ClassificationTrace(states=(ClassificationState.NOT_STARTED, ClassificationState.DONE))

        assert trace.network_calls == 0
        assert trace.summary()["states"] == ["not_started", "done"]

    def test_summary(self):
        trace = ClassificationTrace(
            states=(
                ClassificationState.NOT_STARTED,
                ClassificationState.INPUT_CHECK,
                ClassificationState.PRIMARY_ATTEMPT,
                ClassificationState.SECONDARY_ATTEMPT,
                ClassificationState.DONE,
            ),
            attempts=(
                record(AttemptOutcome.TRANSPORT_ERROR),
                record(result=ClassificationResult.default(), provider="openrouter"),
            ),
            fallback_reasons=("transport_error",),
            final_provider="openrouter",
            total_latency_ms=2500,
        )

        summary = trace.summary()
        assert trace.network_calls == 2
        assert summary["attempts"] == [
            {"provider": "sarvam", "state": "primary_attempt", "outcome": "transport_error"},
            {"provider": "openrouter", "state": "primary_attempt", "outcome": "success"},
        ]
        assert summary["fallback_reasons"] == ["transport_error"]
        assert summary["final_provider"] == "openrouter"

    @pytest.mark.parametrize(
        "states",
        [
            (),
            (ClassificationState.INPUT_CHECK, ClassificationState.DONE),
            (ClassificationState.NOT_STARTED, ClassificationState.INPUT_CHECK),
        ],
    )
    def test_state_bounds_enforced(self, states):
        with pytest.raises(ValueError):
            ClassificationTrace(states=states)

    def test_at_most_two_calls(self):
        with pytest.raises(ValueError, match="at most two"):
            ClassificationTrace(
                states=(ClassificationState.NOT_STARTED, ClassificationState.DONE),
                attempts=(record(), record(), record()),
            )
