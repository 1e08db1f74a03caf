"""
Classification trace tracking.

Defines the frozen records that capture what the engine did for one
complaint: states visited, each provider attempt, and why fallbacks
happened. The trace is logged and returned for audit, since the
classification decides which department gets notified.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from civic_triage.models.classification import ClassificationResult


class ClassificationState(str, Enum):
    NOT_STARTED = "not_started"
    INPUT_CHECK = "input_check"
    PRIMARY_ATTEMPT = "primary_attempt"
    SECONDARY_ATTEMPT = "secondary_attempt"
    PRIMARY_RETRY = "primary_retry"
    DONE = "done"


class AttemptOutcome(str, Enum):
    SUCCESS = "success"
    TRANSPORT_ERROR = "transport_error"
    INVALID_RESPONSE = "invalid_response"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class AttemptRecord:
    """
    One provider call.

    Attributes:
        provider: Provider name
        state: Engine state the call was made in
        outcome: What came of it
        latency_ms: Wall-clock time for call plus parsing
        result: Normalized result (None unless outcome is SUCCESS)
        error_type: Exception class name on failure
        error: Exception message on failure
        raw_response: Model output, kept for audit
    """

    provider: str
    state: ClassificationState
    outcome: AttemptOutcome
    latency_ms: int
    result: Optional[ClassificationResult] = None
    error_type: Optional[str] = None
    error: Optional[str] = None
    raw_response: Optional[str] = None

    @property
    def usable(self) -> bool:
        return self.outcome is AttemptOutcome.SUCCESS and self.result is not None


@dataclass(frozen=True)
class ClassificationTrace:
    """
    Complete history of one classification.

    Attributes:
        states: States visited, in order (always starts NOT_STARTED, ends DONE)
        attempts: Provider calls, in order (at most two)
        fallback_reasons: One entry per fallback taken
        short_circuit_reason: Input gate reason when no call was made
        final_provider: Provider whose answer was used, if any
        total_latency_ms: Time from start to final result
    """

    states: tuple[ClassificationState, ...]
    attempts: tuple[AttemptRecord, ...] = ()
    fallback_reasons: tuple[str, ...] = ()
    short_circuit_reason: Optional[str] = None
    final_provider: Optional[str] = None
    total_latency_ms: int = 0

    def __post_init__(self) -> None:
        if not self.states or self.states[0] is not ClassificationState.NOT_STARTED:
            raise ValueError("states must start with NOT_STARTED")
        if self.states[-1] is not ClassificationState.DONE:
            raise ValueError("states must end with DONE")
        if len(self.attempts) > 2:
            raise ValueError("at most two provider calls per classification")
        if self.total_latency_ms < 0:
            raise ValueError("total_latency_ms must be >= 0")

    @property
    def network_calls(self) -> int:
        return len(self.attempts)

    def summary(self) -> dict:
        """Log-friendly view."""
        return {
            "states": [s.value for s in self.states],
            "attempts": [
                {"provider": a.provider, "state": a.state.value, "outcome": a.outcome.value}
                for a in self.attempts
            ],
            "fallback_reasons": list(self.fallback_reasons),
            "short_circuit_reason": self.short_circuit_reason,
            "final_provider": self.final_provider,
            "total_latency_ms": self.total_latency_ms,
        }
