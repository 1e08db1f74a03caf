"""Monitoring and metrics instrumentation for the classification engine.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from civic_triage.monitoring.metrics import (
    classifications_total,
    input_short_circuits_total,
    llm_latency_seconds,
    llm_tokens_total,
    provider_attempts_total,
    provider_fallbacks_total,
    validation_failures_total,
)

__all__ = [
    "classifications_total",
    "input_short_circuits_total",
    "llm_latency_seconds",
    "llm_tokens_total",
    "provider_attempts_total",
    "provider_fallbacks_total",
    "validation_failures_total",
]
