"""Custom Prometheus metrics for the classification engine.

The host process exposes these through its own /metrics endpoint.
Alert rules should be configured for:
- provider_fallbacks_total (primary provider degrading)
- provider_attempts_total{outcome!="success"} (provider outages)
- classifications_total{classifiable="false"} (spam or model drift)
"""

from prometheus_client import Counter, Histogram

# === Provider Metrics ===

provider_attempts_total = Counter(
    "provider_attempts_total",
    "Classification attempts by provider and outcome",
    ["provider", "outcome"],
)
"""
Provider attempts counter.

Labels:
- provider: sarvam, openrouter
- outcome: success, transport_error, invalid_response, degenerate

Alert thresholds:
- WARN: non-success rate > 10% for a provider
- CRITICAL: non-success rate > 50% for a provider
"""

provider_fallbacks_total = Counter(
    "provider_fallbacks_total",
    "Fallbacks from one provider to the next by reason",
    ["reason"],
)
"""
Fallback counter.

Labels:
- reason: outcome of the attempt that failed (transport_error, invalid_response, degenerate)
"""

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Provider round-trip latency in seconds",
    ["provider", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 30.0],
)
"""
Provider latency histogram.

Buckets stop at the 30s call timeout.
"""

llm_tokens_total = Counter(
    "llm_tokens_total",
    "Total tokens consumed by provider and type",
    ["provider", "token_type"],
)
"""
Token consumption counter.

Labels:
- provider: Provider name
- token_type: prompt (input tokens), completion (output tokens)

Used for cost estimation across the two paid providers.
"""

# === Validation Metrics ===

validation_failures_total = Counter(
    "validation_failures_total",
    "Unusable provider responses by stage and error type",
    ["stage", "error_type"],
)
"""
Validation failures counter.

Labels:
- stage: stage1 (JSON extract), stage2 (schema), stage4 (taxonomy)
- error_type: no_json_object, json_decode_error, schema_error, taxonomy_violation
"""

# === Outcome Metrics ===

input_short_circuits_total = Counter(
    "input_short_circuits_total",
    "Submissions rejected before any provider call",
    ["reason"],
)
"""
Input gate counter.

Labels:
- reason: no_input, description_too_short, description_gibberish
"""

classifications_total = Counter(
    "classifications_total",
    "Final classifications by category and classifiable flag",
    ["category", "classifiable"],
)
"""
Final outcome counter.

Labels:
- category: taxonomy key (ROAD_DAMAGE, NOT_A_COMPLAINT, ...)
- classifiable: true, false

A rising NOT_A_COMPLAINT share with steady traffic usually means both
providers are failing, not that citizens stopped complaining.
"""
