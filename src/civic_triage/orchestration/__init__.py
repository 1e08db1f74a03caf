"""
Classification orchestration with provider fallback.

Main Components:
    - ClassificationEngine: Runs the input check and provider attempts
    - ProviderSelection: Immutable primary/secondary policy
    - InputGate: Local pre-checks that avoid provider calls
    - ClassificationTrace: Audit record of one classification

Usage:
    >>> from civic_triage.orchestration import ClassificationEngine
    >>> engine = ClassificationEngine(clients, selection, prompt_builder)
    >>> result = await engine.classify("Huge pothole near the market", None)
"""

from civic_triage.orchestration.engine import ClassificationEngine
from civic_triage.orchestration.input_gate import InputGate, InputVerdict
from civic_triage.orchestration.metadata import (
    AttemptOutcome,
    AttemptRecord,
    ClassificationState,
    ClassificationTrace,
)
from civic_triage.orchestration.selection import OPENROUTER, SARVAM, ProviderSelection

__all__ = [
    "ClassificationEngine",
    "InputGate",
    "InputVerdict",
    "AttemptOutcome",
    "AttemptRecord",
    "ClassificationState",
    "ClassificationTrace",
    "ProviderSelection",
    "SARVAM",
    "OPENROUTER",
]
