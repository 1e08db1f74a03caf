"""
Civic complaint classification engine.

Assigns each citizen complaint (description and/or photo URL) a category,
severity, responsible department and a classifiable flag, using a
chat-completion model with provider fallback:
- Taxonomy (closed enums with key/display pairs)
- Prompt rendering (Jinja2)
- Sarvam / OpenRouter clients
- Response parsing, normalization and validation
- Fallback orchestration that never raises to the caller

Architecture: httpx provider clients + staged response pipeline + fallback engine
"""

from civic_triage.models.classification import ClassificationResult
from civic_triage.models.enums import ComplaintCategory, Department, Severity
from civic_triage.orchestration.engine import ClassificationEngine

__version__ = "0.1.0"

__all__ = [
    "ClassificationEngine",
    "ClassificationResult",
    "ComplaintCategory",
    "Department",
    "Severity",
    "__version__",
]
