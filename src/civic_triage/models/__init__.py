"""
Data models for the classification engine.

Includes:
- Enums (ComplaintCategory, Severity, Department)
- Taxonomy tables and the key/display normalizer
- Business models (ClassificationRequest, ClassificationResult, RawClassification)
- LLM models (LLMGenerationRequest, LLMGenerationResponse)
"""

from civic_triage.models.enums import ComplaintCategory, Severity, Department
from civic_triage.models.taxonomy import (
    CATEGORY_DEPARTMENT,
    CATEGORY_DEFAULT_SEVERITY,
    DEPARTMENT_CATEGORIES,
    default_severity_for_category,
    department_for_category,
    is_member,
    normalize_member,
    taxonomy_pairs,
)
from civic_triage.models.classification import (
    ClassificationRequest,
    ClassificationResult,
    RawClassification,
)
from civic_triage.models.llm_models import LLMGenerationRequest, LLMGenerationResponse

__all__ = [
    # Enums
    "ComplaintCategory",
    "Severity",
    "Department",
    # Taxonomy
    "CATEGORY_DEPARTMENT",
    "CATEGORY_DEFAULT_SEVERITY",
    "DEPARTMENT_CATEGORIES",
    "default_severity_for_category",
    "department_for_category",
    "is_member",
    "normalize_member",
    "taxonomy_pairs",
    # Business models
    "ClassificationRequest",
    "ClassificationResult",
    "RawClassification",
    # LLM models
    "LLMGenerationRequest",
    "LLMGenerationResponse",
]
