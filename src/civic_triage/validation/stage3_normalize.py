"""
Stage 3: Normalization.

Maps each field onto its taxonomy (key match, then display match, then
default) and reconciles the ``classifiable`` flag with the category.

Consistency rule: the result is unclassifiable when the model said
``classifiable: false`` OR the category resolved to NOT_A_COMPLAINT. An
unclassifiable result always collapses to the canonical
NOT_A_COMPLAINT / LOW / OTHER triple, so storage never sees a
contradictory pair.
"""

import structlog

from civic_triage.models.classification import ClassificationResult, RawClassification
from civic_triage.models.enums import ComplaintCategory, Department, Severity
from civic_triage.models.taxonomy import normalize_member

logger = structlog.get_logger(__name__)


class Stage3Normalize:
    """
    Stage 3: never fails, only resolves.
    """

    def __init__(
        self,
        default_category: ComplaintCategory = ComplaintCategory.OTHER,
        default_severity: Severity = Severity.MEDIUM,
        default_department: Department = Department.OTHER,
    ):
        self.default_category = default_category
        self.default_severity = default_severity
        self.default_department = default_department

    def normalize(self, raw: RawClassification) -> ClassificationResult:
        category = normalize_member(raw.category, ComplaintCategory, self.default_category)

        explicitly_unclassifiable = raw.classifiable is False
        if explicitly_unclassifiable or category is ComplaintCategory.NOT_A_COMPLAINT:
            if explicitly_unclassifiable != (category is ComplaintCategory.NOT_A_COMPLAINT):
                logger.info(
                    "Resolved classifiable/category disagreement as unclassifiable",
                    model_classifiable=raw.classifiable,
                    model_category=raw.category,
                )
            return ClassificationResult.unclassifiable()

        severity = normalize_member(raw.severity, Severity, self.default_severity)
        department = normalize_member(raw.department, Department, self.default_department)

        return ClassificationResult(
            category=category,
            severity=severity,
            department=department,
            classifiable=True,
        )
