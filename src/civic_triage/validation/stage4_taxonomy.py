"""
Stage 4: Taxonomy check.

Confirms the normalized category, severity and department belong to
their closed taxonomies (by member, key or display value). A failure here
marks the attempt as failed, which triggers fallback; it is never turned
into an "unclassifiable" verdict.

With the default Stage3Normalize every field is already an enum member,
so this only fires for a substituted normalizer (``ResponsePipeline``
accepts one) or a result built with ``model_construct``.
"""

import structlog

from civic_triage.models.classification import ClassificationResult
from civic_triage.models.enums import ComplaintCategory, Department, Severity
from civic_triage.models.taxonomy import is_member
from civic_triage.monitoring.metrics import validation_failures_total
from .exceptions import TaxonomyViolation

logger = structlog.get_logger(__name__)


class Stage4TaxonomyCheck:
    """
    Stage 4 validator: closed-taxonomy membership (hard fail).
    """

    FIELDS = (
        ("category", ComplaintCategory),
        ("severity", Severity),
        ("department", Department),
    )

    def validate(self, result: ClassificationResult) -> None:
        """
        Raises:
            TaxonomyViolation: If any field is outside its taxonomy
        """
        for field_name, enum_cls in self.FIELDS:
            value = getattr(result, field_name)
            if not is_member(value, enum_cls):
                validation_failures_total.labels(
                    stage=TaxonomyViolation.stage, error_type="taxonomy_violation"
                ).inc()
                raise TaxonomyViolation(
                    f"{field_name} is not a known {enum_cls.__name__}",
                    field_name=field_name,
                    invalid_value=value,
                    expected_values=list(enum_cls.__members__),
                )

        logger.debug("Stage 4: taxonomy check passed")
