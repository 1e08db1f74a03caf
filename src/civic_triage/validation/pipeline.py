"""
Response Pipeline: turns raw provider text into a ClassificationResult.

Stages:
- Stage 1: JSON extract (hard fail)
- Stage 2: Schema (hard fail)
- Stage 3: Normalize (never fails; reconciles classifiable/category)
- Stage 4: Taxonomy check (hard fail)

Hard failures raise ValidationError subclasses, caught by the orchestrator.
"""

import structlog

from civic_triage.models.classification import ClassificationResult
from civic_triage.models.llm_models import LLMGenerationResponse
from .exceptions import ValidationError
from .stage1_json_extract import Stage1JSONExtract
from .stage2_schema import Stage2Schema
from .stage3_normalize import Stage3Normalize
from .stage4_taxonomy import Stage4TaxonomyCheck

logger = structlog.get_logger(__name__)


class ResponsePipeline:
    """
    Parser/normalizer/validator for one provider answer.

    Stateless; one instance is shared across concurrent classifications.
    """

    def __init__(self, normalizer: Stage3Normalize | None = None):
        self.stage1 = Stage1JSONExtract()
        self.stage2 = Stage2Schema()
        self.stage3 = normalizer or Stage3Normalize()
        self.stage4 = Stage4TaxonomyCheck()

    def process_content(self, content: str) -> ClassificationResult:
        """
        Run all stages on raw provider text.

        Raises:
            ValidationError: If any hard stage fails
        """
        try:
            parsed = self.stage1.validate(content)
            raw = self.stage2.validate(parsed)
            result = self.stage3.normalize(raw)
            self.stage4.validate(result)
            return result
        except ValidationError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while processing provider response", error=str(e))
            raise ValidationError(
                f"Unexpected validation error: {str(e)}",
                details={"error_type": type(e).__name__},
            ) from e

    def process(self, llm_response: LLMGenerationResponse) -> ClassificationResult:
        """
        Run all stages on a provider response and log the outcome.

        Args:
            llm_response: Raw provider response

        Returns:
            Normalized, taxonomy-valid ClassificationResult

        Raises:
            ValidationError: If the answer is unusable
        """
        result = self.process_content(llm_response.content)
        logger.info(
            "Provider response normalized",
            provider=llm_response.provider,
            category=result.category.name,
            severity=result.severity.name,
            department=result.department.name,
            classifiable=result.classifiable,
        )
        return result
