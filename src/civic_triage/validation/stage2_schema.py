"""
Stage 2: Schema validation.

Validates the parsed dict into RawClassification. Missing fields are
fine (normalization fills defaults) but a present field of the wrong JSON
type, e.g. ``"classifiable": "maybe"`` or ``"category": ["ROAD_DAMAGE"]``,
makes the whole answer unusable.
"""

import structlog
from pydantic import ValidationError as PydanticValidationError

from civic_triage.models.classification import RawClassification
from civic_triage.monitoring.metrics import validation_failures_total
from .exceptions import SchemaValidationError

logger = structlog.get_logger(__name__)


class Stage2Schema:
    """
    Stage 2 validator: type-check the provider payload.
    """

    def validate(self, parsed: dict) -> RawClassification:
        """
        Args:
            parsed: Dict produced by Stage 1

        Returns:
            RawClassification with optional, correctly typed fields

        Raises:
            SchemaValidationError: On any type mismatch
        """
        try:
            raw = RawClassification.model_validate(parsed)
        except PydanticValidationError as e:
            validation_failures_total.labels(
                stage=SchemaValidationError.stage, error_type="schema_error"
            ).inc()
            error_messages = [
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise SchemaValidationError(
                f"Provider payload failed schema validation: {len(error_messages)} error(s)",
                validation_errors=error_messages,
            ) from e

        logger.debug("Stage 2: payload schema valid")
        return raw
