"""
Stage 1: JSON extraction.

Models answer with prose, markdown fences or a bare object. Take the
greedy brace-delimited substring and parse it. Hard fail: no object means
the provider's answer is unusable.
"""

import json
import structlog

from civic_triage.llm.text_utils import extract_json_object
from civic_triage.monitoring.metrics import validation_failures_total
from .exceptions import JSONParseError

logger = structlog.get_logger(__name__)


class Stage1JSONExtract:
    """
    Stage 1 validator: extract and parse the JSON object.

    Raises JSONParseError on missing or malformed JSON (hard fail).
    """

    def validate(self, content: str) -> dict:
        """
        Extract the JSON object from raw model output.

        Args:
            content: Raw text from the provider

        Returns:
            Parsed dict representation

        Raises:
            JSONParseError: If no object is found or it does not parse
        """
        candidate = extract_json_object(content)
        if candidate is None:
            validation_failures_total.labels(
                stage=JSONParseError.stage, error_type="no_json_object"
            ).inc()
            raise JSONParseError(
                "No JSON object found in provider response",
                raw_content=content,
                parse_error="No brace-delimited substring",
            )

        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as e:
            validation_failures_total.labels(
                stage=JSONParseError.stage, error_type="json_decode_error"
            ).inc()
            raise JSONParseError(
                f"Failed to parse provider response as JSON: {e.msg}",
                raw_content=content,
                parse_error=f"{e.msg} at line {e.lineno} col {e.colno}",
            ) from e

        # Candidate starts with "{", so a successful parse is always a dict
        logger.debug("Stage 1: extracted JSON object", keys=sorted(parsed.keys()))
        return parsed
