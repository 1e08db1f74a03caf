"""
Validation-specific exceptions for the response pipeline.

Any of these means the provider's answer was unusable, which is different
from the provider deliberately answering "not a complaint". The
orchestrator treats them exactly like a transport failure and moves on to
the next provider.
"""

from typing import Any


class ValidationError(Exception):
    """
    Base exception for all response validation errors.

    ``stage`` names the pipeline stage that rejected the answer ("pipeline"
    for unexpected errors outside any stage).
    """

    stage = "pipeline"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize validation error.

        Args:
            message: Human-readable error description
            details: Structured error data for logging/metrics
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class JSONParseError(ValidationError):
    """
    Stage 1: no JSON object could be extracted and parsed.
    """

    stage = "stage1"

    def __init__(self, message: str, raw_content: str | None = None, parse_error: str | None = None):
        """
        Initialize JSON parse error.

        Args:
            message: Error description
            raw_content: Model output (first 500 chars kept for debugging)
            parse_error: Original json.JSONDecodeError message
        """
        details = {}
        if raw_content:
            details["content_snippet"] = raw_content[:500]
        if parse_error:
            details["parse_error"] = parse_error

        super().__init__(message, details)


class SchemaValidationError(ValidationError):
    """
    Stage 2: the JSON object has fields of the wrong type.
    """

    stage = "stage2"

    def __init__(self, message: str, validation_errors: list[str] | None = None):
        details = {}
        if validation_errors:
            details["validation_errors"] = validation_errors

        super().__init__(message, details)


class TaxonomyViolation(ValidationError):
    """
    Stage 4: a normalized field is outside its closed taxonomy.
    """

    stage = "stage4"

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        expected_values: list[str] | None = None,
    ):
        """
        Initialize taxonomy violation.

        Args:
            message: Error description
            field_name: Offending field (category, severity, department)
            invalid_value: The value that failed the check
            expected_values: Valid keys (truncated to 30)
        """
        details = {}
        if field_name:
            details["field_name"] = field_name
        if invalid_value is not None:
            details["invalid_value"] = str(invalid_value)
        if expected_values:
            details["expected_values"] = expected_values[:30]

        super().__init__(message, details)
