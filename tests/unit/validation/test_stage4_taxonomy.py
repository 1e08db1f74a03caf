"""
Unit tests for Stage 4: Taxonomy check.
"""

import pytest

from civic_triage.models.classification import ClassificationResult
from civic_triage.models.enums import ComplaintCategory, Department, Severity
from civic_triage.validation.exceptions import TaxonomyViolation
from civic_triage.validation.stage4_taxonomy import Stage4TaxonomyCheck


class TestStage4TaxonomyCheck:

    def setup_method(self):
        self.stage4 = Stage4TaxonomyCheck()

    def test_valid_results_pass(self):
        self.stage4.validate(ClassificationResult.default())
        self.stage4.validate(ClassificationResult.unclassifiable())

    @pytest.mark.parametrize(
        "field_name,value",
        [("category", "POTHOLE"), ("severity", "CRITICAL"), ("department", "ROADS")],
    )
    def test_out_of_taxonomy_value_raises(self, field_name, value):
        fields = {
            "category": ComplaintCategory.ROAD_DAMAGE,
            "severity": Severity.HIGH,
            "department": Department.PUBLIC_WORKS,
            "classifiable": True,
        }
        fields[field_name] = value
        # Bypass model validation to simulate a corrupted result
        result = ClassificationResult.model_construct(**fields)

        with pytest.raises(TaxonomyViolation) as exc_info:
            self.stage4.validate(result)

        assert exc_info.value.details["field_name"] == field_name
        assert exc_info.value.details["invalid_value"] == value
