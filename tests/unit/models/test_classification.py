"""Unit tests for classification request/result models."""

import pytest
from pydantic import ValidationError

from civic_triage.models.classification import (
    ClassificationRequest,
    ClassificationResult,
    RawClassification,
)
from civic_triage.models.enums import ComplaintCategory, Department, Severity


class TestClassificationRequest:

    @pytest.mark.parametrize("blank", [None, "", "   ", "\n\t"])
    def test_blank_inputs_become_none(self, blank):
        request = ClassificationRequest(description=blank, image_url=blank)

        assert request.description is None
        assert request.image_url is None
        assert not request.has_input
        assert not request.has_image

    def test_image_url_is_stripped(self):
        request = ClassificationRequest(image_url="  https://cdn.example.com/a.jpg \n")

        assert request.image_url == "https://cdn.example.com/a.jpg"
        assert request.has_image
        assert request.has_input

    def test_description_is_kept_verbatim(self):
        request = ClassificationRequest(description="  Broken street light  ")

        assert request.description == "  Broken street light  "

    def test_non_string_description_rejected(self):
        with pytest.raises(ValidationError):
            ClassificationRequest(description=12345)

    def test_request_is_frozen(self):
        request = ClassificationRequest(description="Garbage not collected for a week")

        with pytest.raises(ValidationError):
            request.description = "changed"


class TestClassificationResult:

    def test_unclassifiable_is_canonical(self):
        result = ClassificationResult.unclassifiable()

        assert result.category is ComplaintCategory.NOT_A_COMPLAINT
        assert result.severity is Severity.LOW
        assert result.department is Department.OTHER
        assert result.classifiable is False

    def test_default_result(self):
        result = ClassificationResult.default()

        assert result.is_default
        assert result.classifiable is True
        assert not ClassificationResult.unclassifiable().is_default

    def test_not_a_complaint_must_be_unclassifiable(self):
        with pytest.raises(ValidationError, match="inconsistent"):
            ClassificationResult(
                category=ComplaintCategory.NOT_A_COMPLAINT,
                severity=Severity.LOW,
                department=Department.OTHER,
                classifiable=True,
            )

    def test_real_category_must_be_classifiable(self):
        with pytest.raises(ValidationError, match="inconsistent"):
            ClassificationResult(
                category=ComplaintCategory.ROAD_DAMAGE,
                severity=Severity.HIGH,
                department=Department.PUBLIC_WORKS,
                classifiable=False,
            )

    def test_accepts_display_values(self):
        result = ClassificationResult(
            category="Road Damage/Potholes",
            severity="High",
            department="Public Works Department (PWD)",
            classifiable=True,
        )

        assert result.category is ComplaintCategory.ROAD_DAMAGE

    def test_to_storage_dict_uses_display_values(self):
        result = ClassificationResult(
            category=ComplaintCategory.ROAD_DAMAGE,
            severity=Severity.HIGH,
            department=Department.PUBLIC_WORKS,
            classifiable=True,
        )

        assert result.to_storage_dict() == {
            "category": "Road Damage/Potholes",
            "severity": "High",
            "department": "Public Works Department (PWD)",
            "classifiable": True,
        }

    def test_result_is_frozen(self):
        result = ClassificationResult.default()

        with pytest.raises(ValidationError):
            result.severity = Severity.HIGH


class TestRawClassification:

    def test_all_fields_optional(self):
        raw = RawClassification.model_validate({})

        assert raw.classifiable is None
        assert raw.category is None
        assert raw.severity is None
        assert raw.department is None

    def test_extra_fields_ignored(self):
        raw = RawClassification.model_validate({"category": "ROAD_DAMAGE", "reasoning": "pothole"})

        assert raw.category == "ROAD_DAMAGE"
        assert not hasattr(raw, "reasoning")

    @pytest.mark.parametrize("value", ["false", "yes", 0, 1])
    def test_classifiable_must_be_real_bool(self, value):
        with pytest.raises(ValidationError):
            RawClassification.model_validate({"classifiable": value})

    def test_category_must_be_string(self):
        with pytest.raises(ValidationError):
            RawClassification.model_validate({"category": ["ROAD_DAMAGE"]})
