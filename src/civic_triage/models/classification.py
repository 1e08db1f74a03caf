"""
Business models for complaint classification.

ClassificationRequest is what the complaint-creation workflow hands in,
ClassificationResult is what it persists. RawClassification is the lenient
shape of a provider's JSON answer before normalization.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator

from civic_triage.models.enums import ComplaintCategory, Department, Severity


class ClassificationRequest(BaseModel):
    """
    Inputs for one classification.

    The image is uploaded to object storage before classification runs, so
    only a dereferenceable URL ever reaches the classifier.
    """
    model_config = ConfigDict(frozen=True)

    description: Optional[str] = Field(default=None, description="Free-text complaint description")
    image_url: Optional[str] = Field(default=None, description="URL of the uploaded complaint photo")

    @field_validator("description", "image_url", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("image_url")
    @classmethod
    def strip_url(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None

    @property
    def has_input(self) -> bool:
        return self.description is not None or self.image_url is not None

    @property
    def has_image(self) -> bool:
        return self.image_url is not None


class ClassificationResult(BaseModel):
    """
    Final classification handed to the persistence collaborator.

    Invariant: ``classifiable`` is False if and only if ``category`` is
    NOT_A_COMPLAINT. Constructed once per complaint, never mutated.
    """
    model_config = ConfigDict(frozen=True)

    category: ComplaintCategory = Field(..., description="Complaint category")
    severity: Severity = Field(..., description="Complaint severity")
    department: Department = Field(..., description="Responsible department")
    classifiable: bool = Field(..., description="Whether the submission describes a genuine civic issue")

    @model_validator(mode="after")
    def check_classifiable_consistency(self) -> "ClassificationResult":
        is_not_complaint = self.category is ComplaintCategory.NOT_A_COMPLAINT
        if self.classifiable == is_not_complaint:
            raise ValueError(
                f"classifiable={self.classifiable} is inconsistent with category {self.category.name}"
            )
        return self

    @classmethod
    def unclassifiable(cls) -> "ClassificationResult":
        """Canonical result for submissions that are not civic complaints."""
        return cls(
            category=ComplaintCategory.NOT_A_COMPLAINT,
            severity=Severity.LOW,
            department=Department.OTHER,
            classifiable=False,
        )

    @classmethod
    def default(cls) -> "ClassificationResult":
        """The all-defaults classification (OTHER / MEDIUM / OTHER)."""
        return cls(
            category=ComplaintCategory.OTHER,
            severity=Severity.MEDIUM,
            department=Department.OTHER,
            classifiable=True,
        )

    @property
    def is_default(self) -> bool:
        return (
            self.category is ComplaintCategory.OTHER
            and self.severity is Severity.MEDIUM
            and self.department is Department.OTHER
        )

    def to_storage_dict(self) -> dict:
        """Display values as stored on the complaint document."""
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "department": self.department.value,
            "classifiable": self.classifiable,
        }


class RawClassification(BaseModel):
    """
    Provider answer as parsed from JSON, before normalization.

    Every field is optional (missing values fall back to defaults during
    normalization) but present values must have the right JSON type.
    """
    model_config = ConfigDict(extra="ignore")

    classifiable: Optional[StrictBool] = None
    category: Optional[str] = None
    severity: Optional[str] = None
    department: Optional[str] = None
