"""
Multi-stage response pipeline (4 stages).

- pipeline.py: Orchestrator for all stages
- stage1_json_extract.py: Greedy JSON object extraction (hard fail)
- stage2_schema.py: Field type validation (hard fail)
- stage3_normalize.py: Key/display/default mapping and classifiable reconciliation
- stage4_taxonomy.py: Closed-taxonomy membership (hard fail)
"""

from .exceptions import (
    ValidationError,
    JSONParseError,
    SchemaValidationError,
    TaxonomyViolation,
)
from .pipeline import ResponsePipeline
from .stage3_normalize import Stage3Normalize

__all__ = [
    "ResponsePipeline",
    "Stage3Normalize",
    "ValidationError",
    "JSONParseError",
    "SchemaValidationError",
    "TaxonomyViolation",
]
