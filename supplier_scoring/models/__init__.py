from supplier_scoring.models.assessment import AIAssessmentResult, CategoryWeight
from supplier_scoring.models.criterion import (
    CANONICAL_MAX_SCORE,
    CANONICAL_MIN_SCORE,
    CriterionDefinition,
    ScaleOption,
)
from supplier_scoring.models.enumerations import (
    AIConfidence,
    Priority,
    QuestionStatus,
    SkipReason,
)
from supplier_scoring.models.rows import QuestionRow, WeightRow

__all__ = [
    "AIAssessmentResult",
    "AIConfidence",
    "CANONICAL_MAX_SCORE",
    "CANONICAL_MIN_SCORE",
    "CategoryWeight",
    "CriterionDefinition",
    "Priority",
    "QuestionRow",
    "QuestionStatus",
    "ScaleOption",
    "SkipReason",
    "WeightRow",
]
