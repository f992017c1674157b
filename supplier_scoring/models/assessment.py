from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from supplier_scoring.models.enumerations import AIConfidence


class AIAssessmentResult(BaseModel):
    """
    Per-question answer returned by the AI-assistant collaborator.
    """

    model_config = ConfigDict(populate_by_name=True)

    criterion_id: str = Field(
        ...,
        alias="criterionId",
        description="Identifier of the assessed criterion"
    )

    score: Optional[int] = Field(
        default=None,
        description="Suggested score on the canonical scale, None when undetermined"
    )

    confidence: AIConfidence = Field(
        default=AIConfidence.LOW,
        description="Self-reported confidence (high, medium, low)"
    )

    reasoning: str = Field(
        default="",
        description="Explanation for the suggested score"
    )

    sources: List[str] = Field(
        default_factory=list,
        description="URLs or documents the answer was based on"
    )

    needs_review: bool = Field(
        default=False,
        alias="needsReview",
        description="Flagged for manual review"
    )

    @field_validator("confidence", mode="before")
    @classmethod
    def lowercase_confidence(cls, v):
        return v.lower() if isinstance(v, str) else v


class CategoryWeight(BaseModel):
    """
    Category weight with its display name.
    """

    category_id: str = Field(..., description="Numeric category id")
    category_name: str = Field(..., description="Display name")
    weight: float = Field(..., ge=0, description="Category weight")
