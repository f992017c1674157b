from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Tuple

from supplier_scoring.core.exceptions import InvalidCriterionError
from supplier_scoring.models.enumerations import Priority

CANONICAL_MIN_SCORE = 1
CANONICAL_MAX_SCORE = 4


class ScaleOption(BaseModel):
    """
    One answer on the canonical 1-4 scale.
    """

    model_config = ConfigDict(frozen=True)

    value: int = Field(
        ...,
        ge=CANONICAL_MIN_SCORE,
        le=CANONICAL_MAX_SCORE,
        description="Canonical answer value (1-4)"
    )

    label: str = Field(
        ...,
        description="Free-text description of the answer"
    )


class CriterionDefinition(BaseModel):
    """
    A single evaluation question, normalized onto the canonical scale.
    """

    model_config = ConfigDict(frozen=True)

    category: str = Field(
        ...,
        description="Category name without its numeric prefix (e.g. 'Material Sourcing')"
    )

    category_id: str = Field(
        default="",
        description="Leading digits of the source category text (e.g. '1')"
    )

    sub_category: str = Field(
        default="",
        description="Sub-category label as written in the source row"
    )

    priority: str = Field(
        default=Priority.MEDIUM.value,
        description="Upper-cased priority; values outside HIGH/MEDIUM/LOW pass through"
    )

    question: str = Field(
        ...,
        min_length=1,
        description="Question text"
    )

    options: Tuple[ScaleOption, ...] = Field(
        ...,
        min_length=1,
        description="Answer options, unique values sorted descending"
    )

    max_score: int = Field(
        default=CANONICAL_MAX_SCORE,
        description="Highest attainable score (always 4 after normalization)"
    )

    @field_validator("priority")
    @classmethod
    def uppercase_priority(cls, v: str) -> str:
        return v.strip().upper() or Priority.MEDIUM.value

    @model_validator(mode="after")
    def validate_options(self):
        """Options must have unique values sorted in descending order."""
        values = [opt.value for opt in self.options]
        if len(set(values)) != len(values):
            raise InvalidCriterionError(self.question[:50], "duplicate option values")
        if values != sorted(values, reverse=True):
            raise InvalidCriterionError(self.question[:50], "options not sorted descending")
        return self

    @property
    def is_known_priority(self) -> bool:
        return self.priority in Priority.__members__
