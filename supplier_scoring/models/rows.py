from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Mapping, Optional


def _trim_keys(data: Mapping[str, Any]) -> dict:
    """Header names may carry stray whitespace from the tabular source."""
    return {str(k).strip(): v for k, v in data.items() if k is not None}


class QuestionRow(BaseModel):
    """
    One decoded row of the question catalogue.

    Field aliases match the catalogue headers.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    category: str = Field(default="", alias="CATEGORY")
    sub_category: str = Field(default="", alias="SUB-CATEGORY")
    priority: str = Field(default="", alias="PRIORITY")
    question: str = Field(default="", alias="KEY EVALUATION QUESTIONS")
    scoring_guide: str = Field(default="", alias="SCORING GUIDE")

    @field_validator("*", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "QuestionRow":
        return cls.model_validate(_trim_keys(data))


class WeightRow(BaseModel):
    """
    One decoded row of the weight source.

    `weight` stays raw: unparseable values count as 0 when loaded.
    """

    model_config = ConfigDict(frozen=True)

    category: str = ""
    weight: Optional[Any] = None

    @field_validator("category", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WeightRow":
        return cls.model_validate(_trim_keys(data))
