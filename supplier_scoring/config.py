"""Application configuration with validation."""
from typing import Dict, Literal
from functools import lru_cache
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# DEFAULT CATEGORY WEIGHTS
# =============================================================================
# Returned by scoring.weights.default_weights() and used by
# load_weights_or_default() when no weight source is available. Keys are
# category ids as they appear in the question catalogue
# ("1. Material Sourcing" -> "1").
# =============================================================================

DEFAULT_CATEGORY_WEIGHTS: Dict[str, float] = {
    "1": 0.20,
    "2": 0.20,
    "3": 0.20,
    "4": 0.15,
    "5": 0.15,
    "6": 0.10,
}


class Settings(BaseSettings):
    """Scoring core settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Supplier Scoring Core"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Catalogue loading
    DEFAULT_PRIORITY: str = "MEDIUM"
    EXPECTED_MIN_QUESTIONS: int = Field(default=60, ge=0)
    SUBCATEGORY_SLUG_LENGTH: int = Field(default=10, ge=1, le=64)

    # Weights
    WEIGHT_SUM_TOLERANCE: float = Field(default=1e-9, gt=0, le=0.01)
    DEFAULT_CATEGORY_WEIGHTS: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_CATEGORY_WEIGHTS)
    )

    @field_validator("DEFAULT_PRIORITY")
    @classmethod
    def validate_default_priority(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("HIGH", "MEDIUM", "LOW"):
            raise ValueError(f"DEFAULT_PRIORITY must be HIGH, MEDIUM or LOW, got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_category_weights(self):
        """Validate default category weights are non-negative and sum to 1.0."""
        weights = self.DEFAULT_CATEGORY_WEIGHTS
        if any(w < 0 for w in weights.values()):
            raise ValueError("Category weights must be non-negative")
        total = sum(weights.values())
        if weights and abs(total - 1.0) > 0.001:
            raise ValueError(f"Category weights must sum to 1.0, got {total}")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
