"""Application configuration with comprehensive validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring engine settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "RFP Evaluation Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Rubric authoring
    RUBRIC_TARGET_WEIGHT: float = Field(default=100.0, gt=0)
    RUBRIC_WEIGHT_TOLERANCE: float = Field(
        default=0.05,
        gt=0,
        le=5.0,
        description="Absorbs floating rounding from UI weight sliders",
    )

    # Criterion defaults (applied only when the field is absent)
    DEFAULT_CRITERION_WEIGHT: float = Field(default=1.0, gt=0)
    DEFAULT_SCALE_MAX: int = Field(default=5, ge=1)

    # Consensus reconciliation
    CONSENSUS_MIN_EVALUATORS: int = Field(default=2, ge=1, le=50)
    CONSENSUS_SPREAD_THRESHOLD: float = Field(default=1.0, ge=0)

    # Prequalification tier bands (whole percentages)
    TIER_EXCELLENT_MIN: int = Field(default=80, ge=0, le=100)
    TIER_GOOD_MIN: int = Field(default=60, ge=0, le=100)
    TIER_FAIR_MIN: int = Field(default=40, ge=0, le=100)

    @model_validator(mode="after")
    def validate_tier_bands(self):
        """Tier lower bounds must be strictly descending."""
        if not (self.TIER_EXCELLENT_MIN > self.TIER_GOOD_MIN > self.TIER_FAIR_MIN):
            raise ValueError(
                "Tier bands must satisfy EXCELLENT > GOOD > FAIR, got "
                f"{self.TIER_EXCELLENT_MIN}/{self.TIER_GOOD_MIN}/{self.TIER_FAIR_MIN}"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production runs without debug output."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
