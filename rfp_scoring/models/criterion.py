from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

from rfp_scoring.config import settings


class CriterionBase(BaseModel):
    """
    Base Pydantic model for a rubric criterion.
    """

    id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique criterion identifier"
    )

    label: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Human-readable criterion name (e.g., Technical Approach)"
    )

    section_id: Optional[str] = Field(
        default=None,
        description="Rubric section the criterion belongs to; None for rubric-global"
    )

    scale_min: int = Field(
        default=1,
        ge=0,
        description="Lowest valid score on the criterion scale"
    )


class CriterionCreate(CriterionBase):
    """
    Model for authoring a criterion.

    weight and scale_max are optional: an absent field resolves to the
    configured default (1 and 5). An explicit 0 weight is kept as 0.
    """

    weight: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Percentage contribution to the rubric; defaults to 1 when absent"
    )

    scale_max: Optional[int] = Field(
        default=None,
        ge=0,
        description="Highest valid score on the criterion scale; defaults to 5 when absent"
    )

    @model_validator(mode="after")
    def validate_scale(self):
        """Ensure the resolved scale is non-degenerate: scale_max >= scale_min and > 0."""
        scale_max = self.scale_max if self.scale_max is not None else settings.DEFAULT_SCALE_MAX
        if scale_max < self.scale_min:
            raise ValueError(
                f"scale_max ({scale_max}) must be >= scale_min ({self.scale_min})"
            )
        if scale_max <= 0:
            raise ValueError("scale_max must be > 0")
        return self

    def resolve(self) -> "Criterion":
        """Materialize a fully-resolved Criterion with defaults applied."""
        return Criterion(
            id=self.id,
            label=self.label,
            section_id=self.section_id,
            weight=self.weight if self.weight is not None else settings.DEFAULT_CRITERION_WEIGHT,
            scale_min=self.scale_min,
            scale_max=self.scale_max if self.scale_max is not None else settings.DEFAULT_SCALE_MAX,
        )


class Criterion(CriterionBase):
    """
    Resolved, immutable criterion used by the scorers.
    """

    model_config = ConfigDict(frozen=True)

    weight: float = Field(..., ge=0, allow_inf_nan=False)
    scale_max: int = Field(..., gt=0)

    @model_validator(mode="after")
    def validate_scale(self):
        if self.scale_max < self.scale_min:
            raise ValueError(
                f"scale_max ({self.scale_max}) must be >= scale_min ({self.scale_min})"
            )
        return self

    @property
    def max_weighted_score(self) -> float:
        """Contribution of this criterion to the max-possible score."""
        return self.scale_max * self.weight

    def contains(self, value: float) -> bool:
        """Whether a raw score lies within [scale_min, scale_max]. The scorers never call this."""
        return self.scale_min <= value <= self.scale_max
