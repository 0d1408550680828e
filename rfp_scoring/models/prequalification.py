from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator
from typing import Any, Dict, List, Optional

from rfp_scoring.models.enumerations import QualificationTier, QuestionType


class ValidationBounds(BaseModel):
    """
    Input bounds shown to the vendor for a question (min/max for numeric).
    """

    min: Optional[float] = Field(default=None, allow_inf_nan=False)
    max: Optional[float] = Field(default=None, allow_inf_nan=False)
    pattern: Optional[str] = None

    @model_validator(mode="after")
    def validate_range(self):
        """Ensure max >= min when both are set."""
        if self.min is not None and self.max is not None and self.max < self.min:
            raise ValueError("validation.max must be >= validation.min")
        return self


class ScoreTier(BaseModel):
    """
    One rung of a numeric threshold ladder: values >= threshold earn fraction × weight.
    """

    model_config = ConfigDict(frozen=True)

    threshold: float = Field(..., allow_inf_nan=False, description="Inclusive lower bound of the band")
    fraction: float = Field(..., ge=0, le=1, description="Share of the question weight earned")


class PrequalificationQuestion(BaseModel):
    """
    A weighted question in the vendor prequalification questionnaire.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, max_length=255)

    question: str = Field(
        default="",
        description="Prompt shown to the vendor"
    )

    type: QuestionType = Field(..., description="Answer type; drives the scoring rule")

    required: bool = Field(default=False)

    weight: float = Field(..., ge=0, allow_inf_nan=False, description="Points available for the question")

    options: List[str] = Field(
        default_factory=list,
        description="Choices for select / multiselect questions"
    )

    validation: Optional[ValidationBounds] = None

    tiers: List[ScoreTier] = Field(
        default_factory=list,
        description="Numeric threshold ladder, stored highest threshold first"
    )

    option_fractions: Dict[str, float] = Field(
        default_factory=dict,
        description="Select option -> share of weight; unmapped options score 0"
    )

    @field_validator("type", mode="before")
    @classmethod
    def accept_number_alias(cls, v: Any) -> Any:
        if v == "number":
            return QuestionType.NUMERIC
        return v

    @field_validator("tiers")
    @classmethod
    def sort_tiers_descending(cls, v: List[ScoreTier]) -> List[ScoreTier]:
        thresholds = [t.threshold for t in v]
        if len(set(thresholds)) != len(thresholds):
            raise ValueError("tier thresholds must be unique")
        return sorted(v, key=lambda t: t.threshold, reverse=True)

    @field_validator("option_fractions")
    @classmethod
    def validate_fractions(cls, v: Dict[str, float]) -> Dict[str, float]:
        for option, fraction in v.items():
            if not 0 <= fraction <= 1:
                raise ValueError(f"fraction for option '{option}' must be in [0, 1], got {fraction}")
        return v

    @model_validator(mode="after")
    def validate_scoring_rules(self):
        """Tiers belong to numeric questions; fraction maps to select questions."""
        if self.tiers and self.type != QuestionType.NUMERIC:
            raise ValueError(f"tiers are only valid for numeric questions, not {self.type.value}")
        if self.option_fractions:
            if self.type not in (QuestionType.SELECT, QuestionType.MULTISELECT):
                raise ValueError(
                    f"option_fractions are only valid for select questions, not {self.type.value}"
                )
            if self.options:
                unknown = set(self.option_fractions) - set(self.options)
                if unknown:
                    raise ValueError(f"option_fractions reference unknown options: {sorted(unknown)}")
        return self


class PrequalificationResponse(BaseModel):
    """
    A vendor's answer to one question. The value shape depends on the question type.
    """

    question_id: str
    value: Any = None
    notes: Optional[str] = None


class QuestionScore(BaseModel):
    """
    Derived score for one question.
    """

    question_id: str
    score: float = Field(..., ge=0)
    weight: float = Field(..., ge=0)
    answered: bool
    required: bool

    @computed_field
    @property
    def missing_required(self) -> bool:
        """Required question left unanswered (incomplete, not low quality)."""
        return self.required and not self.answered


class PrequalificationResult(BaseModel):
    """
    Composite prequalification score for a vendor.
    """

    question_scores: Dict[str, QuestionScore] = Field(default_factory=dict)
    total_score: float = 0.0
    total_weight: float = 0.0
    total_percentage: int = Field(default=0, description="Whole percentage, half-up rounded")
    tier: QualificationTier = QualificationTier.NEEDS_IMPROVEMENT
    missing_required: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def per_question_scores(self) -> Dict[str, float]:
        return {qid: qs.score for qid, qs in self.question_scores.items()}

    @computed_field
    @property
    def tier_label(self) -> str:
        return self.tier.label

    @property
    def is_complete(self) -> bool:
        return not self.missing_required
