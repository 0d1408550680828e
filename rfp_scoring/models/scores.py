from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class Score(BaseModel):
    """
    A raw score submitted by one evaluator for one criterion.

    value is not range-checked here; see Criterion.contains().
    """

    submission_id: str = Field(..., description="Submission being evaluated")
    evaluator_id: str = Field(..., description="Evaluator who submitted the score")
    criterion_id: str = Field(..., description="Criterion the score applies to")
    value: float = Field(..., allow_inf_nan=False, description="Raw score, expected within the criterion scale")


class ConsensusEntry(BaseModel):
    """
    Reconciled group score for one criterion on one submission.
    """

    submission_id: Optional[str] = Field(default=None, description="Submission the consensus belongs to")
    criterion_id: str = Field(..., description="Criterion the consensus applies to")
    score_value: float = Field(..., allow_inf_nan=False, description="Agreed score for the criterion")
    notes: Optional[str] = Field(default=None, description="Reconciliation notes")


class SubmissionScoreSummary(BaseModel):
    """
    Derived aggregate block attached to a submission representation.

    Serialized with camelCase aliases (totalScore, maxPossibleScore, ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_score: float = Field(default=0.0, description="Weighted sum of consensus scores")
    max_possible_score: float = Field(default=0.0, description="Weighted sum of scale maxima")
    average_score: float = Field(default=0.0, description="Unweighted mean of raw evaluator scores")
    score_percentage: float = Field(default=0.0, description="total_score / max_possible_score * 100")
