"""
routers/scoring.py — Rubric & Submission Scoring Endpoints

Endpoints:
  POST /api/v1/scoring/rubrics/validate      — Check rubric weights sum to 100
  POST /api/v1/scoring/submissions/summary   — Score block for one submission
  POST /api/v1/scoring/consensus/reconcile   — Propose consensus from evaluator scores

Stateless: every request carries the rubric and the score records it needs.
"""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field
import logging

from rfp_scoring.config import settings
from rfp_scoring.models.criterion import CriterionCreate
from rfp_scoring.models.scores import ConsensusEntry, Score, SubmissionScoreSummary
from rfp_scoring.scoring.consensus_reconciler import ConsensusReconciler
from rfp_scoring.scoring.registry import CriterionRegistry
from rfp_scoring.scoring.rubric_validator import RubricWeightValidator
from rfp_scoring.scoring.submission_service import SubmissionScoringService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/scoring", tags=["Scoring"])


# =====================================================================
# Request / Response Models
# =====================================================================

class RubricRequest(BaseModel):
    """Rubric criteria as authored."""
    criteria: List[CriterionCreate] = Field(default_factory=list)


class RubricValidationResponse(BaseModel):
    """Rubric weight distribution check."""
    total_weight: float
    within_tolerance: bool
    deviation: float
    target: float
    criteria_count: int


class SubmissionSummaryRequest(BaseModel):
    """Everything needed to score one submission."""
    criteria: List[CriterionCreate] = Field(default_factory=list)
    scores: List[Score] = Field(default_factory=list)
    consensus: List[ConsensusEntry] = Field(default_factory=list)


class ReconcileRequest(BaseModel):
    """Raw evaluator scores; proposals are made per (submission, criterion)."""
    criteria: List[CriterionCreate] = Field(default_factory=list)
    scores: List[Score] = Field(default_factory=list)
    min_evaluators: Optional[int] = Field(default=None, ge=1)
    spread_threshold: Optional[float] = Field(default=None, ge=0)


class ConsensusProposalResponse(BaseModel):
    """Proposed consensus for one criterion."""
    submission_id: Optional[str] = None
    criterion_id: str
    score_value: float
    evaluator_count: int
    min_score: float
    max_score: float
    spread: float
    std_dev: float
    confidence: float
    disagreements: int
    needs_review: bool
    notes: str


class ReconcileResponse(BaseModel):
    proposals: List[ConsensusProposalResponse]
    needs_review_count: int


# =====================================================================
# POST /api/v1/scoring/rubrics/validate
# =====================================================================

@router.post(
    "/rubrics/validate",
    response_model=RubricValidationResponse,
    summary="Check that rubric weights sum to 100",
    description="""
    Sums criterion weights (absent weights count as 1) and reports whether
    the total is within 0.05 of 100. An out-of-tolerance rubric is a warning,
    not an error: scoring still works because percentages are normalized by
    the actual max-possible score.
    """,
)
async def validate_rubric(request: RubricRequest):
    registry = CriterionRegistry(request.criteria)
    report = RubricWeightValidator().validate(registry)
    return RubricValidationResponse(**asdict(report))


# =====================================================================
# POST /api/v1/scoring/submissions/summary
# =====================================================================

@router.post(
    "/submissions/summary",
    response_model=SubmissionScoreSummary,
    summary="Compute the score block for one submission",
    description="""
    Returns { totalScore, maxPossibleScore, averageScore, scorePercentage }.

    - totalScore / maxPossibleScore / scorePercentage come from the consensus
      records weighted by criterion weight; consensus for unknown criteria
      is skipped.
    - averageScore is the plain mean of all raw evaluator scores.
    """,
)
async def summarize_submission(request: SubmissionSummaryRequest):
    registry = CriterionRegistry(request.criteria)
    summary = SubmissionScoringService().summarize(request.scores, request.consensus, registry)
    logger.info(
        f"Submission summary: total={summary.total_score:.2f} "
        f"max={summary.max_possible_score:.2f} pct={summary.score_percentage:.2f}"
    )
    return summary


# =====================================================================
# POST /api/v1/scoring/consensus/reconcile
# =====================================================================

@router.post(
    "/consensus/reconcile",
    response_model=ReconcileResponse,
    summary="Propose consensus scores from evaluator scores",
    description="""
    For each submission and criterion with at least 2 evaluator scores,
    proposes the mean as the consensus value and flags it for review when the scores differ
    by more than 1 point.
    """,
)
async def reconcile_consensus(request: ReconcileRequest):
    registry = CriterionRegistry(request.criteria)
    reconciler = ConsensusReconciler(
        min_evaluators=request.min_evaluators,
        spread_threshold=request.spread_threshold,
    )
    proposals = reconciler.reconcile_submission(request.scores, registry)
    return ReconcileResponse(
        proposals=[ConsensusProposalResponse(**asdict(p)) for p in proposals],
        needs_review_count=sum(1 for p in proposals if p.needs_review),
    )
