"""
routers/prequalification.py — Vendor Prequalification Endpoints

Endpoints:
  GET  /api/v1/prequalification/questions  — Standard questionnaire
  POST /api/v1/prequalification/score      — Composite score for a response set

Called at each wizard step for live progress, and once more at submission.
"""

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field
import logging

from rfp_scoring.config import settings
from rfp_scoring.models.prequalification import (
    PrequalificationQuestion,
    PrequalificationResponse,
    PrequalificationResult,
)
from rfp_scoring.scoring.prequalification import PrequalificationScorer
from rfp_scoring.scoring.question_bank import STANDARD_PREQUALIFICATION_QUESTIONS

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.API_V1_PREFIX}/prequalification", tags=["Prequalification"])


class PrequalificationScoreRequest(BaseModel):
    """Responses gathered so far, optionally with a custom question set."""
    responses: List[PrequalificationResponse] = Field(default_factory=list)
    questions: Optional[List[PrequalificationQuestion]] = Field(
        default=None,
        description="Question set to score against; the standard questionnaire when omitted",
    )


@router.get(
    "/questions",
    response_model=List[PrequalificationQuestion],
    summary="List the standard prequalification questionnaire",
)
async def list_questions():
    return STANDARD_PREQUALIFICATION_QUESTIONS


@router.post(
    "/score",
    response_model=PrequalificationResult,
    summary="Score prequalification responses",
    description="""
    Scores each question (threshold ladders, yes/no, option fractions or
    presence), returns the whole-number percentage and its tier:

    - >= 80 excellent
    - 60-79 good
    - 40-59 fair
    - < 40 needs improvement

    Required questions left unanswered are listed in `missing_required`.
    """,
)
async def score_prequalification(request: PrequalificationScoreRequest):
    questions = request.questions if request.questions is not None else STANDARD_PREQUALIFICATION_QUESTIONS
    result = PrequalificationScorer().score_responses(request.responses, questions)
    logger.info(
        f"Prequalification scored: {result.total_percentage}% ({result.tier_label}), "
        f"{len(result.missing_required)} required unanswered"
    )
    return result
