"""
Prequalification Composite Scorer
rfp_scoring/scoring/prequalification.py

Scores a vendor's prequalification questionnaire and bands the result.

Per-question rules (each yields a value in [0, question.weight]):
  numeric + tiers    first tier with threshold <= value (ladder is stored
                     highest first); values under the lowest threshold still
                     earn the lowest tier's fraction
  numeric, no tiers  full weight for a non-zero answer
  yesno              full weight for "yes" / True, else 0
  select + mapping   weight × option_fractions[value]; unmapped -> 0
                     (multiselect + mapping takes the best selected option)
  anything else      full weight for any non-empty answer (presence scoring)
  unanswered         0; required questions are reported as missing

Aggregation:
    total_percentage = round_half_up(Σ score / Σ weight × 100)   (0 if Σ weight = 0)

Tier bands (configurable): >=80 excellent, >=60 good, >=40 fair, else
needs improvement.
"""

import math
from typing import Any, Dict, Iterable, List, Union

import structlog

from rfp_scoring.config import settings
from rfp_scoring.models.enumerations import QualificationTier, QuestionType
from rfp_scoring.models.prequalification import (
    PrequalificationQuestion,
    PrequalificationResponse,
    PrequalificationResult,
    QuestionScore,
    ScoreTier,
)
from rfp_scoring.scoring.registry import QuestionRegistry
from rfp_scoring.scoring.utils import round_half_up, safe_ratio

logger = structlog.get_logger(__name__)

Questions = Union[Iterable[PrequalificationQuestion], QuestionRegistry]


# ---------------------------------------------------------------------------
# Answer helpers
# ---------------------------------------------------------------------------

def is_answered(value: Any) -> bool:
    """None, blank strings and empty selections count as unanswered. False and 0 are answers."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    return True


def tier_fraction(tiers: List[ScoreTier], value: float) -> float:
    """
    Fraction earned on a descending threshold ladder.

    Below the lowest threshold the lowest tier still applies; there is no
    zero band under the floor.
    """
    if not tiers:
        return 0.0
    for tier in tiers:
        if value >= tier.threshold:
            return tier.fraction
    return tiers[-1].fraction


def _as_number(value: Any):
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # "nan" and "inf" parse as floats but are not answers
    return number if math.isfinite(number) else None


def _mapped_fraction(fractions: Dict[str, float], value: Any) -> float:
    if isinstance(value, str):
        return fractions.get(value, 0.0)
    if isinstance(value, (list, tuple, set, frozenset)):
        return max((fractions.get(v, 0.0) for v in value if isinstance(v, str)), default=0.0)
    return 0.0


def _is_affirmative(value: Any) -> bool:
    if value is True:
        return True
    return isinstance(value, str) and value.strip().lower() == "yes"


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def score_question(question: PrequalificationQuestion, value: Any) -> float:
    """Score one answer against its question. Always within [0, question.weight]."""
    if not is_answered(value):
        return 0.0

    weight = question.weight

    if question.type == QuestionType.NUMERIC:
        if question.tiers:
            number = _as_number(value)
            if number is None:
                return 0.0
            return weight * tier_fraction(question.tiers, number)
        return weight if value else 0.0

    if question.type == QuestionType.YESNO:
        return weight if _is_affirmative(value) else 0.0

    if question.type in (QuestionType.SELECT, QuestionType.MULTISELECT):
        if question.option_fractions:
            return weight * _mapped_fraction(question.option_fractions, value)
        return weight

    # text, file
    return weight


def classify_tier(percentage: float) -> QualificationTier:
    """Band a whole-number percentage for display."""
    if percentage >= settings.TIER_EXCELLENT_MIN:
        return QualificationTier.EXCELLENT
    if percentage >= settings.TIER_GOOD_MIN:
        return QualificationTier.GOOD
    if percentage >= settings.TIER_FAIR_MIN:
        return QualificationTier.FAIR
    return QualificationTier.NEEDS_IMPROVEMENT


def _latest_by_question(responses: Iterable[PrequalificationResponse]) -> Dict[str, Any]:
    # later responses replace earlier ones, as when a wizard answer is edited
    values: Dict[str, Any] = {}
    for response in responses:
        values[response.question_id] = response.value
    return values


def _as_registry(questions: Questions) -> QuestionRegistry:
    if isinstance(questions, QuestionRegistry):
        return questions
    return QuestionRegistry(questions)


def is_step_complete(
    questions: Iterable[PrequalificationQuestion],
    responses: Iterable[PrequalificationResponse],
) -> bool:
    """True when every required question in the step has an answer."""
    values = _latest_by_question(responses)
    return all(
        is_answered(values.get(q.id))
        for q in questions
        if q.required
    )


class PrequalificationScorer:
    """Weighted composite score over a prequalification questionnaire."""

    def score_responses(
        self,
        responses: Iterable[PrequalificationResponse],
        questions: Questions,
    ) -> PrequalificationResult:
        """
        Args:
            responses: Answers gathered so far (partial sets are fine).
            questions: The full question set, or a QuestionRegistry.

        Returns:
            PrequalificationResult with per-question scores, whole percentage,
            tier and the ids of required questions still unanswered.

        Examples:
            >>> # years_in_business=12 (w=10), insurance_amount="$2M - $5M" (w=10)
            >>> result = PrequalificationScorer().score_responses(responses, questions)
            >>> result.total_percentage
            80
        """
        registry = _as_registry(questions)
        values = _latest_by_question(responses)

        unknown = sorted(qid for qid in values if qid not in registry)
        if unknown:
            logger.warning("prequalification_unknown_questions_ignored", question_ids=unknown)

        question_scores: Dict[str, QuestionScore] = {}
        missing_required: List[str] = []
        total_score = 0.0
        total_weight = 0.0

        for question in registry:
            value = values.get(question.id)
            answered = is_answered(value)
            score = score_question(question, value)

            question_scores[question.id] = QuestionScore(
                question_id=question.id,
                score=score,
                weight=question.weight,
                answered=answered,
                required=question.required,
            )
            if question.required and not answered:
                missing_required.append(question.id)

            total_score += score
            total_weight += question.weight

        total_percentage = round_half_up(safe_ratio(total_score, total_weight) * 100)
        tier = classify_tier(total_percentage)

        logger.info(
            "prequalification_scored",
            total_score=total_score,
            total_weight=total_weight,
            total_percentage=total_percentage,
            tier=tier.value,
            missing_required=missing_required,
        )

        return PrequalificationResult(
            question_scores=question_scores,
            total_score=total_score,
            total_weight=total_weight,
            total_percentage=total_percentage,
            tier=tier,
            missing_required=missing_required,
        )
