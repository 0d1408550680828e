"""
Consensus Reconciler
rfp_scoring/scoring/consensus_reconciler.py

Proposes a consensus value for one (submission, criterion) pair from the raw
evaluator scores. The consensus scorer consumes whatever consensus the caller
stores; this is the default way to produce it.

Rules:
    - fewer than min_evaluators scores (default 2) -> no proposal
    - score_value  = mean of the evaluator scores
    - spread       = max − min; needs_review when spread > threshold (default 1.0)
    - confidence   = clamp(1 − σ / scale_max, 0, 1)   (σ = population std dev)
    - disagreements = scores farther than σ from the mean
    - scores are never pooled across submissions
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from rfp_scoring.config import settings
from rfp_scoring.core.exceptions import MixedSubmissionsException
from rfp_scoring.models.criterion import Criterion
from rfp_scoring.models.scores import ConsensusEntry, Score
from rfp_scoring.scoring.registry import CriterionRegistry
from rfp_scoring.scoring.utils import clamp, mean, population_std_dev, round_half_up

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ConsensusProposal:
    """Output of ConsensusReconciler.reconcile()."""
    submission_id: Optional[str]
    criterion_id: str
    score_value: float       # mean of evaluator scores
    evaluator_count: int
    min_score: float
    max_score: float
    spread: float            # max_score − min_score
    std_dev: float
    confidence: float        # [0, 1], 2 decimals
    disagreements: int
    needs_review: bool
    notes: str

    def to_entry(self) -> ConsensusEntry:
        return ConsensusEntry(
            submission_id=self.submission_id,
            criterion_id=self.criterion_id,
            score_value=self.score_value,
            notes=self.notes,
        )


class ConsensusReconciler:
    """Derive consensus proposals from raw evaluator scores."""

    def __init__(
        self,
        min_evaluators: Optional[int] = None,
        spread_threshold: Optional[float] = None,
    ):
        self.min_evaluators = (
            settings.CONSENSUS_MIN_EVALUATORS if min_evaluators is None else min_evaluators
        )
        self.spread_threshold = (
            settings.CONSENSUS_SPREAD_THRESHOLD if spread_threshold is None else spread_threshold
        )

    def reconcile(
        self,
        scores: Iterable[Score],
        criterion: Criterion,
    ) -> Optional[ConsensusProposal]:
        """
        Propose a consensus for one criterion.

        Args:
            scores: All evaluator scores for one submission on `criterion`.
            criterion: The resolved criterion (scale_max drives confidence).

        Returns:
            ConsensusProposal, or None when too few evaluators have scored.

        Raises:
            MixedSubmissionsException: scores come from more than one submission.
        """
        scores = list(scores)
        if len(scores) < self.min_evaluators or not scores:
            return None

        submission_ids = {s.submission_id for s in scores}
        if len(submission_ids) > 1:
            raise MixedSubmissionsException(submission_ids)

        values = [s.value for s in scores]
        avg = mean(values)
        low, high = min(values), max(values)
        spread = high - low
        std_dev = population_std_dev(values)
        confidence = round_half_up(clamp(1 - std_dev / criterion.scale_max), 2)
        disagreements = sum(1 for v in values if abs(v - avg) > std_dev)
        needs_review = spread > self.spread_threshold

        notes = f"Consensus score based on {len(values)} evaluators. Average: {avg:.2f}"
        if needs_review:
            notes += (
                f". Note: Scores vary from {_format_score(low)} to {_format_score(high)}."
                " Further review recommended."
            )

        return ConsensusProposal(
            submission_id=scores[0].submission_id,
            criterion_id=criterion.id,
            score_value=avg,
            evaluator_count=len(values),
            min_score=low,
            max_score=high,
            spread=spread,
            std_dev=std_dev,
            confidence=confidence,
            disagreements=disagreements,
            needs_review=needs_review,
            notes=notes,
        )

    def reconcile_submission(
        self,
        scores: Iterable[Score],
        registry: CriterionRegistry,
    ) -> List[ConsensusProposal]:
        """
        Propose consensus per (submission, criterion), in rubric order.

        Submissions come out in the order they first appear in `scores`; their
        scores are never mixed. Scores for criteria outside the rubric are
        ignored; criteria without enough evaluators produce no proposal.
        """
        grouped: Dict[Tuple[str, str], List[Score]] = {}
        submission_ids: List[str] = []
        for score in scores:
            if score.submission_id not in submission_ids:
                submission_ids.append(score.submission_id)
            grouped.setdefault((score.submission_id, score.criterion_id), []).append(score)

        orphaned = sorted({cid for _, cid in grouped if cid not in registry})
        if orphaned:
            logger.warning("reconcile_unknown_criteria_ignored", criterion_ids=orphaned)

        proposals: List[ConsensusProposal] = []
        for submission_id in submission_ids:
            for criterion in registry:
                proposal = self.reconcile(grouped.get((submission_id, criterion.id), []), criterion)
                if proposal is not None:
                    proposals.append(proposal)

        logger.info(
            "consensus_reconciled",
            submissions=len(submission_ids),
            proposals=len(proposals),
            needs_review=sum(1 for p in proposals if p.needs_review),
        )
        return proposals


def _format_score(value: float) -> str:
    # whole numbers without a trailing ".0", never exponent notation
    if float(value).is_integer():
        return str(int(value))
    text = repr(float(value))
    if "e" in text:
        text = f"{value:.12f}".rstrip("0")
    return text
