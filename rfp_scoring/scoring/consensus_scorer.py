"""
Consensus Weighted Scorer
rfp_scoring/scoring/consensus_scorer.py

Computes a submission's weighted total and percentage from its reconciled
(consensus) per-criterion scores.

Formula:
    total_score        = Σ consensus.score_value × criterion.weight
    max_possible_score = Σ criterion.scale_max   × criterion.weight
    percentage         = total_score / max_possible_score × 100   (0 if max = 0)

Weighting both numerator and denominator makes the percentage
self-normalizing: it stays a valid ratio whether or not the rubric weights
sum to 100.

Degenerate inputs are normal during an in-progress evaluation and never
raise:
  - consensus for a criterion no longer in the rubric is skipped
    (contributes to neither total nor max)
  - no consensus yet -> (0, 0, 0)
  - repeated entries for one criterion: the last one wins (logged)

Score values are not clamped to the criterion scale.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

import structlog

from rfp_scoring.models.criterion import Criterion
from rfp_scoring.models.scores import ConsensusEntry
from rfp_scoring.scoring.registry import CriterionRegistry
from rfp_scoring.scoring.utils import safe_ratio

logger = structlog.get_logger(__name__)

CriteriaLookup = Union[Mapping[str, Criterion], CriterionRegistry]


@dataclass(frozen=True)
class ConsensusScoreResult:
    """Output of ConsensusWeightedScorer.score()."""
    total_score: float
    max_possible_score: float
    percentage: float                                      # [0, 100] when scores are in scale
    scored_criterion_ids: List[str] = field(default_factory=list)
    skipped_criterion_ids: List[str] = field(default_factory=list)  # orphaned references

    def __iter__(self) -> Iterator[float]:
        """Unpack as (total_score, max_possible_score, percentage)."""
        return iter((self.total_score, self.max_possible_score, self.percentage))


class ConsensusWeightedScorer:
    """Weighted consensus scoring against a rubric."""

    def score(
        self,
        consensus: Iterable[ConsensusEntry],
        criteria_by_id: CriteriaLookup,
    ) -> ConsensusScoreResult:
        """
        Args:
            consensus: Zero or one ConsensusEntry per criterion for one submission.
            criteria_by_id: Mapping of criterion id -> resolved Criterion, or a
                            CriterionRegistry.

        Returns:
            ConsensusScoreResult with total, max-possible and percentage.

        Examples:
            >>> # weights [2, 1], scale_max 5, consensus [5, 0]
            >>> result = ConsensusWeightedScorer().score(entries, registry)
            >>> (result.total_score, result.max_possible_score)
            (10.0, 15.0)
        """
        total_score = 0.0
        max_possible_score = 0.0
        scored: List[str] = []
        skipped: List[str] = []

        latest, duplicated = _latest_by_criterion(consensus)
        if duplicated:
            logger.warning(
                "consensus_duplicate_entries_replaced",
                criterion_ids=duplicated,
            )

        for entry in latest.values():
            criterion = _lookup(criteria_by_id, entry.criterion_id)
            if criterion is None:
                skipped.append(entry.criterion_id)
                continue

            total_score += entry.score_value * criterion.weight
            max_possible_score += criterion.scale_max * criterion.weight
            scored.append(entry.criterion_id)

        percentage = safe_ratio(total_score, max_possible_score) * 100

        if skipped:
            logger.warning(
                "consensus_orphaned_criteria_skipped",
                skipped_criterion_ids=skipped,
            )

        logger.debug(
            "consensus_scored",
            total_score=total_score,
            max_possible_score=max_possible_score,
            percentage=percentage,
            scored=len(scored),
        )

        return ConsensusScoreResult(
            total_score=total_score,
            max_possible_score=max_possible_score,
            percentage=percentage,
            scored_criterion_ids=scored,
            skipped_criterion_ids=skipped,
        )


def _latest_by_criterion(
    consensus: Iterable[ConsensusEntry],
) -> Tuple[Dict[str, ConsensusEntry], List[str]]:
    latest: Dict[str, ConsensusEntry] = {}
    duplicated: List[str] = []
    for entry in consensus:
        if entry.criterion_id in latest and entry.criterion_id not in duplicated:
            duplicated.append(entry.criterion_id)
        latest[entry.criterion_id] = entry
    return latest, duplicated


def _lookup(criteria_by_id: CriteriaLookup, criterion_id: str):
    if isinstance(criteria_by_id, CriterionRegistry):
        return criteria_by_id.find(criterion_id)
    return criteria_by_id.get(criterion_id)
