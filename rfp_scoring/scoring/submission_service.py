"""
scoring/submission_service.py — Submission Score Summary

Builds the derived score block attached to a submission representation:

    { totalScore, maxPossibleScore, averageScore, scorePercentage }

Pipeline per submission:
  1. ConsensusWeightedScorer -> total / max-possible / percentage
  2. average_score           -> plain mean of raw evaluator scores
  3. SubmissionScoreSummary

average_score and score_percentage are independent numbers on different
scales and are never reconciled with each other.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from rfp_scoring.models.scores import ConsensusEntry, Score, SubmissionScoreSummary
from rfp_scoring.scoring.consensus_scorer import ConsensusWeightedScorer, CriteriaLookup
from rfp_scoring.scoring.raw_score_aggregator import average_score

logger = logging.getLogger(__name__)

SubmissionInputs = Tuple[Iterable[Score], Iterable[ConsensusEntry]]


class SubmissionScoringService:
    """Derived score summaries for submissions."""

    def __init__(self, scorer: Optional[ConsensusWeightedScorer] = None):
        self.scorer = scorer or ConsensusWeightedScorer()

    def summarize(
        self,
        scores: Iterable[Score],
        consensus: Iterable[ConsensusEntry],
        criteria: CriteriaLookup,
    ) -> SubmissionScoreSummary:
        """
        Compute the score block for one submission.

        Args:
            scores: Raw evaluator scores for the submission.
            consensus: Reconciled per-criterion scores for the submission.
            criteria: The submission's rubric (registry or id -> Criterion map).

        Returns:
            SubmissionScoreSummary (side-effect free; safe to recompute).
        """
        result = self.scorer.score(consensus, criteria)
        return SubmissionScoreSummary(
            total_score=result.total_score,
            max_possible_score=result.max_possible_score,
            average_score=average_score(scores),
            score_percentage=result.percentage,
        )

    def summarize_many(
        self,
        submissions: Mapping[str, SubmissionInputs],
        criteria: CriteriaLookup,
    ) -> Dict[str, SubmissionScoreSummary]:
        """Summaries for a list view: submission id -> (scores, consensus)."""
        summaries = {
            submission_id: self.summarize(scores, consensus, criteria)
            for submission_id, (scores, consensus) in submissions.items()
        }
        logger.info(f"Summarized {len(summaries)} submissions")
        return summaries

    @staticmethod
    def rank(
        summaries: Mapping[str, SubmissionScoreSummary],
    ) -> List[Tuple[str, SubmissionScoreSummary]]:
        """Order submissions by score_percentage, highest first; ties by id."""
        return sorted(
            summaries.items(),
            key=lambda item: (-item[1].score_percentage, item[0]),
        )
