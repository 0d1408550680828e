"""
Raw Score Aggregator
rfp_scoring/scoring/raw_score_aggregator.py

Quick-glance "average score" for a submission: the plain mean of every
evaluator score, ignoring criterion and evaluator. Not weighted and not
comparable to the consensus percentage.
"""

from typing import Iterable

from rfp_scoring.models.scores import Score
from rfp_scoring.scoring.utils import mean


def average_score(scores: Iterable[Score]) -> float:
    """Mean of Score.value across all records; 0.0 when there are none."""
    return mean(s.value for s in scores)
