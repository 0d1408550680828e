# tests/test_submission_service.py
"""
Submission Scoring Service tests
"""

import pytest

from rfp_scoring.models.scores import ConsensusEntry, Score
from rfp_scoring.scoring.submission_service import SubmissionScoringService


def _consensus(submission_id, *pairs):
    return [
        ConsensusEntry(submission_id=submission_id, criterion_id=cid, score_value=v)
        for cid, v in pairs
    ]


class TestSummarize:

    def test_summary_block(self, raw_scores, equal_consensus, equal_rubric):
        summary = SubmissionScoringService().summarize(raw_scores, equal_consensus, equal_rubric)
        assert summary.total_score == 7
        assert summary.max_possible_score == 10
        assert summary.score_percentage == pytest.approx(70.0)
        assert summary.average_score == pytest.approx(22 / 6)

    def test_average_and_percentage_are_independent(self, equal_rubric):
        """Raw scores are high, consensus is low: neither number adjusts the other."""
        scores = [
            Score(submission_id="s", evaluator_id="e1", criterion_id="crit-a", value=5),
            Score(submission_id="s", evaluator_id="e2", criterion_id="crit-a", value=5),
        ]
        summary = SubmissionScoringService().summarize(
            scores, _consensus("s", ("crit-a", 1)), equal_rubric
        )
        assert summary.average_score == 5
        assert summary.score_percentage == pytest.approx(20.0)

    def test_no_data(self, equal_rubric):
        summary = SubmissionScoringService().summarize([], [], equal_rubric)
        assert summary.model_dump() == {
            "total_score": 0.0,
            "max_possible_score": 0.0,
            "average_score": 0.0,
            "score_percentage": 0.0,
        }

    def test_recompute_is_stable(self, raw_scores, equal_consensus, equal_rubric):
        service = SubmissionScoringService()
        first = service.summarize(raw_scores, equal_consensus, equal_rubric)
        second = service.summarize(raw_scores, equal_consensus, equal_rubric)
        assert first == second


class TestSummarizeManyAndRank:

    @pytest.fixture
    def submissions(self, raw_scores, equal_consensus):
        return {
            "sub-0001": (raw_scores, equal_consensus),
            "sub-0002": ([], _consensus("sub-0002", ("crit-a", 5), ("crit-b", 5))),
            "sub-0003": ([], _consensus("sub-0003", ("crit-a", 4), ("crit-b", 3))),
            "sub-0004": ([], []),
        }

    def test_summarize_many(self, submissions, equal_rubric):
        summaries = SubmissionScoringService().summarize_many(submissions, equal_rubric)
        assert set(summaries) == set(submissions)
        assert summaries["sub-0002"].score_percentage == pytest.approx(100.0)
        assert summaries["sub-0004"].score_percentage == 0.0

    def test_rank_highest_first_ties_by_id(self, submissions, equal_rubric):
        service = SubmissionScoringService()
        ranked = service.rank(service.summarize_many(submissions, equal_rubric))
        # sub-0001 and sub-0003 both sit at 70%
        assert [sid for sid, _ in ranked] == ["sub-0002", "sub-0001", "sub-0003", "sub-0004"]
