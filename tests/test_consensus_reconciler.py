# tests/test_consensus_reconciler.py
"""
Consensus Reconciler tests

Uses raw_scores from conftest:
    crit-a: 3, 4, 2   -> mean 3.00, spread 2, needs review
    crit-b: 4, 4, 5   -> mean 4.33, spread 1, no review
"""

import pytest

from rfp_scoring.core.exceptions import MixedSubmissionsException
from rfp_scoring.models.criterion import Criterion
from rfp_scoring.models.scores import Score
from rfp_scoring.scoring.consensus_reconciler import ConsensusReconciler
from rfp_scoring.scoring.consensus_scorer import ConsensusWeightedScorer


def _scores(criterion_id, *values):
    return [
        Score(submission_id="sub-0001", evaluator_id=f"eval-{i}", criterion_id=criterion_id, value=v)
        for i, v in enumerate(values, start=1)
    ]


@pytest.fixture
def criterion():
    return Criterion(id="crit-a", label="Technical Approach", weight=1, scale_min=1, scale_max=5)


class TestReconcile:

    def test_wide_spread_flagged(self, criterion):
        proposal = ConsensusReconciler().reconcile(_scores("crit-a", 3, 4, 2), criterion)
        assert proposal.score_value == pytest.approx(3.0)
        assert proposal.evaluator_count == 3
        assert proposal.spread == 2
        assert proposal.needs_review is True
        assert proposal.disagreements == 2
        assert proposal.confidence == 0.84
        assert proposal.notes == (
            "Consensus score based on 3 evaluators. Average: 3.00. "
            "Note: Scores vary from 2 to 4. Further review recommended."
        )

    def test_narrow_spread_not_flagged(self, criterion):
        proposal = ConsensusReconciler().reconcile(_scores("crit-a", 4, 4, 5), criterion)
        assert proposal.score_value == pytest.approx(13 / 3)
        assert proposal.spread == 1
        assert proposal.needs_review is False
        assert proposal.confidence == 0.91
        assert proposal.notes == "Consensus score based on 3 evaluators. Average: 4.33"

    def test_unanimous_scores_full_confidence(self, criterion):
        proposal = ConsensusReconciler().reconcile(_scores("crit-a", 4, 4), criterion)
        assert proposal.std_dev == 0
        assert proposal.confidence == 1.0
        assert proposal.disagreements == 0

    def test_single_evaluator_no_proposal(self, criterion):
        assert ConsensusReconciler().reconcile(_scores("crit-a", 5), criterion) is None

    def test_no_scores_no_proposal(self, criterion):
        assert ConsensusReconciler(min_evaluators=0).reconcile([], criterion) is None

    def test_min_evaluators_override(self, criterion):
        proposal = ConsensusReconciler(min_evaluators=1).reconcile(_scores("crit-a", 5), criterion)
        assert proposal.score_value == 5

    def test_spread_threshold_override(self, criterion):
        proposal = ConsensusReconciler(spread_threshold=2.5).reconcile(
            _scores("crit-a", 3, 4, 2), criterion
        )
        assert proposal.needs_review is False

    def test_to_entry(self, criterion):
        proposal = ConsensusReconciler().reconcile(_scores("crit-a", 3, 4), criterion)
        entry = proposal.to_entry()
        assert entry.submission_id == "sub-0001"
        assert entry.criterion_id == "crit-a"
        assert entry.score_value == pytest.approx(3.5)
        assert entry.notes == proposal.notes


    def test_mixed_submissions_rejected(self, criterion):
        scores = _scores("crit-a", 5, 5) + [
            Score(submission_id="sub-0002", evaluator_id="eval-9", criterion_id="crit-a", value=1),
        ]
        with pytest.raises(MixedSubmissionsException) as exc_info:
            ConsensusReconciler().reconcile(scores, criterion)
        assert exc_info.value.submission_ids == ["sub-0001", "sub-0002"]

    @pytest.mark.parametrize(
        "values, expected",
        [
            ((1, 5), "Scores vary from 1 to 5."),
            ((1.5, 4.25), "Scores vary from 1.5 to 4.25."),
            ((1_000_000, 1_234_567), "Scores vary from 1000000 to 1234567."),
        ],
    )
    def test_notes_render_plain_numbers(self, values, expected):
        wide = Criterion(id="crit-a", label="Budget", weight=1, scale_min=0, scale_max=2_000_000)
        proposal = ConsensusReconciler().reconcile(_scores("crit-a", *values), wide)
        assert expected in proposal.notes
        assert "e+" not in proposal.notes


class TestReconcileSubmission:

    def test_rubric_order(self, raw_scores, equal_rubric):
        proposals = ConsensusReconciler().reconcile_submission(raw_scores, equal_rubric)
        assert [p.criterion_id for p in proposals] == ["crit-a", "crit-b"]
        assert [p.needs_review for p in proposals] == [True, False]

    def test_unknown_criteria_ignored(self, raw_scores, equal_rubric):
        extra = _scores("retired-criterion", 1, 5)
        proposals = ConsensusReconciler().reconcile_submission(raw_scores + extra, equal_rubric)
        assert [p.criterion_id for p in proposals] == ["crit-a", "crit-b"]

    def test_criteria_without_enough_scores_skipped(self, equal_rubric):
        scores = _scores("crit-a", 3, 4) + _scores("crit-b", 5)
        proposals = ConsensusReconciler().reconcile_submission(scores, equal_rubric)
        assert [p.criterion_id for p in proposals] == ["crit-a"]

    def test_submissions_kept_apart(self, equal_rubric):
        first = _scores("crit-a", 5, 5)
        second = [
            Score(submission_id="sub-0002", evaluator_id=f"eval-{i}", criterion_id="crit-a", value=1)
            for i in (1, 2)
        ]
        proposals = ConsensusReconciler().reconcile_submission(first + second, equal_rubric)
        assert [(p.submission_id, p.score_value, p.evaluator_count) for p in proposals] == [
            ("sub-0001", 5.0, 2),
            ("sub-0002", 1.0, 2),
        ]

    def test_proposals_feed_the_scorer(self, raw_scores, equal_rubric):
        proposals = ConsensusReconciler().reconcile_submission(raw_scores, equal_rubric)
        result = ConsensusWeightedScorer().score([p.to_entry() for p in proposals], equal_rubric)
        # (3 + 13/3) / 10
        assert result.total_score == pytest.approx(3 + 13 / 3)
        assert result.percentage == pytest.approx((3 + 13 / 3) * 10)
