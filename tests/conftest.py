# tests/conftest.py

"""
Pytest Fixtures - Shared rubrics, score records and questionnaires for all tests

RUBRIC REFERENCE:
- equal_rubric:    crit-a, crit-b          weight 1, scale 1-5
- weighted_rubric: crit-heavy (w=2), crit-light (w=1), scale 1-5
- sectioned_rubric: tech-1, tech-2 (section "technical"), cost-1 (section "cost"), price (global)
"""

import pytest
from fastapi.testclient import TestClient

from rfp_scoring.main import app
from rfp_scoring.models.criterion import CriterionCreate
from rfp_scoring.models.enumerations import QuestionType
from rfp_scoring.models.prequalification import (
    PrequalificationQuestion,
    PrequalificationResponse,
    ScoreTier,
)
from rfp_scoring.models.scores import ConsensusEntry, Score
from rfp_scoring.scoring.registry import CriterionRegistry


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# RUBRIC FIXTURES
# =============================================================================

@pytest.fixture
def equal_rubric():
    """Two criteria, weight 1, scale max 5."""
    return CriterionRegistry([
        CriterionCreate(id="crit-a", label="Technical Approach", weight=1, scale_max=5),
        CriterionCreate(id="crit-b", label="Past Performance", weight=1, scale_max=5),
    ])


@pytest.fixture
def weighted_rubric():
    """Weights 2 and 1, scale max 5."""
    return CriterionRegistry([
        CriterionCreate(id="crit-heavy", label="Technical Approach", weight=2, scale_max=5),
        CriterionCreate(id="crit-light", label="Cost", weight=1, scale_max=5),
    ])


@pytest.fixture
def sectioned_rubric():
    """Criteria split across sections plus one rubric-global criterion."""
    return CriterionRegistry([
        CriterionCreate(id="tech-1", label="Architecture", section_id="technical", weight=30),
        CriterionCreate(id="tech-2", label="Security", section_id="technical", weight=30),
        CriterionCreate(id="cost-1", label="Total Cost", section_id="cost", weight=25),
        CriterionCreate(id="price", label="Price Realism", weight=15),
    ])


# =============================================================================
# SCORE RECORD FIXTURES
# =============================================================================

@pytest.fixture
def sample_submission_id():
    return "sub-0001"


@pytest.fixture
def raw_scores(sample_submission_id):
    """Three evaluators scoring both criteria of equal_rubric."""
    rows = [
        ("eval-1", "crit-a", 3), ("eval-2", "crit-a", 4), ("eval-3", "crit-a", 2),
        ("eval-1", "crit-b", 4), ("eval-2", "crit-b", 4), ("eval-3", "crit-b", 5),
    ]
    return [
        Score(submission_id=sample_submission_id, evaluator_id=e, criterion_id=c, value=v)
        for e, c, v in rows
    ]


@pytest.fixture
def equal_consensus(sample_submission_id):
    """Consensus [3, 4] on equal_rubric."""
    return [
        ConsensusEntry(submission_id=sample_submission_id, criterion_id="crit-a", score_value=3),
        ConsensusEntry(submission_id=sample_submission_id, criterion_id="crit-b", score_value=4),
    ]


# =============================================================================
# PREQUALIFICATION FIXTURES
# =============================================================================

@pytest.fixture
def years_question():
    return PrequalificationQuestion(
        id="years_in_business",
        question="How many years has your company been in business?",
        type=QuestionType.NUMERIC,
        required=True,
        weight=10,
        tiers=[
            ScoreTier(threshold=10, fraction=1.0),
            ScoreTier(threshold=5, fraction=0.7),
            ScoreTier(threshold=3, fraction=0.5),
            ScoreTier(threshold=0, fraction=0.3),
        ],
    )


@pytest.fixture
def insurance_amount_question():
    return PrequalificationQuestion(
        id="insurance_amount",
        question="What is your general liability insurance coverage amount?",
        type=QuestionType.SELECT,
        required=True,
        weight=10,
        options=["Less than $1M", "$1M - $2M", "$2M - $5M", "$5M - $10M", "More than $10M"],
        option_fractions={
            "Less than $1M": 0.2,
            "$1M - $2M": 0.4,
            "$2M - $5M": 0.6,
            "$5M - $10M": 0.8,
            "More than $10M": 1.0,
        },
    )


@pytest.fixture
def two_question_set(years_question, insurance_amount_question):
    return [years_question, insurance_amount_question]


@pytest.fixture
def two_question_responses():
    return [
        PrequalificationResponse(question_id="years_in_business", value=12),
        PrequalificationResponse(question_id="insurance_amount", value="$2M - $5M"),
    ]
