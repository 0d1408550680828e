"""
Core Package - RFP Evaluation Scoring Engine
rfp_scoring/core/__init__.py

Core infrastructure: exceptions, logging setup.
"""

from rfp_scoring.core.exceptions import (
    CriterionNotFoundException,
    DuplicateCriterionException,
    DuplicateEntityException,
    DuplicateQuestionException,
    EntityNotFoundException,
    MixedSubmissionsException,
    QuestionNotFoundException,
    ScoringException,
)
from rfp_scoring.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "CriterionNotFoundException",
    "DuplicateCriterionException",
    "DuplicateEntityException",
    "DuplicateQuestionException",
    "EntityNotFoundException",
    "MixedSubmissionsException",
    "QuestionNotFoundException",
    "ScoringException",
]
