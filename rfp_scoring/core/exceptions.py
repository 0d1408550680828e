"""
Custom Exceptions - RFP Evaluation Scoring Engine
rfp_scoring/core/exceptions.py

Custom exception classes for rubric and questionnaire registries.
Malformed criterion/question definitions surface as pydantic.ValidationError
from the models themselves; these cover registry-level problems.
"""


class ScoringException(Exception):
    """Base exception for scoring engine operations."""

    pass


class EntityNotFoundException(ScoringException):
    """Entity not found in a registry."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class CriterionNotFoundException(EntityNotFoundException):
    """Criterion id is not part of the rubric."""

    def __init__(self, criterion_id: str):
        super().__init__("Criterion", criterion_id)


class QuestionNotFoundException(EntityNotFoundException):
    """Question id is not part of the questionnaire."""

    def __init__(self, question_id: str):
        super().__init__("Question", question_id)


class DuplicateEntityException(ScoringException):
    """Duplicate entity id within one registry."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} already exists")


class DuplicateCriterionException(DuplicateEntityException):
    """Two criteria in one rubric share an id."""

    def __init__(self, criterion_id: str):
        super().__init__("Criterion", criterion_id)


class DuplicateQuestionException(DuplicateEntityException):
    """Two questions in one questionnaire share an id."""

    def __init__(self, question_id: str):
        super().__init__("Question", question_id)


class MixedSubmissionsException(ScoringException):
    """Scores passed for one consensus belong to more than one submission."""

    def __init__(self, submission_ids):
        self.submission_ids = sorted(submission_ids, key=str)
        super().__init__(
            f"Consensus scores must belong to one submission, got {self.submission_ids}"
        )
