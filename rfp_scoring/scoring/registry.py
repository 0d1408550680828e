"""
Criterion & Question Registries
rfp_scoring/scoring/registry.py

Ordered, read-only collections of rubric criteria and prequalification
questions. Criterion defaults (weight -> 1, scale_max -> 5) are resolved once
here so the scorers never re-default inside their loops.

Usage:
    registry = CriterionRegistry([
        CriterionCreate(id="tech", label="Technical Approach", weight=60),
        CriterionCreate(id="cost", label="Cost", weight=40, scale_max=10),
    ])
    registry.get("tech").scale_max   # 5
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import structlog

from rfp_scoring.core.exceptions import (
    CriterionNotFoundException,
    DuplicateCriterionException,
    DuplicateQuestionException,
    QuestionNotFoundException,
)
from rfp_scoring.models.criterion import Criterion, CriterionCreate
from rfp_scoring.models.prequalification import PrequalificationQuestion

logger = structlog.get_logger(__name__)


class CriterionRegistry:
    """Rubric criteria, global or section-scoped, in authoring order."""

    def __init__(self, criteria: Iterable[Union[CriterionCreate, Criterion]] = ()):
        resolved: List[Criterion] = []
        by_id: Dict[str, Criterion] = {}
        for item in criteria:
            criterion = item.resolve() if isinstance(item, CriterionCreate) else item
            if criterion.id in by_id:
                raise DuplicateCriterionException(criterion.id)
            by_id[criterion.id] = criterion
            resolved.append(criterion)

        self._criteria: Tuple[Criterion, ...] = tuple(resolved)
        self._by_id = by_id
        logger.debug("criterion_registry_built", criteria=len(self._criteria))

    def get(self, criterion_id: str) -> Criterion:
        criterion = self._by_id.get(criterion_id)
        if criterion is None:
            raise CriterionNotFoundException(criterion_id)
        return criterion

    def find(self, criterion_id: str) -> Optional[Criterion]:
        return self._by_id.get(criterion_id)

    def all(self) -> List[Criterion]:
        return list(self._criteria)

    def for_section(self, section_id: Optional[str]) -> List[Criterion]:
        """Criteria scoped to one section (None selects rubric-global criteria)."""
        return [c for c in self._criteria if c.section_id == section_id]

    def by_id(self) -> Dict[str, Criterion]:
        return dict(self._by_id)

    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[Criterion]:
        return iter(self._criteria)

    def __contains__(self, criterion_id: object) -> bool:
        return criterion_id in self._by_id


class QuestionRegistry:
    """Prequalification questions in questionnaire order."""

    def __init__(self, questions: Iterable[PrequalificationQuestion] = ()):
        ordered: List[PrequalificationQuestion] = []
        by_id: Dict[str, PrequalificationQuestion] = {}
        for question in questions:
            if question.id in by_id:
                raise DuplicateQuestionException(question.id)
            by_id[question.id] = question
            ordered.append(question)

        self._questions: Tuple[PrequalificationQuestion, ...] = tuple(ordered)
        self._by_id = by_id

    def get(self, question_id: str) -> PrequalificationQuestion:
        question = self._by_id.get(question_id)
        if question is None:
            raise QuestionNotFoundException(question_id)
        return question

    def find(self, question_id: str) -> Optional[PrequalificationQuestion]:
        return self._by_id.get(question_id)

    def all(self) -> List[PrequalificationQuestion]:
        return list(self._questions)

    def steps(self, per_step: int = 3) -> List[List[PrequalificationQuestion]]:
        """Split the questionnaire into wizard steps of `per_step` questions."""
        if per_step < 1:
            raise ValueError(f"per_step must be >= 1, got {per_step}")
        return [
            list(self._questions[i:i + per_step])
            for i in range(0, len(self._questions), per_step)
        ]

    @property
    def total_weight(self) -> float:
        return sum(q.weight for q in self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[PrequalificationQuestion]:
        return iter(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id
