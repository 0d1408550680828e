"""
Rubric Weight Validator
rfp_scoring/scoring/rubric_validator.py

Checks that a rubric's criterion weights add up to the target total (100).

Formula:
    total_weight     = Σ criterion.weight
    within_tolerance = |total_weight − 100| < 0.05

An out-of-tolerance rubric is a warning for the rubric author, not an error:
the consensus scorer normalizes by the actual max-possible sum, so
percentages stay valid whatever the weights add up to.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import structlog

from rfp_scoring.config import settings
from rfp_scoring.models.criterion import Criterion

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RubricWeightReport:
    """Output of RubricWeightValidator.validate()."""
    total_weight: float
    within_tolerance: bool
    deviation: float        # total_weight − target (signed)
    target: float
    criteria_count: int


class RubricWeightValidator:
    """Validate the weight distribution of a rubric."""

    def __init__(
        self,
        target: Optional[float] = None,
        tolerance: Optional[float] = None,
    ):
        self.target = settings.RUBRIC_TARGET_WEIGHT if target is None else target
        self.tolerance = settings.RUBRIC_WEIGHT_TOLERANCE if tolerance is None else tolerance

    def validate(self, criteria: Iterable[Criterion]) -> RubricWeightReport:
        """
        Sum criterion weights and compare against the target.

        Args:
            criteria: Resolved criteria (a CriterionRegistry also works).

        Returns:
            RubricWeightReport. Zero criteria -> total 0, within_tolerance False.

        Examples:
            >>> report = RubricWeightValidator().validate(registry)  # weights [50, 49.97]
            >>> report.within_tolerance
            True
        """
        weights = [c.weight for c in criteria]
        total = float(sum(weights))
        deviation = total - self.target
        within = bool(weights) and abs(deviation) < self.tolerance

        if not within:
            logger.warning(
                "rubric_weights_out_of_tolerance",
                total_weight=total,
                target=self.target,
                deviation=deviation,
                criteria_count=len(weights),
            )

        return RubricWeightReport(
            total_weight=total,
            within_tolerance=within,
            deviation=deviation,
            target=self.target,
            criteria_count=len(weights),
        )


def validate_rubric_weights(criteria: Iterable[Criterion]) -> Tuple[float, bool]:
    """Return (total_weight, within_tolerance) using the configured target."""
    report = RubricWeightValidator().validate(criteria)
    return report.total_weight, report.within_tolerance
