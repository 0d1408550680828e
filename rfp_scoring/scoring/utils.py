"""
Numeric Utilities
rfp_scoring/scoring/utils.py

Zero-division-safe helpers shared by the scorers.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union


def to_decimal(value: float, places: int = 4) -> Decimal:
    """Convert float to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_half_up(value: float, places: int = 0) -> Union[int, float]:
    """
    Round to `places` decimals with half-up semantics.

    Python's round() uses banker's rounding (round(82.5) == 82); display
    percentages expect 82.5 -> 83.
    Returns an int when places == 0.
    """
    rounded = to_decimal(value, places)
    return int(rounded) if places == 0 else float(rounded)


def clamp(value: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def safe_ratio(numerator: float, denominator: float) -> float:
    """
    numerator / denominator, or 0.0 when the denominator is not positive.
    """
    if denominator <= 0:
        return 0.0
    return numerator / denominator


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean; 0.0 for an empty input."""
    total = 0.0
    count = 0
    for v in values:
        total += v
        count += 1
    if count == 0:
        return 0.0
    return total / count


def population_std_dev(values: Iterable[float]) -> float:
    """
    Population standard deviation.

    Formula: sqrt(Σ(value_i − mean)² / n), 0.0 for an empty input.
    """
    values = list(values)
    if not values:
        return 0.0
    avg = mean(values)
    variance = sum((v - avg) ** 2 for v in values) / len(values)
    return variance ** 0.5
