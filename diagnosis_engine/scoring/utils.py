"""
Decimal Utilities
diagnosis_engine/scoring/utils.py

Precision-safe decimal math shared by the scoring stages. Every rounding
step is round-half-up so x.5 always goes up.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence


def to_decimal(value: float) -> Decimal:
    """Convert a float to Decimal through its shortest repr."""
    return Decimal(str(value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; callers handle the empty case themselves."""
    return sum(values) / len(values)


def weighted_mean(
    values: List[Decimal],
    weights: List[Decimal],
    default: Decimal = Decimal("0"),
) -> Decimal:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i), quantized to 4 places
    Returns `default` if all weights are zero.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    total_weight = sum(weights, Decimal("0"))
    if total_weight == 0:
        return default

    numerator = sum((v * w for v, w in zip(values, weights)), Decimal("0"))
    # Quantized so repeating thirds (x.4999…) settle on x.5 before rounding
    return (numerator / total_weight).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)
