"""
Deviation Score Calculator
diagnosis_engine/scoring/deviation_calculator.py

Formula:
    T = round(((raw − mean) / sd) × 10 + 50)   clamped to [20, 80]

Applied independently to all 14 raw averages with the per-factor norm.
"""

from decimal import Decimal
from typing import Mapping

from diagnosis_engine.models.diagnosis import (
    BehaviorPattern,
    BigFiveScores,
    RawScores,
    ThinkingPattern,
)
from diagnosis_engine.scoring.norms import (
    BEHAVIOR_AXES,
    BEHAVIOR_NORMS,
    BIG_FIVE_FACTORS,
    BIG_FIVE_NORMS,
    THINKING_AXES,
    THINKING_NORMS,
    Norm,
)
from diagnosis_engine.scoring.utils import clamp, round_half_up, to_decimal

DEVIATION_MIN = Decimal("20")
DEVIATION_MAX = Decimal("80")
DEVIATION_MEAN = Decimal("50")
DEVIATION_SD = Decimal("10")


def calculate_deviation_score(raw_score: float, norm: Norm) -> int:
    """
    Examples:
        >>> calculate_deviation_score(4.0, Norm(Decimal("3.5"), Decimal("1.0")))
        55
        >>> calculate_deviation_score(7.0, Norm(Decimal("3.5"), Decimal("1.0")))
        80
    """
    z = (to_decimal(raw_score) - norm.mean) / norm.sd
    deviation = round_half_up(z * DEVIATION_SD + DEVIATION_MEAN)
    return int(clamp(Decimal(deviation), DEVIATION_MIN, DEVIATION_MAX))


def _deviations(raw_scores: RawScores, prefix: str, axes, norms: Mapping[str, Norm]) -> dict:
    return {
        axis: calculate_deviation_score(getattr(raw_scores, f"{prefix}{axis}"), norms[axis])
        for axis in axes
    }


def calculate_big_five(raw_scores: RawScores) -> BigFiveScores:
    return BigFiveScores(**_deviations(raw_scores, "", BIG_FIVE_FACTORS, BIG_FIVE_NORMS))


def calculate_thinking_pattern(raw_scores: RawScores) -> ThinkingPattern:
    return ThinkingPattern(**_deviations(raw_scores, "thinking_", THINKING_AXES, THINKING_NORMS))


def calculate_behavior_pattern(raw_scores: RawScores) -> BehaviorPattern:
    return BehaviorPattern(**_deviations(raw_scores, "behavior_", BEHAVIOR_AXES, BEHAVIOR_NORMS))
