"""
Norms Table
diagnosis_engine/scoring/norms.py

Population mean / SD per factor on the raw 1-7 scale. Used only by the
deviation calculator. Recalibrating norms means editing this table; the
algorithms stay untouched.

Factor                 | mean  sd
───────────────────────┼───────────
extraversion           | 3.5   1.0
openness               | 3.8   0.9
agreeableness          | 4.0   0.85
conscientiousness      | 3.7   0.95
neuroticism            | 3.3   1.1
thinking_R / A / S / E | 3.5/3.6/3.8/3.4   1.0/0.95/0.9/1.05
behavior_*             | see BEHAVIOR_NORMS
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Tuple

from diagnosis_engine.core.exceptions import NormsConfigurationError
from diagnosis_engine.models.diagnosis import BehaviorPattern, BigFiveScores, ThinkingPattern

# Factor keys in canonical order (field order of the result types)
BIG_FIVE_FACTORS: Tuple[str, ...] = tuple(f.name for f in fields(BigFiveScores))
THINKING_AXES: Tuple[str, ...] = tuple(f.name for f in fields(ThinkingPattern))
BEHAVIOR_AXES: Tuple[str, ...] = tuple(f.name for f in fields(BehaviorPattern))


@dataclass(frozen=True)
class Norm:
    """Reference distribution of one factor's raw average."""
    mean: Decimal
    sd: Decimal


BIG_FIVE_NORMS: Dict[str, Norm] = {
    "extraversion":      Norm(Decimal("3.5"), Decimal("1.0")),
    "openness":          Norm(Decimal("3.8"), Decimal("0.9")),
    "agreeableness":     Norm(Decimal("4.0"), Decimal("0.85")),
    "conscientiousness": Norm(Decimal("3.7"), Decimal("0.95")),
    "neuroticism":       Norm(Decimal("3.3"), Decimal("1.1")),
}

THINKING_NORMS: Dict[str, Norm] = {
    "R": Norm(Decimal("3.5"), Decimal("1.0")),
    "A": Norm(Decimal("3.6"), Decimal("0.95")),
    "S": Norm(Decimal("3.8"), Decimal("0.9")),
    "E": Norm(Decimal("3.4"), Decimal("1.05")),
}

BEHAVIOR_NORMS: Dict[str, Norm] = {
    "efficiency":   Norm(Decimal("3.5"), Decimal("1.0")),
    "friendliness": Norm(Decimal("3.7"), Decimal("0.9")),
    "knowledge":    Norm(Decimal("3.6"), Decimal("0.95")),
    "appearance":   Norm(Decimal("3.3"), Decimal("1.1")),
    "challenge":    Norm(Decimal("3.4"), Decimal("1.0")),
}


def validate_norms(norms: Mapping[str, Norm], required: Iterable[str]) -> None:
    """
    Check a norm table covers every required factor with a positive SD.

    Raises:
        NormsConfigurationError: on the first missing factor or sd <= 0.
    """
    for factor in required:
        norm = norms.get(factor)
        if norm is None:
            raise NormsConfigurationError(factor, "no norm defined")
        if norm.sd <= 0:
            raise NormsConfigurationError(factor, f"sd must be > 0, got {norm.sd}")


validate_norms(BIG_FIVE_NORMS, BIG_FIVE_FACTORS)
validate_norms(THINKING_NORMS, THINKING_AXES)
validate_norms(BEHAVIOR_NORMS, BEHAVIOR_AXES)
