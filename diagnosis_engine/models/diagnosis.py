"""
Diagnosis value types - Personality Diagnosis Engine
diagnosis_engine/models/diagnosis.py

Immutable results produced by the scoring pipeline. Deviation scores are
integers in [20, 80] (T-score convention, mean 50 / SD 10).
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from diagnosis_engine.models.enumerations import (
    PotentialGrade,
    ReliabilityStatus,
    StressToleranceLevel,
    TypeCode,
)


@dataclass(frozen=True)
class RawScores:
    """Per-factor raw averages on the 1-7 scale (reverse items already flipped)."""
    extraversion: float
    openness: float
    agreeableness: float
    conscientiousness: float
    neuroticism: float
    thinking_R: float
    thinking_A: float
    thinking_S: float
    thinking_E: float
    behavior_efficiency: float
    behavior_friendliness: float
    behavior_knowledge: float
    behavior_appearance: float
    behavior_challenge: float


@dataclass(frozen=True)
class BigFiveScores:
    extraversion: int
    openness: int
    agreeableness: int
    conscientiousness: int
    neuroticism: int


@dataclass(frozen=True)
class ThinkingPattern:
    R: int  # Leader: decision making, ownership
    A: int  # Analyst: analysis, critical thinking
    S: int  # Supporter: cooperation, support
    E: int  # Energetic: activity, information gathering


@dataclass(frozen=True)
class BehaviorPattern:
    efficiency: int
    friendliness: int
    knowledge: int
    appearance: int
    challenge: int


@dataclass(frozen=True)
class TypeResult:
    type_name: str
    type_code: TypeCode
    feature_labels: Tuple[str, ...]  # unique, at most 8


@dataclass(frozen=True)
class ReliabilityResult:
    status: ReliabilityStatus
    issues: Tuple[str, ...]
    score: int  # [0, 100]


@dataclass(frozen=True)
class PotentialScoreResult:
    job_type: str
    score: int  # [0, 100]
    grade: PotentialGrade
    matching_factors: Tuple[str, ...]  # unique, at most 5


@dataclass(frozen=True)
class DiagnosisCalculationResult:
    """Aggregate output of calculate_diagnosis(); callers own storage."""
    big_five: BigFiveScores
    thinking_pattern: ThinkingPattern
    behavior_pattern: BehaviorPattern
    raw_scores: RawScores
    type_result: TypeResult
    stress_tolerance: StressToleranceLevel
    reliability: ReliabilityResult
    potential_scores: Tuple[PotentialScoreResult, ...]  # sorted by score desc

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable dict: enums become their values, tuples become lists."""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value
