"""
Models Package - Personality Diagnosis Engine

Enumerations, the answer input record and the immutable result types.
"""

from diagnosis_engine.models.answer import AnswerRecord
from diagnosis_engine.models.diagnosis import (
    BehaviorPattern,
    BigFiveScores,
    DiagnosisCalculationResult,
    PotentialScoreResult,
    RawScores,
    ReliabilityResult,
    ThinkingPattern,
    TypeResult,
)
from diagnosis_engine.models.enumerations import (
    Ideal,
    PotentialGrade,
    QuestionCategory,
    ReliabilityStatus,
    StressToleranceLevel,
    TypeCode,
)

__all__ = [
    "AnswerRecord",
    "BehaviorPattern",
    "BigFiveScores",
    "DiagnosisCalculationResult",
    "Ideal",
    "PotentialGrade",
    "PotentialScoreResult",
    "QuestionCategory",
    "RawScores",
    "ReliabilityResult",
    "ReliabilityStatus",
    "StressToleranceLevel",
    "ThinkingPattern",
    "TypeCode",
    "TypeResult",
]
