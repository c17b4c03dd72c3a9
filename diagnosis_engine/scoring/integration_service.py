"""
scoring/integration_service.py

Full pipeline: ordered answers → DiagnosisCalculationResult.

Pipeline steps:
  1. aggregate_raw_scores        → RawScores
  2. deviation calculator         → BigFiveScores / ThinkingPattern / BehaviorPattern
  3. classify_type                → TypeResult
  4. classify_stress_tolerance    → StressToleranceLevel
  5. assess_reliability           → ReliabilityResult   (raw answers only)
  6. calculate_potential_scores   → ranked PotentialScoreResult list

Every stage is a pure function of its inputs, so concurrent calls need no
locking and identical answers always give an identical result.
"""

from typing import Sequence

import structlog

from diagnosis_engine.models.answer import AnswerRecord
from diagnosis_engine.models.diagnosis import DiagnosisCalculationResult
from diagnosis_engine.scoring.deviation_calculator import (
    calculate_behavior_pattern,
    calculate_big_five,
    calculate_thinking_pattern,
)
from diagnosis_engine.scoring.potential_calculator import calculate_potential_scores
from diagnosis_engine.scoring.raw_score_aggregator import aggregate_raw_scores
from diagnosis_engine.scoring.reliability_calculator import assess_reliability
from diagnosis_engine.scoring.stress_tolerance import classify_stress_tolerance
from diagnosis_engine.scoring.type_classifier import classify_type

logger = structlog.get_logger(__name__)


def calculate_diagnosis(answers: Sequence[AnswerRecord]) -> DiagnosisCalculationResult:
    """
    Run the whole scoring pipeline for one respondent.

    Args:
        answers: Ordered answers, validated upstream. Missing categories
                 fall back to neutral defaults instead of raising.

    Returns:
        DiagnosisCalculationResult; the input is not modified.
    """
    # 1. Raw averages
    raw_scores = aggregate_raw_scores(answers)

    # 2. Deviation scores
    big_five = calculate_big_five(raw_scores)
    thinking = calculate_thinking_pattern(raw_scores)
    behavior = calculate_behavior_pattern(raw_scores)

    # 3-4. Typology and stress tolerance
    type_result = classify_type(big_five, thinking)
    stress_tolerance = classify_stress_tolerance(big_five.neuroticism)

    # 5. Reliability works on the raw answers, not the deviation scores
    reliability = assess_reliability(answers)

    # 6. Job potential
    potential_scores = calculate_potential_scores(big_five, thinking, behavior)

    logger.info(
        "diagnosis_calculated",
        answer_count=len(answers),
        type_code=type_result.type_code.value,
        stress_tolerance=stress_tolerance.value,
        reliability_status=reliability.status.value,
        reliability_score=reliability.score,
        top_job=potential_scores[0].job_type if potential_scores else None,
    )

    return DiagnosisCalculationResult(
        big_five=big_five,
        thinking_pattern=thinking,
        behavior_pattern=behavior,
        raw_scores=raw_scores,
        type_result=type_result,
        stress_tolerance=stress_tolerance,
        reliability=reliability,
        potential_scores=tuple(potential_scores),
    )
