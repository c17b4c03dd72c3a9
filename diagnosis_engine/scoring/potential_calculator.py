# diagnosis_engine/scoring/potential_calculator.py
"""
Job Potential Calculator
-------------------------
Scores job-fit potential for every profile in the job requirement table.

Per weighted factor (deviation score d in [20, 80]):
    high   : f = (d − 20) / 60 × 100
    low    : f = (80 − d) / 60 × 100
    medium : f = 100 − 2 × |d − 50|

    score = round(Σ f × w / Σ w)        (50 if Σ w = 0)
    grade = A (≥ 80) / B (≥ 60) / C (≥ 40) / D

Factors with f ≥ 70 are reported as matching factors (unique, max 5), in
evaluation order: Big Five, then thinking, then behavior. Results are
sorted by score descending; equal scores keep table order.
"""
from decimal import Decimal
from typing import Dict, List, Mapping, Sequence, Tuple, Union

import structlog

from diagnosis_engine.models.diagnosis import (
    BehaviorPattern,
    BigFiveScores,
    PotentialScoreResult,
    ThinkingPattern,
)
from diagnosis_engine.models.enumerations import Ideal, PotentialGrade
from diagnosis_engine.scoring.job_profiles import JOB_PROFILES, FactorRequirement, JobProfile
from diagnosis_engine.scoring.utils import clamp, round_half_up, weighted_mean

logger = structlog.get_logger(__name__)

DEVIATION_FLOOR = Decimal("20")
DEVIATION_CEILING = Decimal("80")
DEVIATION_SPAN = Decimal("60")
MIDPOINT = Decimal("50")
NO_WEIGHT_SCORE = Decimal("50")
MATCHING_FACTOR_MIN = Decimal("70")
MAX_MATCHING_FACTORS = 5

Pattern = Union[BigFiveScores, ThinkingPattern, BehaviorPattern]

# Grade thresholds, checked top-down
_GRADE_THRESHOLDS: Tuple[Tuple[int, PotentialGrade], ...] = (
    (80, PotentialGrade.A),
    (60, PotentialGrade.B),
    (40, PotentialGrade.C),
)

BIG_FIVE_DISPLAY_NAMES: Dict[str, str] = {
    "extraversion": "Extraversion",
    "openness": "Openness",
    "agreeableness": "Agreeableness",
    "conscientiousness": "Conscientiousness",
    "neuroticism": "Emotional stability",
}

THINKING_DISPLAY_NAMES: Dict[str, str] = {
    "R": "Leader tendency",
    "A": "Analyst tendency",
    "S": "Supporter tendency",
    "E": "Energetic tendency",
}

BEHAVIOR_DISPLAY_NAMES: Dict[str, str] = {
    "efficiency": "Efficiency-oriented",
    "friendliness": "Friendliness-oriented",
    "knowledge": "Knowledge-oriented",
    "appearance": "Appearance-oriented",
    "challenge": "Challenge-oriented",
}


def factor_score(deviation: int, ideal: Ideal) -> Decimal:
    """How well one deviation score fits the ideal direction, in [0, 100]."""
    d = Decimal(deviation)
    if ideal == Ideal.HIGH:
        return (d - DEVIATION_FLOOR) / DEVIATION_SPAN * 100
    if ideal == Ideal.LOW:
        return (DEVIATION_CEILING - d) / DEVIATION_SPAN * 100
    return 100 - abs(d - MIDPOINT) * 2


def grade_for_score(score: int) -> PotentialGrade:
    for threshold, grade in _GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return PotentialGrade.D


def score_job(
    job: JobProfile,
    big_five: BigFiveScores,
    thinking: ThinkingPattern,
    behavior: BehaviorPattern,
) -> PotentialScoreResult:
    values: List[Decimal] = []
    weights: List[Decimal] = []
    matching: List[str] = []

    groups: Sequence[Tuple[Mapping[str, FactorRequirement], Pattern, Dict[str, str]]] = (
        (job.big_five, big_five, BIG_FIVE_DISPLAY_NAMES),
        (job.thinking, thinking, THINKING_DISPLAY_NAMES),
        (job.behavior, behavior, BEHAVIOR_DISPLAY_NAMES),
    )
    for requirements, pattern, display_names in groups:
        for factor, req in requirements.items():
            fit = factor_score(getattr(pattern, factor), req.ideal)
            values.append(fit)
            weights.append(req.weight)
            if fit >= MATCHING_FACTOR_MIN:
                matching.append(display_names.get(factor, factor))

    aggregate = weighted_mean(values, weights, default=NO_WEIGHT_SCORE)
    score = int(clamp(Decimal(round_half_up(aggregate))))

    return PotentialScoreResult(
        job_type=job.job_type,
        score=score,
        grade=grade_for_score(score),
        matching_factors=tuple(list(dict.fromkeys(matching))[:MAX_MATCHING_FACTORS]),
    )


def calculate_potential_scores(
    big_five: BigFiveScores,
    thinking: ThinkingPattern,
    behavior: BehaviorPattern,
    profiles: Sequence[JobProfile] = JOB_PROFILES,
) -> List[PotentialScoreResult]:
    """
    Args:
        big_five / thinking / behavior: Deviation scores.
        profiles: Job requirement table (defaults to JOB_PROFILES).

    Returns:
        One PotentialScoreResult per profile, best fit first.
    """
    results = [score_job(job, big_five, thinking, behavior) for job in profiles]
    # sorted() is stable: ties keep table order
    ranked = sorted(results, key=lambda r: r.score, reverse=True)

    if ranked:
        logger.debug(
            "potential_scores_calculated",
            job_count=len(ranked),
            top_job=ranked[0].job_type,
            top_score=ranked[0].score,
        )
    return ranked
