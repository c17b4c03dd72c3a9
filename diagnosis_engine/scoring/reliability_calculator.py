"""
Answer Reliability Calculator
diagnosis_engine/scoring/reliability_calculator.py

Heuristic screen for careless or patterned answering. Works on the raw,
ordered answers (reverse items NOT flipped). Starts at 100 and deducts:

    Check                          | Condition                   | Deduction
    ───────────────────────────────┼─────────────────────────────┼──────────
    1. Straight-lining             | longest identical run ≥ 10  | 30
                                   | run 7-9                     | 15
    2. Extreme responding (1 or 7) | ratio > 0.7                 | 25
                                   | ratio in (0.5, 0.7]         | 10
    3. Central tendency (4)        | ratio > 0.6                 | 20
                                   | ratio in (0.4, 0.6]         | 10
    4. Low variance                | population variance < 0.5   | 15
    5. Reverse-item inconsistency  | ≥ 3 inconsistent categories | 20
                                   | exactly 2                   | 10

    score  = max(0, 100 − Σ deductions)
    status = RELIABLE (≥ 70) / NEEDS_REVIEW (≥ 50) / UNRELIABLE

A category is inconsistent when its normal-coded and reverse-coded answers
lean the same way: both means above the high threshold or both below the
low threshold. The thresholds are calibration constants for the 1-7 scale
and live in settings.
"""

import statistics
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import structlog

from diagnosis_engine.config import settings
from diagnosis_engine.models.answer import AnswerRecord
from diagnosis_engine.models.diagnosis import ReliabilityResult
from diagnosis_engine.models.enumerations import QuestionCategory, ReliabilityStatus
from diagnosis_engine.scoring.utils import mean

logger = structlog.get_logger(__name__)

BASE_SCORE = 100

STRAIGHT_LINE_SEVERE = 10
STRAIGHT_LINE_MODERATE = 7
EXTREME_SEVERE_RATIO = 0.7
EXTREME_MODERATE_RATIO = 0.5
CENTRAL_SEVERE_RATIO = 0.6
CENTRAL_MODERATE_RATIO = 0.4
LOW_VARIANCE = 0.5
INCONSISTENT_SEVERE = 3
INCONSISTENT_MODERATE = 2

RELIABLE_MIN = 70
NEEDS_REVIEW_MIN = 50

EXTREME_SCORES = frozenset({1, 7})
MIDPOINT_SCORE = 4


@dataclass
class _Deductions:
    issues: List[str] = field(default_factory=list)
    total: int = 0

    def add(self, issue: str, points: int) -> None:
        self.issues.append(issue)
        self.total += points


def longest_identical_run(scores: Sequence[int]) -> int:
    """Length of the longest run of consecutive identical scores (0 if empty)."""
    if not scores:
        return 0
    longest = current = 1
    for previous, score in zip(scores, scores[1:]):
        current = current + 1 if score == previous else 1
        longest = max(longest, current)
    return longest


def count_inconsistent_categories(
    answers: Sequence[AnswerRecord],
    high_mean: float,
    low_mean: float,
) -> int:
    """Categories whose normal and reverse items agree instead of disagreeing."""
    normal: Dict[QuestionCategory, List[int]] = defaultdict(list)
    reverse: Dict[QuestionCategory, List[int]] = defaultdict(list)
    for answer in answers:
        (reverse if answer.is_reverse else normal)[answer.category].append(answer.score)

    inconsistent = 0
    for category, normal_scores in normal.items():
        reverse_scores = reverse.get(category)
        if not reverse_scores:
            continue
        normal_mean = mean(normal_scores)
        reverse_mean = mean(reverse_scores)
        both_high = normal_mean > high_mean and reverse_mean > high_mean
        both_low = normal_mean < low_mean and reverse_mean < low_mean
        if both_high or both_low:
            inconsistent += 1
    return inconsistent


def status_for_score(score: int) -> ReliabilityStatus:
    if score >= RELIABLE_MIN:
        return ReliabilityStatus.RELIABLE
    elif score >= NEEDS_REVIEW_MIN:
        return ReliabilityStatus.NEEDS_REVIEW
    else:
        return ReliabilityStatus.UNRELIABLE


def assess_reliability(answers: Sequence[AnswerRecord]) -> ReliabilityResult:
    """
    Args:
        answers: Ordered answers as submitted.

    Returns:
        ReliabilityResult with status, human-readable issues and score.

    An empty answer list has nothing to screen and comes back RELIABLE/100.
    """
    scores = [a.score for a in answers]
    deductions = _Deductions()

    # 1. Straight-lining
    run = longest_identical_run(scores)
    if run >= STRAIGHT_LINE_SEVERE:
        deductions.add(f"Same answer given {run} times in a row (10+ consecutive)", 30)
    elif run >= STRAIGHT_LINE_MODERATE:
        deductions.add(f"Same answer given {run} times in a row", 15)

    if scores:
        # 2. Extreme responding
        extreme_ratio = sum(1 for s in scores if s in EXTREME_SCORES) / len(scores)
        if extreme_ratio > EXTREME_SEVERE_RATIO:
            deductions.add("Too many extreme answers (1 or 7)", 25)
        elif extreme_ratio > EXTREME_MODERATE_RATIO:
            deductions.add("Somewhat many extreme answers (1 or 7)", 10)

        # 3. Central tendency
        central_ratio = sum(1 for s in scores if s == MIDPOINT_SCORE) / len(scores)
        if central_ratio > CENTRAL_SEVERE_RATIO:
            deductions.add("Too many midpoint answers (4)", 20)
        elif central_ratio > CENTRAL_MODERATE_RATIO:
            deductions.add("Somewhat many midpoint answers (4)", 10)

        # 4. Low variance
        if statistics.pvariance(scores) < LOW_VARIANCE:
            deductions.add("Answers show too little variation", 15)

    # 5. Reverse-item consistency
    inconsistent = count_inconsistent_categories(
        answers,
        high_mean=settings.REVERSE_CONSISTENCY_HIGH_MEAN,
        low_mean=settings.REVERSE_CONSISTENCY_LOW_MEAN,
    )
    if inconsistent >= INCONSISTENT_SEVERE:
        deductions.add("Answers contradict reverse-coded items", 20)
    elif inconsistent >= INCONSISTENT_MODERATE:
        deductions.add("Some answers contradict reverse-coded items", 10)

    score = max(0, BASE_SCORE - deductions.total)
    status = status_for_score(score)

    logger.debug(
        "reliability_assessed",
        status=status.value,
        score=score,
        longest_run=run,
        inconsistent_categories=inconsistent,
        issue_count=len(deductions.issues),
    )

    return ReliabilityResult(status=status, issues=tuple(deductions.issues), score=score)
