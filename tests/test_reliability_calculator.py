# tests/test_reliability_calculator.py
"""
Reliability screen: each heuristic in isolation, then combined scenarios.

THINKING answers without reverse flags are used wherever the reverse-item
check should stay silent.
"""

import pytest

from diagnosis_engine.config import settings
from diagnosis_engine.models.enumerations import QuestionCategory, ReliabilityStatus
from diagnosis_engine.scoring import reliability_calculator
from diagnosis_engine.scoring.reliability_calculator import (
    assess_reliability,
    count_inconsistent_categories,
    longest_identical_run,
    status_for_score,
)


def inconsistent_block(make_answers, category, start):
    """Normal 5, 7 and reverse 6, 5: both sides lean high (means 6.0 / 5.5)."""
    return make_answers([5, 6, 7, 5], category=category,
                        reverse=[False, True, False, True], start=start)


class TestLongestIdenticalRun:

    @pytest.mark.parametrize("scores,expected", [
        ([], 0),
        ([3], 1),
        ([1, 2, 3], 1),
        ([1, 1, 2, 2, 2], 3),
        ([4] * 12 + [5], 12),
    ])
    def test_run_length(self, scores, expected):
        assert longest_identical_run(scores) == expected


class TestStatusForScore:

    @pytest.mark.parametrize("score,expected", [
        (100, ReliabilityStatus.RELIABLE),
        (70, ReliabilityStatus.RELIABLE),
        (69, ReliabilityStatus.NEEDS_REVIEW),
        (50, ReliabilityStatus.NEEDS_REVIEW),
        (49, ReliabilityStatus.UNRELIABLE),
        (0, ReliabilityStatus.UNRELIABLE),
    ])
    def test_status_bands(self, score, expected):
        assert status_for_score(score) == expected


class TestAssessReliability:

    def test_empty_answers_are_reliable(self):
        result = assess_reliability([])
        assert result.score == 100
        assert result.status == ReliabilityStatus.RELIABLE
        assert result.issues == ()

    def test_varied_answers_pass_every_check(self, varied_answers):
        result = assess_reliability(varied_answers)
        assert result.score == 100
        assert result.issues == ()

    def test_severe_straight_lining(self, make_answers):
        # 5 full 1..7 cycles end on 7, then thirty 2s, then the cycle restarts at 1
        scores = list(range(1, 8)) * 5 + [2] * 30 + list(range(1, 8)) * 5
        result = assess_reliability(make_answers(scores))
        assert result.score == 70
        assert result.status == ReliabilityStatus.RELIABLE
        assert result.issues == ("Same answer given 30 times in a row (10+ consecutive)",)

    def test_moderate_straight_lining(self, make_answers):
        scores = list(range(1, 8)) * 4 + [3] * 8 + list(range(1, 8)) * 4
        result = assess_reliability(make_answers(scores))
        assert result.score == 85
        assert result.issues == ("Same answer given 8 times in a row",)

    def test_run_of_six_is_tolerated(self, make_answers):
        scores = list(range(1, 8)) * 4 + [3] * 6 + list(range(1, 8)) * 4
        assert assess_reliability(make_answers(scores)).score == 100

    def test_severe_extreme_responding(self, make_answers):
        result = assess_reliability(make_answers([1, 7] * 10))
        assert result.score == 75
        assert result.issues == ("Too many extreme answers (1 or 7)",)

    def test_moderate_extreme_responding(self, make_answers):
        # 6 of 10 extreme
        result = assess_reliability(make_answers([1, 7, 1, 2, 7, 6, 1, 7, 3, 5]))
        assert result.score == 90
        assert result.issues == ("Somewhat many extreme answers (1 or 7)",)

    def test_moderate_central_tendency(self, make_answers):
        # 5 of 10 midpoint
        result = assess_reliability(make_answers([4, 1, 4, 2, 4, 6, 4, 7, 4, 3]))
        assert result.score == 90
        assert result.issues == ("Somewhat many midpoint answers (4)",)

    @pytest.mark.parametrize("scores,expected_score,expected_issues", [
        # extreme ratio bands: (0.5, 0.7] → 10, > 0.7 → 25
        ([1, 7, 1, 7, 1, 2, 3, 5, 6, 2], 100, ()),
        ([1, 7, 1, 7, 1, 7, 1, 2, 3, 5], 90, ("Somewhat many extreme answers (1 or 7)",)),
        ([1, 7, 1, 7, 1, 7, 1, 7, 2, 5], 75, ("Too many extreme answers (1 or 7)",)),
        # midpoint ratio bands: (0.4, 0.6] → 10, > 0.6 → 20
        ([4, 1, 4, 2, 4, 6, 4, 7, 3, 5], 100, ()),
        ([4, 1, 4, 2, 4, 6, 4, 7, 4, 4], 90, ("Somewhat many midpoint answers (4)",)),
        ([4, 1, 4, 4, 7, 4, 4, 2, 4, 4], 80, ("Too many midpoint answers (4)",)),
    ])
    def test_ratio_band_boundaries(self, make_answers, scores, expected_score, expected_issues):
        result = assess_reliability(make_answers(scores))
        assert result.score == expected_score
        assert result.issues == expected_issues

    def test_low_variance_alone(self, make_answers):
        # variance 0.25, no 4s, no extremes, runs of 1
        result = assess_reliability(make_answers([3, 2] * 10))
        assert result.score == 85
        assert result.issues == ("Answers show too little variation",)

    def test_all_midpoint_answers(self, midpoint_answers):
        result = assess_reliability(midpoint_answers)
        # run 90 (30) + midpoint ratio 1.0 (20) + variance 0 (15)
        assert result.score == 35
        assert result.status == ReliabilityStatus.UNRELIABLE
        assert result.issues == (
            "Same answer given 90 times in a row (10+ consecutive)",
            "Too many midpoint answers (4)",
            "Answers show too little variation",
        )

    def test_three_inconsistent_categories(self, make_answers):
        answers = (
            inconsistent_block(make_answers, QuestionCategory.EXTRAVERSION, 1)
            + inconsistent_block(make_answers, QuestionCategory.OPENNESS, 5)
            + inconsistent_block(make_answers, QuestionCategory.AGREEABLENESS, 9)
        )
        result = assess_reliability(answers)
        assert result.score == 80
        assert result.issues == ("Answers contradict reverse-coded items",)

    def test_two_inconsistent_categories(self, make_answers):
        answers = (
            inconsistent_block(make_answers, QuestionCategory.EXTRAVERSION, 1)
            + inconsistent_block(make_answers, QuestionCategory.OPENNESS, 5)
        )
        result = assess_reliability(answers)
        assert result.score == 90
        assert result.issues == ("Some answers contradict reverse-coded items",)

    def test_score_never_negative(self, make_answers):
        assert assess_reliability(make_answers([1] * 40)).score >= 0


class TestReverseConsistency:

    def test_both_low_counts(self, make_answers):
        answers = make_answers([1, 2, 3, 3], category=QuestionCategory.NEUROTICISM,
                               reverse=[False, True, False, True])
        assert count_inconsistent_categories(answers, high_mean=4.5, low_mean=3.5) == 1

    def test_opposite_sides_are_consistent(self, make_answers):
        answers = make_answers([6, 2, 7, 1], category=QuestionCategory.NEUROTICISM,
                               reverse=[False, True, False, True])
        assert count_inconsistent_categories(answers, high_mean=4.5, low_mean=3.5) == 0

    def test_category_without_reverse_items_is_skipped(self, make_answers):
        answers = make_answers([7, 7, 7], category=QuestionCategory.OPENNESS)
        assert count_inconsistent_categories(answers, high_mean=4.5, low_mean=3.5) == 0

    def test_default_calibration(self):
        assert settings.REVERSE_CONSISTENCY_HIGH_MEAN == 4.5
        assert settings.REVERSE_CONSISTENCY_LOW_MEAN == 3.5

    def test_thresholds_read_from_settings(self, make_answers, monkeypatch):
        monkeypatch.setattr(reliability_calculator.settings, "REVERSE_CONSISTENCY_HIGH_MEAN", 6.5)
        answers = (
            inconsistent_block(make_answers, QuestionCategory.EXTRAVERSION, 1)
            + inconsistent_block(make_answers, QuestionCategory.OPENNESS, 5)
            + inconsistent_block(make_answers, QuestionCategory.AGREEABLENESS, 9)
        )
        assert assess_reliability(answers).score == 100


class TestCalibrationConstants:

    def test_thresholds(self):
        assert reliability_calculator.STRAIGHT_LINE_SEVERE == 10
        assert reliability_calculator.STRAIGHT_LINE_MODERATE == 7
        assert reliability_calculator.EXTREME_SEVERE_RATIO == 0.7
        assert reliability_calculator.EXTREME_MODERATE_RATIO == 0.5
        assert reliability_calculator.CENTRAL_SEVERE_RATIO == 0.6
        assert reliability_calculator.CENTRAL_MODERATE_RATIO == 0.4
        assert reliability_calculator.LOW_VARIANCE == 0.5
        assert reliability_calculator.RELIABLE_MIN == 70
        assert reliability_calculator.NEEDS_REVIEW_MIN == 50
