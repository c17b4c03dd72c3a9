# tests/test_integration_service.py
"""
End-to-end pipeline: answers in, DiagnosisCalculationResult out.
"""

import json

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from diagnosis_engine import AnswerRecord, calculate_diagnosis
from diagnosis_engine.models.enumerations import (
    QuestionCategory,
    ReliabilityStatus,
    StressToleranceLevel,
    TypeCode,
)


class TestAnswerRecord:

    def test_camel_case_payload(self):
        answer = AnswerRecord.model_validate(
            {"questionId": "q-1", "score": 5, "category": "OPENNESS", "isReverse": True}
        )
        assert answer.question_id == "q-1"
        assert answer.category == QuestionCategory.OPENNESS
        assert answer.is_reverse is True

    def test_reverse_defaults_false(self):
        answer = AnswerRecord(question_id="q-1", score=5, category=QuestionCategory.THINKING)
        assert answer.is_reverse is False

    @pytest.mark.parametrize("score", [0, 8])
    def test_score_out_of_range_rejected(self, score):
        with pytest.raises(ValidationError):
            AnswerRecord(question_id="q-1", score=score, category=QuestionCategory.THINKING)

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            AnswerRecord.model_validate({"questionId": "q-1", "score": 3, "category": "MOOD"})

    def test_frozen(self):
        answer = AnswerRecord(question_id="q-1", score=5, category=QuestionCategory.THINKING)
        with pytest.raises(ValidationError):
            answer.score = 6


class TestCalculateDiagnosis:

    def test_all_midpoint_answers(self, midpoint_answers):
        result = calculate_diagnosis(midpoint_answers)

        assert result.raw_scores.extraversion == pytest.approx(4.0)
        assert result.raw_scores.thinking_E == pytest.approx(4.0)

        # 4.0 is above most norm means, so deviations sit a little over 50
        assert result.big_five.extraversion == 55
        assert result.big_five.agreeableness == 50
        assert result.big_five.neuroticism == 56
        assert result.thinking_pattern.E == 56

        assert result.type_result.type_code == TypeCode.EE
        assert result.type_result.type_name == "Passionate Leader"
        assert result.type_result.feature_labels == (
            "Proactive", "Creative", "Sociable", "Innovative", "Energetic",
        )
        assert result.stress_tolerance == StressToleranceLevel.MEDIUM

        assert result.reliability.score == 35
        assert result.reliability.status == ReliabilityStatus.UNRELIABLE

        assert len(result.potential_scores) == 25

    def test_thirty_identical_answers_flagged(self, make_answers):
        scores = list(range(1, 8)) * 5 + [2] * 30 + list(range(1, 8)) * 5
        result = calculate_diagnosis(make_answers(scores))
        assert result.reliability.score == 70
        assert any("30 times in a row" in issue for issue in result.reliability.issues)

    def test_empty_answers_use_neutral_defaults(self):
        result = calculate_diagnosis([])
        assert result.raw_scores.openness == 4.0
        assert result.big_five.openness == 52
        assert result.reliability.status == ReliabilityStatus.RELIABLE
        assert result.reliability.score == 100
        assert len(result.potential_scores) == 25

    def test_deterministic(self, varied_answers):
        first = calculate_diagnosis(varied_answers)
        second = calculate_diagnosis(varied_answers)
        assert first == second
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_input_not_mutated(self, varied_answers):
        snapshot = [a.model_dump() for a in varied_answers]
        calculate_diagnosis(varied_answers)
        assert [a.model_dump() for a in varied_answers] == snapshot

    def test_potential_scores_ranked(self, varied_answers):
        scores = [p.score for p in calculate_diagnosis(varied_answers).potential_scores]
        assert scores == sorted(scores, reverse=True)

    def test_logs_summary(self, midpoint_answers):
        with capture_logs() as logs:
            calculate_diagnosis(midpoint_answers)
        summary = [e for e in logs if e["event"] == "diagnosis_calculated"]
        assert len(summary) == 1
        assert summary[0]["answer_count"] == 90
        assert summary[0]["reliability_status"] == "UNRELIABLE"


class TestToDict:

    def test_json_serialisable(self, midpoint_answers):
        data = calculate_diagnosis(midpoint_answers).to_dict()
        decoded = json.loads(json.dumps(data))

        assert decoded["type_result"]["type_code"] == "EE"
        assert decoded["stress_tolerance"] == "MEDIUM"
        assert decoded["reliability"]["status"] == "UNRELIABLE"
        assert isinstance(decoded["reliability"]["issues"], list)
        assert decoded["thinking_pattern"]["E"] == 56
        assert set(decoded["potential_scores"][0]) == {"job_type", "score", "grade", "matching_factors"}
