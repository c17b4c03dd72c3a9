# tests/conftest.py

"""
Pytest Fixtures - Shared answer builders for the scoring tests

QUESTION ID SCHEME:
- q-001 .. q-NNN in submission order, regardless of category
"""

import logging
from typing import Iterable, List, Sequence

import pytest
import structlog

from diagnosis_engine.models.answer import AnswerRecord
from diagnosis_engine.models.enumerations import QuestionCategory


def build_answers(
    scores: Sequence[int],
    category: QuestionCategory = QuestionCategory.THINKING,
    reverse: Iterable[bool] = (),
    start: int = 1,
) -> List[AnswerRecord]:
    """One AnswerRecord per score, all in the same category."""
    flags = list(reverse) or [False] * len(scores)
    return [
        AnswerRecord(
            question_id=f"q-{start + i:03d}",
            score=score,
            category=category,
            is_reverse=flag,
        )
        for i, (score, flag) in enumerate(zip(scores, flags))
    ]


# =============================================================================
# ANSWER BUILDER FIXTURES
# =============================================================================

@pytest.fixture
def make_answers():
    """Factory: make_answers(scores, category=THINKING, reverse=())."""
    return build_answers


@pytest.fixture
def midpoint_answers() -> List[AnswerRecord]:
    """
    90 answers, every one a 4.

    15 per category for the five Big Five factors and THINKING; within each
    category the reverse flag alternates so normal and reverse items balance.
    """
    categories = [
        QuestionCategory.EXTRAVERSION,
        QuestionCategory.OPENNESS,
        QuestionCategory.AGREEABLENESS,
        QuestionCategory.CONSCIENTIOUSNESS,
        QuestionCategory.NEUROTICISM,
        QuestionCategory.THINKING,
    ]
    answers: List[AnswerRecord] = []
    for category in categories:
        answers.extend(
            build_answers(
                [4] * 15,
                category=category,
                reverse=[i % 2 == 1 for i in range(15)],
                start=len(answers) + 1,
            )
        )
    return answers


@pytest.fixture
def varied_answers() -> List[AnswerRecord]:
    """70 THINKING answers cycling 1..7: no run, balanced spread."""
    return build_answers(list(range(1, 8)) * 10)


# =============================================================================
# STRUCTLOG ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI configures structlog and the root logger globally; undo it after every test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
