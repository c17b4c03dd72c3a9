# diagnosis_engine/scoring/raw_score_aggregator.py
"""
Raw Score Aggregator
--------------------
Turns the ordered answer list into 14 per-factor raw averages.

    effective = 8 − score   if the item is reverse-coded
              = score       otherwise

Big Five categories average directly. THINKING and BEHAVIOR carry no
sub-axis tag: their answers are split positionally, in submission order,

    THINKING → R | A | S | E                   (4 contiguous slices)
    BEHAVIOR → efficiency | friendliness | knowledge | appearance | challenge

with slice width ceil(n / k) and the last slice taking the remainder. The
question bank must therefore submit these items grouped by axis in that
order.

An empty bucket or slice averages to the scale midpoint (4.0); this is a
documented fallback, not an error.
"""
import math
from collections import defaultdict
from typing import Dict, List, Sequence

import structlog

from diagnosis_engine.models.answer import AnswerRecord
from diagnosis_engine.models.diagnosis import RawScores
from diagnosis_engine.models.enumerations import QuestionCategory
from diagnosis_engine.scoring.norms import BEHAVIOR_AXES, THINKING_AXES
from diagnosis_engine.scoring.utils import mean

logger = structlog.get_logger(__name__)

SCALE_MIDPOINT = 4.0
REVERSE_PIVOT = 8  # 1 ↔ 7 on a 1-7 scale


def effective_score(answer: AnswerRecord) -> int:
    """Score after reverse-coding."""
    return REVERSE_PIVOT - answer.score if answer.is_reverse else answer.score


def average_or_midpoint(scores: Sequence[int], bucket: str) -> float:
    """Mean of the bucket, or the scale midpoint when nothing was answered."""
    if not scores:
        logger.warning("empty_bucket_defaulted", bucket=bucket, default=SCALE_MIDPOINT)
        return SCALE_MIDPOINT
    return mean(scores)


def split_positionally(scores: Sequence[int], parts: int) -> List[Sequence[int]]:
    """
    Split into `parts` contiguous slices of width ceil(n / parts).

    The final slice absorbs whatever is left, so trailing slices may be
    empty for short inputs (e.g. 5 items into 4 parts → 2, 2, 1, 0).
    """
    width = math.ceil(len(scores) / parts)
    slices = [scores[i * width:(i + 1) * width] for i in range(parts - 1)]
    slices.append(scores[(parts - 1) * width:])
    return slices


def aggregate_raw_scores(answers: Sequence[AnswerRecord]) -> RawScores:
    """
    Args:
        answers: Ordered answers for one respondent.

    Returns:
        RawScores with all 14 averages on the 1-7 scale.
    """
    buckets: Dict[QuestionCategory, List[int]] = defaultdict(list)
    for answer in answers:
        buckets[answer.category].append(effective_score(answer))

    thinking_slices = split_positionally(buckets[QuestionCategory.THINKING], len(THINKING_AXES))
    behavior_slices = split_positionally(buckets[QuestionCategory.BEHAVIOR], len(BEHAVIOR_AXES))

    thinking = {
        f"thinking_{axis}": average_or_midpoint(chunk, f"thinking_{axis}")
        for axis, chunk in zip(THINKING_AXES, thinking_slices)
    }
    behavior = {
        f"behavior_{axis}": average_or_midpoint(chunk, f"behavior_{axis}")
        for axis, chunk in zip(BEHAVIOR_AXES, behavior_slices)
    }

    raw = RawScores(
        extraversion=average_or_midpoint(buckets[QuestionCategory.EXTRAVERSION], "extraversion"),
        openness=average_or_midpoint(buckets[QuestionCategory.OPENNESS], "openness"),
        agreeableness=average_or_midpoint(buckets[QuestionCategory.AGREEABLENESS], "agreeableness"),
        conscientiousness=average_or_midpoint(buckets[QuestionCategory.CONSCIENTIOUSNESS], "conscientiousness"),
        neuroticism=average_or_midpoint(buckets[QuestionCategory.NEUROTICISM], "neuroticism"),
        **thinking,
        **behavior,
    )

    logger.debug(
        "raw_scores_aggregated",
        answer_count=len(answers),
        thinking_count=len(buckets[QuestionCategory.THINKING]),
        behavior_count=len(buckets[QuestionCategory.BEHAVIOR]),
    )
    return raw
