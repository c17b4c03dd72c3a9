"""
Type Classifier
diagnosis_engine/scoring/type_classifier.py

Quadrant typology from extraversion × openness (threshold 50, inclusive):

                     openness ≥ 50     openness < 50
    extraversion ≥ 50      EE               EI
    extraversion < 50      IE               II

Feature labels start from the type's four base labels and are augmented in
a fixed order; the final list is de-duplicated (order kept) and capped at 8.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

import structlog

from diagnosis_engine.models.diagnosis import BigFiveScores, ThinkingPattern, TypeResult
from diagnosis_engine.models.enumerations import TypeCode
from diagnosis_engine.scoring.norms import THINKING_AXES

logger = structlog.get_logger(__name__)

TYPE_THRESHOLD = 50
HIGH_TRAIT = 60
LOW_TRAIT = 40
THINKING_LABEL_MIN = 55
MAX_FEATURE_LABELS = 8


@dataclass(frozen=True)
class TypeDefinition:
    name: str
    features: Tuple[str, ...]


TYPE_DEFINITIONS: Dict[TypeCode, TypeDefinition] = {
    TypeCode.EE: TypeDefinition(
        "Passionate Leader",
        ("Proactive", "Creative", "Sociable", "Innovative"),
    ),
    TypeCode.EI: TypeDefinition(
        "Driven Executor",
        ("Action-oriented", "Practical", "Realistic", "Efficient"),
    ),
    TypeCode.IE: TypeDefinition(
        "Reflective Creator",
        ("Introspective", "Creative", "Original", "Deep thinker"),
    ),
    TypeCode.II: TypeDefinition(
        "Analytical Specialist",
        ("Careful", "Analytical", "Expert", "Precise"),
    ),
}

FEATURE_LABELS: Dict[str, Tuple[str, ...]] = {
    "high_extraversion": ("Sociable", "Leadership", "Star quality", "Influential"),
    "low_extraversion": ("Introspective", "Focused", "Independent", "Deep thinker"),
    "high_agreeableness": ("Cooperative", "Empathetic", "Customer-minded", "Team player"),
    "high_conscientiousness": ("Organized", "Responsible", "Accurate", "Persistent"),
    "low_neuroticism": ("Unflappable", "Stress-resilient", "Optimistic", "Stable"),
    "high_R": ("Decisive", "Self-directed", "Commanding", "Born leader"),
    "high_A": ("Analytical", "Logical", "Critical thinker", "Problem solver"),
    "high_S": ("Supportive", "Collaborative", "Good listener", "Service-minded"),
    "high_E": ("Energetic", "Information gatherer", "Assertive", "Dynamic"),
}


def classify_type_code(big_five: BigFiveScores) -> TypeCode:
    extraverted = big_five.extraversion >= TYPE_THRESHOLD
    open_minded = big_five.openness >= TYPE_THRESHOLD
    if extraverted and open_minded:
        return TypeCode.EE
    if extraverted:
        return TypeCode.EI
    if open_minded:
        return TypeCode.IE
    return TypeCode.II


def dominant_thinking_axis(thinking: ThinkingPattern) -> str | None:
    """
    The axis holding the maximum, if it reaches THINKING_LABEL_MIN.

    Ties go to the first axis in R, A, S, E order, so at most one axis wins.
    """
    values = {axis: getattr(thinking, axis) for axis in THINKING_AXES}
    top = max(values.values())
    if top < THINKING_LABEL_MIN:
        return None
    return next(axis for axis in THINKING_AXES if values[axis] == top)


def build_feature_labels(
    type_code: TypeCode,
    big_five: BigFiveScores,
    thinking: ThinkingPattern,
) -> Tuple[str, ...]:
    labels: List[str] = list(TYPE_DEFINITIONS[type_code].features)

    if big_five.extraversion >= HIGH_TRAIT:
        labels.extend(FEATURE_LABELS["high_extraversion"][:2])
    elif big_five.extraversion <= LOW_TRAIT:
        labels.extend(FEATURE_LABELS["low_extraversion"][:2])

    if big_five.agreeableness >= HIGH_TRAIT:
        labels.extend(FEATURE_LABELS["high_agreeableness"][:1])

    if big_five.conscientiousness >= HIGH_TRAIT:
        labels.extend(FEATURE_LABELS["high_conscientiousness"][:1])

    if big_five.neuroticism <= LOW_TRAIT:
        labels.extend(FEATURE_LABELS["low_neuroticism"][:1])

    axis = dominant_thinking_axis(thinking)
    if axis is not None:
        labels.extend(FEATURE_LABELS[f"high_{axis}"][:1])

    unique = list(dict.fromkeys(labels))
    return tuple(unique[:MAX_FEATURE_LABELS])


def classify_type(big_five: BigFiveScores, thinking: ThinkingPattern) -> TypeResult:
    """
    Args:
        big_five: Big Five deviation scores.
        thinking: Thinking-pattern deviation scores.

    Returns:
        TypeResult with type name, code and up to 8 unique feature labels.
    """
    type_code = classify_type_code(big_five)
    result = TypeResult(
        type_name=TYPE_DEFINITIONS[type_code].name,
        type_code=type_code,
        feature_labels=build_feature_labels(type_code, big_five, thinking),
    )
    logger.debug("type_classified", type_code=type_code.value, label_count=len(result.feature_labels))
    return result
