"""
Profile Similarity Calculator
diagnosis_engine/scoring/similarity_calculator.py

Compares Big Five deviation vectors to find colleagues with a similar
personality profile. Callers supply the profiles; nothing is persisted.

Formula:
    cosine    = round(cos(a, b) × 100)                        (0 if |a| or |b| is 0)
    euclidean = round(max(0, 1 − ‖a − b‖ / √(5 × 60²)) × 100)
    similarity = round((cosine + euclidean) / 2)

√(5 × 60²) is the largest possible distance: every factor 60 points apart
(the full 20-80 deviation range).
"""

import math
from dataclasses import astuple, dataclass
from decimal import Decimal
from itertools import combinations
from typing import Dict, List, Mapping, Tuple

import structlog

from diagnosis_engine.models.diagnosis import BigFiveScores
from diagnosis_engine.scoring.norms import BIG_FIVE_FACTORS
from diagnosis_engine.scoring.utils import round_half_up, to_decimal

logger = structlog.get_logger(__name__)

MAX_DISTANCE = math.sqrt(len(BIG_FIVE_FACTORS) * 60 * 60)
DIFFERING_FACTOR_THRESHOLD = 15
DEFAULT_MIN_SIMILARITY = 70
DEFAULT_LIMIT = 10

FACTOR_NAMES: Dict[str, str] = {
    "extraversion": "Extraversion",
    "openness": "Openness",
    "agreeableness": "Agreeableness",
    "conscientiousness": "Conscientiousness",
    "neuroticism": "Neuroticism",
}


@dataclass(frozen=True)
class SimilarityResult:
    """Similarity of one respondent to another."""
    user_id: str
    similar_user_id: str
    similarity_percentage: int   # [0, 100]
    differing_factors: Tuple[str, ...]


def cosine_similarity(a: BigFiveScores, b: BigFiveScores) -> int:
    va, vb = astuple(a), astuple(b)
    dot = sum(x * y for x, y in zip(va, vb))
    magnitude_a = math.sqrt(sum(x * x for x in va))
    magnitude_b = math.sqrt(sum(y * y for y in vb))
    if magnitude_a == 0 or magnitude_b == 0:
        return 0
    return round_half_up(to_decimal(dot / (magnitude_a * magnitude_b)) * 100)


def euclidean_similarity(a: BigFiveScores, b: BigFiveScores) -> int:
    distance = math.sqrt(sum((x - y) ** 2 for x, y in zip(astuple(a), astuple(b))))
    similarity = (1 - distance / MAX_DISTANCE) * 100
    return round_half_up(to_decimal(max(0.0, similarity)))


def combined_similarity(a: BigFiveScores, b: BigFiveScores) -> int:
    """Mean of cosine and euclidean similarity, as a whole percentage."""
    total = cosine_similarity(a, b) + euclidean_similarity(a, b)
    return round_half_up(Decimal(total) / 2)


def find_differing_factors(
    a: BigFiveScores,
    b: BigFiveScores,
    threshold: int = DIFFERING_FACTOR_THRESHOLD,
) -> List[str]:
    """Factors at least `threshold` points apart, largest gap first."""
    gaps = [
        (FACTOR_NAMES[factor], abs(getattr(a, factor) - getattr(b, factor)))
        for factor in BIG_FIVE_FACTORS
    ]
    differing = [(name, gap) for name, gap in gaps if gap >= threshold]
    differing.sort(key=lambda item: item[1], reverse=True)
    return [name for name, _ in differing]


def compare_profiles(
    user_id: str,
    profile: BigFiveScores,
    other_user_id: str,
    other_profile: BigFiveScores,
) -> SimilarityResult:
    return SimilarityResult(
        user_id=user_id,
        similar_user_id=other_user_id,
        similarity_percentage=combined_similarity(profile, other_profile),
        differing_factors=tuple(find_differing_factors(profile, other_profile)),
    )


def find_similar_profiles(
    user_id: str,
    profile: BigFiveScores,
    candidates: Mapping[str, BigFiveScores],
    min_similarity: int = DEFAULT_MIN_SIMILARITY,
    limit: int = DEFAULT_LIMIT,
) -> List[SimilarityResult]:
    """
    Rank candidates by similarity to one profile.

    Args:
        user_id: Respondent being compared; skipped if present in candidates.
        profile: That respondent's Big Five scores.
        candidates: Other respondents' Big Five scores keyed by user id.
        min_similarity: Drop candidates below this percentage.
        limit: Maximum number of results.

    Returns:
        Most similar first; equal percentages keep candidate order.
    """
    matches = [
        compare_profiles(user_id, profile, other_id, other_profile)
        for other_id, other_profile in candidates.items()
        if other_id != user_id
    ]
    matches = [m for m in matches if m.similarity_percentage >= min_similarity]
    matches.sort(key=lambda m: m.similarity_percentage, reverse=True)

    logger.debug(
        "similar_profiles_found",
        candidate_count=len(candidates),
        match_count=len(matches),
        min_similarity=min_similarity,
    )
    return matches[:limit]


def similarity_matrix(profiles: Mapping[str, BigFiveScores]) -> List[SimilarityResult]:
    """Score every unordered pair once and emit it in both directions."""
    results: List[SimilarityResult] = []
    for (id_a, a), (id_b, b) in combinations(profiles.items(), 2):
        forward = compare_profiles(id_a, a, id_b, b)
        results.append(forward)
        results.append(
            SimilarityResult(
                user_id=id_b,
                similar_user_id=id_a,
                similarity_percentage=forward.similarity_percentage,
                differing_factors=forward.differing_factors,
            )
        )

    logger.info("similarity_matrix_calculated", profile_count=len(profiles), pair_count=len(results))
    return results
