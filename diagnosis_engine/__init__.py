"""
Personality diagnosis engine.

Converts Likert survey answers into Big Five / thinking / behavior deviation
profiles, a typology, an answer-reliability verdict and ranked job-fit
potential scores, and compares respondents' Big Five profiles.
"""

from diagnosis_engine.models import AnswerRecord, DiagnosisCalculationResult
from diagnosis_engine.scoring.integration_service import calculate_diagnosis
from diagnosis_engine.scoring.job_profiles import get_job_profile, list_job_types
from diagnosis_engine.scoring.similarity_calculator import (
    SimilarityResult,
    find_similar_profiles,
    similarity_matrix,
)

__all__ = [
    "AnswerRecord",
    "DiagnosisCalculationResult",
    "SimilarityResult",
    "calculate_diagnosis",
    "find_similar_profiles",
    "get_job_profile",
    "list_job_types",
    "similarity_matrix",
]
