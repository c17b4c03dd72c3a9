"""
Stress Tolerance
diagnosis_engine/scoring/stress_tolerance.py

Lower neuroticism means higher tolerance:
    neuroticism ≤ 40 → HIGH,  ≤ 60 → MEDIUM,  else LOW
"""

from diagnosis_engine.models.enumerations import StressToleranceLevel

HIGH_TOLERANCE_MAX = 40
MEDIUM_TOLERANCE_MAX = 60


def classify_stress_tolerance(neuroticism: int) -> StressToleranceLevel:
    if neuroticism <= HIGH_TOLERANCE_MAX:
        return StressToleranceLevel.HIGH
    elif neuroticism <= MEDIUM_TOLERANCE_MAX:
        return StressToleranceLevel.MEDIUM
    else:
        return StressToleranceLevel.LOW
