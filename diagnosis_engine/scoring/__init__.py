"""
scoring/ — Personality Diagnosis Scoring Engine

Modules:
    utils.py                    - Decimal utilities (half-up rounding, clamp, means)
    norms.py                    - Per-factor norm table (mean / SD)
    raw_score_aggregator.py     - Answers → 14 raw averages
    deviation_calculator.py     - Raw averages → 20-80 deviation scores
    type_classifier.py          - EE / EI / IE / II typology + feature labels
    stress_tolerance.py         - Neuroticism → stress tolerance tier
    reliability_calculator.py   - Answer-pattern reliability screen
    job_profiles.py             - Job requirement table + accessors
    potential_calculator.py     - Job-fit potential scores and grades
    similarity_calculator.py    - Profile-to-profile similarity
    integration_service.py      - Full pipeline: calculate_diagnosis()
"""
