"""
Custom Exceptions - Personality Diagnosis Engine
diagnosis_engine/core/exceptions.py

Raised only while validating the static scoring tables. The calculation
path itself never raises on well-typed input.
"""


class DiagnosisEngineError(Exception):
    """Base exception for the diagnosis engine."""

    pass


class NormsConfigurationError(DiagnosisEngineError):
    """A norm entry is missing or has a non-positive standard deviation."""

    def __init__(self, factor: str, message: str):
        self.factor = factor
        self.message = message
        super().__init__(f"Invalid norm for '{factor}': {message}")


class JobProfileConfigurationError(DiagnosisEngineError):
    """A job profile references an unknown factor or carries a bad weight."""

    def __init__(self, job_type: str, message: str):
        self.job_type = job_type
        self.message = message
        super().__init__(f"Invalid job profile '{job_type}': {message}")
