"""
Core Package - Personality Diagnosis Engine
diagnosis_engine/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from diagnosis_engine.core.exceptions import (
    DiagnosisEngineError,
    JobProfileConfigurationError,
    NormsConfigurationError,
)
from diagnosis_engine.core.logging import configure_logging

__all__ = [
    # Exceptions
    "DiagnosisEngineError",
    "JobProfileConfigurationError",
    "NormsConfigurationError",
    # Logging
    "configure_logging",
]
