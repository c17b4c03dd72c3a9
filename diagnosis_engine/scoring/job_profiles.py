"""
Job Requirement Table
diagnosis_engine/scoring/job_profiles.py

25 role profiles. Each weights a handful of factors from the three pattern
groups and states which direction fits the role:

    high   — higher deviation score fits better
    low    — lower deviation score fits better
    medium — closeness to 50 fits better

Weights within one job need not sum to 1; the potential calculator
normalises by the job's total weight. Adding a role means adding an entry
here, nothing else.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from diagnosis_engine.core.exceptions import JobProfileConfigurationError
from diagnosis_engine.models.enumerations import Ideal
from diagnosis_engine.scoring.norms import BEHAVIOR_AXES, BIG_FIVE_FACTORS, THINKING_AXES


@dataclass(frozen=True)
class FactorRequirement:
    weight: Decimal
    ideal: Ideal


@dataclass(frozen=True)
class JobProfile:
    """One row of the job requirement table."""
    job_type: str
    description: str
    big_five: Mapping[str, FactorRequirement] = field(default_factory=dict)
    thinking: Mapping[str, FactorRequirement] = field(default_factory=dict)
    behavior: Mapping[str, FactorRequirement] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("big_five", "thinking", "behavior"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def total_weight(self) -> Decimal:
        groups = (self.big_five, self.thinking, self.behavior)
        return sum((req.weight for g in groups for req in g.values()), Decimal("0"))


def _req(weight: str, ideal: str) -> FactorRequirement:
    return FactorRequirement(Decimal(weight), Ideal(ideal))


JOB_PROFILES: List[JobProfile] = [
    JobProfile(
        job_type="Engineer",
        description="Requires logical thinking and problem-solving ability",
        big_five={"openness": _req("0.25", "high"), "conscientiousness": _req("0.25", "high"),
                  "neuroticism": _req("0.15", "low")},
        thinking={"A": _req("0.25", "high")},
        behavior={"efficiency": _req("0.1", "high")},
    ),
    JobProfile(
        job_type="New Business Sales",
        description="Requires initiative and interpersonal skills",
        big_five={"extraversion": _req("0.3", "high"), "neuroticism": _req("0.2", "low")},
        thinking={"R": _req("0.2", "high"), "E": _req("0.15", "high")},
        behavior={"challenge": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Account Sales",
        description="Requires building trust and continuous follow-up",
        big_five={"extraversion": _req("0.2", "medium"), "agreeableness": _req("0.25", "high"),
                  "conscientiousness": _req("0.2", "high")},
        thinking={"S": _req("0.2", "high")},
        behavior={"friendliness": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Customer Success",
        description="Requires customer orientation and problem-solving ability",
        big_five={"agreeableness": _req("0.25", "high"), "conscientiousness": _req("0.2", "high"),
                  "extraversion": _req("0.15", "medium")},
        thinking={"S": _req("0.25", "high")},
        behavior={"friendliness": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Designer",
        description="Requires creativity and aesthetic sense",
        big_five={"openness": _req("0.35", "high"), "conscientiousness": _req("0.15", "medium")},
        thinking={"A": _req("0.15", "medium")},
        behavior={"efficiency": _req("0.15", "high"), "knowledge": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Marketing",
        description="Requires a balance of analytical skill and creativity",
        big_five={"openness": _req("0.25", "high"), "extraversion": _req("0.15", "medium")},
        thinking={"A": _req("0.2", "high"), "E": _req("0.2", "high")},
        behavior={"knowledge": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="HR & Recruiting",
        description="Requires interpersonal skills and fair judgement",
        big_five={"agreeableness": _req("0.25", "high"), "extraversion": _req("0.2", "medium"),
                  "conscientiousness": _req("0.15", "high")},
        thinking={"S": _req("0.25", "high")},
        behavior={"friendliness": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Accounting & Finance",
        description="Requires accuracy and analytical skill",
        big_five={"conscientiousness": _req("0.35", "high"), "neuroticism": _req("0.15", "low")},
        thinking={"A": _req("0.3", "high")},
        behavior={"efficiency": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Legal",
        description="Requires logical thinking and specialist knowledge",
        big_five={"conscientiousness": _req("0.3", "high"), "openness": _req("0.15", "medium")},
        thinking={"A": _req("0.3", "high")},
        behavior={"knowledge": _req("0.25", "high")},
    ),
    JobProfile(
        job_type="Project Manager",
        description="Requires leadership and planning ability",
        big_five={"conscientiousness": _req("0.25", "high"), "extraversion": _req("0.15", "medium"),
                  "neuroticism": _req("0.15", "low")},
        thinking={"R": _req("0.25", "high"), "A": _req("0.1", "medium")},
        behavior={"efficiency": _req("0.1", "high")},
    ),
    JobProfile(
        job_type="Data Analyst",
        description="Requires analytical skill and logical thinking",
        big_five={"openness": _req("0.2", "high"), "conscientiousness": _req("0.25", "high")},
        thinking={"A": _req("0.35", "high")},
        behavior={"knowledge": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Consultant",
        description="Requires problem-solving and communication skills",
        big_five={"extraversion": _req("0.15", "medium"), "openness": _req("0.2", "high"),
                  "conscientiousness": _req("0.15", "high")},
        thinking={"R": _req("0.2", "high"), "A": _req("0.2", "high")},
        behavior={"knowledge": _req("0.1", "high")},
    ),
    JobProfile(
        job_type="Corporate Planning",
        description="Requires strategic thinking and execution",
        big_five={"openness": _req("0.2", "high"), "conscientiousness": _req("0.2", "high"),
                  "neuroticism": _req("0.1", "low")},
        thinking={"R": _req("0.2", "high"), "A": _req("0.2", "high")},
        behavior={"challenge": _req("0.1", "high")},
    ),
    JobProfile(
        job_type="Public Relations",
        description="Requires communication skills and a strong public voice",
        big_five={"extraversion": _req("0.25", "high"), "openness": _req("0.2", "high"),
                  "agreeableness": _req("0.15", "medium")},
        thinking={"E": _req("0.2", "high")},
        behavior={"appearance": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Customer Support",
        description="Requires patience and empathy",
        big_five={"agreeableness": _req("0.3", "high"), "neuroticism": _req("0.2", "low"),
                  "conscientiousness": _req("0.15", "high")},
        thinking={"S": _req("0.2", "high")},
        behavior={"friendliness": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Research & Development",
        description="Requires curiosity and deep expertise",
        big_five={"openness": _req("0.35", "high"), "conscientiousness": _req("0.2", "high")},
        thinking={"A": _req("0.25", "high")},
        behavior={"knowledge": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Business Development",
        description="Requires entrepreneurial spirit and negotiation skills",
        big_five={"extraversion": _req("0.2", "high"), "openness": _req("0.2", "high"),
                  "neuroticism": _req("0.1", "low")},
        thinking={"R": _req("0.2", "high"), "E": _req("0.15", "high")},
        behavior={"challenge": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Quality Assurance",
        description="Requires attention to detail and quality awareness",
        big_five={"conscientiousness": _req("0.35", "high"), "neuroticism": _req("0.15", "medium")},
        thinking={"A": _req("0.3", "high")},
        behavior={"efficiency": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="General Affairs",
        description="Requires accuracy and a supporting attitude",
        big_five={"conscientiousness": _req("0.3", "high"), "agreeableness": _req("0.2", "high")},
        thinking={"S": _req("0.2", "high")},
        behavior={"efficiency": _req("0.15", "high"), "friendliness": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Executive",
        description="Requires leadership and decisiveness",
        big_five={"extraversion": _req("0.15", "high"), "neuroticism": _req("0.2", "low"),
                  "conscientiousness": _req("0.15", "high")},
        thinking={"R": _req("0.3", "high")},
        behavior={"challenge": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Secretary & Assistant",
        description="Requires attentiveness and accuracy",
        big_five={"conscientiousness": _req("0.3", "high"), "agreeableness": _req("0.25", "high"),
                  "neuroticism": _req("0.1", "low")},
        thinking={"S": _req("0.2", "high")},
        behavior={"efficiency": _req("0.15", "high")},
    ),
    JobProfile(
        job_type="Training & Education",
        description="Requires coaching ability and knowledge transfer",
        big_five={"extraversion": _req("0.2", "medium"), "agreeableness": _req("0.2", "high"),
                  "openness": _req("0.2", "high")},
        thinking={"S": _req("0.2", "high")},
        behavior={"knowledge": _req("0.2", "high")},
    ),
    JobProfile(
        job_type="Logistics",
        description="Requires planning and efficiency",
        big_five={"conscientiousness": _req("0.35", "high"), "neuroticism": _req("0.15", "low")},
        thinking={"A": _req("0.2", "high")},
        behavior={"efficiency": _req("0.3", "high")},
    ),
    JobProfile(
        job_type="Purchasing & Procurement",
        description="Requires negotiation and analytical skill",
        big_five={"conscientiousness": _req("0.25", "high"), "extraversion": _req("0.15", "medium")},
        thinking={"A": _req("0.2", "high"), "R": _req("0.15", "medium")},
        behavior={"efficiency": _req("0.25", "high")},
    ),
    JobProfile(
        job_type="Production Control",
        description="Requires planning and quality awareness",
        big_five={"conscientiousness": _req("0.35", "high"), "neuroticism": _req("0.15", "low")},
        thinking={"A": _req("0.2", "high")},
        behavior={"efficiency": _req("0.3", "high")},
    ),
]


def validate_job_profiles(profiles: Sequence[JobProfile]) -> None:
    """
    Check every profile names known factors with positive weights and that
    job types are unique.

    Raises:
        JobProfileConfigurationError: on the first offending profile.
    """
    seen = set()
    for profile in profiles:
        if profile.job_type in seen:
            raise JobProfileConfigurationError(profile.job_type, "duplicate job type")
        seen.add(profile.job_type)

        for group, known in (
            (profile.big_five, BIG_FIVE_FACTORS),
            (profile.thinking, THINKING_AXES),
            (profile.behavior, BEHAVIOR_AXES),
        ):
            for factor, req in group.items():
                if factor not in known:
                    raise JobProfileConfigurationError(profile.job_type, f"unknown factor '{factor}'")
                if req.weight <= 0:
                    raise JobProfileConfigurationError(
                        profile.job_type, f"weight for '{factor}' must be > 0, got {req.weight}"
                    )


validate_job_profiles(JOB_PROFILES)

_PROFILES_BY_TYPE: Dict[str, JobProfile] = {p.job_type: p for p in JOB_PROFILES}


def list_job_types() -> List[str]:
    """Known job types in table order."""
    return [p.job_type for p in JOB_PROFILES]


def get_job_profile(job_type: str) -> Optional[JobProfile]:
    """Profile detail for a job type, or None if the type is unknown."""
    return _PROFILES_BY_TYPE.get(job_type)
