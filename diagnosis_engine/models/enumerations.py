from enum import Enum

class QuestionCategory(str, Enum):
    EXTRAVERSION = "EXTRAVERSION"
    OPENNESS = "OPENNESS"
    AGREEABLENESS = "AGREEABLENESS"
    CONSCIENTIOUSNESS = "CONSCIENTIOUSNESS"
    NEUROTICISM = "NEUROTICISM"
    THINKING = "THINKING"    # split positionally into R / A / S / E
    BEHAVIOR = "BEHAVIOR"    # split positionally into five behavior axes

class ReliabilityStatus(str, Enum):
    RELIABLE = "RELIABLE"
    NEEDS_REVIEW = "NEEDS_REVIEW"
    UNRELIABLE = "UNRELIABLE"

class StressToleranceLevel(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

class PotentialGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

class TypeCode(str, Enum):
    EE = "EE"    # extraverted, open
    EI = "EI"    # extraverted, conventional
    IE = "IE"    # introverted, open
    II = "II"    # introverted, conventional

class Ideal(str, Enum):
    HIGH = "high"
    LOW = "low"
    MEDIUM = "medium"
