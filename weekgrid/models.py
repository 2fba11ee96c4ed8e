import enum


# Enums

class ScheduleSource(str, enum.Enum):
    MANUAL = "manual"
    IMPORTED = "imported"
    AI_GENERATED = "ai_generated"
    OPTIMIZED = "optimized"

class StudyTimePreference(str, enum.Enum):
    MORNING = "morning"      # before 10:00 AM classes count as a match
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"
    FLEXIBLE = "flexible"

class EnergyProfile(str, enum.Enum):
    MORNING = "morning"
    EVENING = "evening"
    BALANCED = "balanced"

class ConflictType(str, enum.Enum):
    TIME_OVERLAP = "time_overlap"
    LOCATION_CONFLICT = "location_conflict"
    PREREQUISITE_MISSING = "prerequisite_missing"

class ConflictSeverity(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

class AssignmentLoad(str, enum.Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"

class ExamFrequency(str, enum.Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

class RecommendationCategory(str, enum.Enum):
    PREREQUISITE = "prerequisite"
    COREQUISITE = "corequisite"
    ELECTIVE = "elective"
    SEQUENCE = "sequence"
    WORKLOAD_BALANCE = "workload_balance"

class RecommendationPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InsightType(str, enum.Enum):
    ATTENDANCE = "attendance"
    PERFORMANCE = "performance"
    WORKLOAD = "workload"
    DIFFICULTY = "difficulty"

class InsightSeverity(str, enum.Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"

class PredictionType(str, enum.Enum):
    FINAL_GRADE = "final_grade"
    GPA_IMPACT = "gpa_impact"
    TIME_COMMITMENT = "time_commitment"
