from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List, Dict, Any
from .models import (
    ScheduleSource, StudyTimePreference, ConflictType, ConflictSeverity, AssignmentLoad,
    ExamFrequency, RecommendationCategory, RecommendationPriority, InsightType, InsightSeverity,
    PredictionType,
)

# ----------------- Constraint Schemas ---------------------

class UserScheduleConstraints(BaseModel):
    """
    Preference record consumed by every scheduling operation.
    Values are deliberately loose: the scheduling core validates and defaults them itself.
    """
    start_day: Optional[str] = "Monday"
    start_time: Optional[str] = "08:00"
    bed_time: Optional[str] = "22:00"
    desired_sleep_hours: Optional[Any] = 8
    work_days: List[str] = Field(default_factory=list)
    work_start_time: Optional[str] = "09:00"
    work_end_time: Optional[str] = "17:00"
    study_time_preference: StudyTimePreference = StudyTimePreference.FLEXIBLE
    avoid_early_classes: bool = False
    early_class_threshold: Optional[str] = "08:00"
    avoid_late_classes: bool = False
    late_class_threshold: Optional[str] = "18:00"
    max_credits_per_semester: int = 18
    difficulty_balance: bool = False
    timezone: Optional[str] = None

    model_config = ConfigDict(frozen=True)

# ----------------- Schedule Grid Schemas ---------------------

class Activity(BaseModel):
    content: str
    category: str

class ScheduleSlot(BaseModel):
    time: str
    activities: Dict[str, Activity]

class CategoryDistribution(BaseModel):
    category: str
    hours: float

class ScheduleStatistics(BaseModel):
    total_activities: int = 0
    total_study_hours: float = 0
    total_class_hours: float = 0
    total_work_hours: float = 0
    total_free_time: float = 0
    average_daily_commute: float = 0
    category_distribution: List[CategoryDistribution] = Field(default_factory=list)
    weekly_workload: float = 0
    time_utilization: float = 0
    optimality_score: float = 0

class ScheduleMetadata(BaseModel):
    generated_at: datetime
    last_optimized: Optional[datetime] = None
    version: str = "1.0.0"
    source: ScheduleSource = ScheduleSource.AI_GENERATED
    constraints: Optional[UserScheduleConstraints] = None
    statistics: ScheduleStatistics = Field(default_factory=ScheduleStatistics)

class ScheduleGrid(BaseModel):
    slots: List[ScheduleSlot]
    metadata: Optional[ScheduleMetadata] = None

    @property
    def days(self) -> List[str]:
        if not self.slots:
            return []
        return list(self.slots[0].activities.keys())

# ----------------- Course Schemas ---------------------

class RecurringTimeSlot(BaseModel):
    day_of_week: str
    start_time: str  # "14:30"
    end_time: str    # "15:50"

class CourseLocation(BaseModel):
    building: str
    room: str = ""

class CourseMetadata(BaseModel):
    credit_hours: float
    difficulty: int = Field(3, ge=1, le=5)
    department: str
    prerequisites: List[str] = Field(default_factory=list)
    semester: str = ""
    tags: List[str] = Field(default_factory=list)

class Course(BaseModel):
    id: str
    course_code: str
    course_name: str = ""
    schedule: List[RecurringTimeSlot] = Field(default_factory=list)
    location: CourseLocation
    metadata: CourseMetadata

class CourseConflict(BaseModel):
    type: ConflictType
    severity: ConflictSeverity
    courses: List[Course]
    description: str
    suggestions: List[str] = Field(default_factory=list)
    auto_resolvable: bool = False

class CourseWorkload(BaseModel):
    course_id: str
    estimated_hours_per_week: float
    difficulty: int
    assignment_load: AssignmentLoad
    exam_frequency: ExamFrequency
    participation_required: bool = False
    group_work_percentage: float = 0

class CourseRecommendation(BaseModel):
    course_id: str
    reason: str
    confidence: float = Field(ge=0, le=1)
    category: RecommendationCategory
    priority: RecommendationPriority
    semester: str = ""

class SemesterPlan(BaseModel):
    semester: str
    year: int
    courses: List[Course]
    total_credits: float
    estimated_workload: float
    difficulty_balance: float
    conflicts: List[CourseConflict]
    recommendations: List[CourseRecommendation]
    feasibility_score: float

# ----------------- Course Analytics Schemas ---------------------

class CoursePerformance(BaseModel):
    """What the student reports so far this semester."""
    attended_classes: int = 0
    average_grade: float = 0
    time_spent: float = 0  # total hours
    assignments_completed: int = 0
    assignments_total: int = 0
    study_hours: float = 0  # per week
    satisfaction: float = 0  # 1-5, 0 when unrated
    would_take_again: bool = False

class CourseStats(BaseModel):
    total_classes: int
    attended_classes: int = 0
    attendance_rate: float = 0  # percent
    average_grade: float = 0
    time_spent: float = 0
    assignments_completed: int = 0
    assignments_total: int = 0
    study_hours: float = 0
    difficulty: int
    satisfaction: float = 0
    would_take_again: bool = False

class CourseInsight(BaseModel):
    type: InsightType
    message: str
    severity: InsightSeverity
    actionable: bool = False
    suggestion: Optional[str] = None

class CoursePrediction(BaseModel):
    type: PredictionType
    prediction: float
    confidence: float = Field(ge=0, le=1)
    factors: List[str] = Field(default_factory=list)
    last_updated: datetime

class CourseAnalytics(BaseModel):
    course_id: str
    semester: str
    stats: CourseStats
    insights: List[CourseInsight] = Field(default_factory=list)
    predictions: List[CoursePrediction] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

# ----------------- Bulk Entry Schemas ---------------------

class BulkEvent(BaseModel):
    day: str
    time: str
    content: str
    category: str

# ----------------- Request Schemas ---------------------

class GridRequest(BaseModel):
    grid: ScheduleGrid
    constraints: UserScheduleConstraints

class SlotUpdateRequest(BaseModel):
    grid: ScheduleGrid
    time: str
    day: str
    content: str
    category: str

class BulkEntryRequest(BaseModel):
    grid: ScheduleGrid
    text: str

class BulkEntryResponse(BaseModel):
    grid: ScheduleGrid
    events: List[BulkEvent]
    errors: List[str]

class CourseListRequest(BaseModel):
    courses: List[Course]

class RecommendationRequest(BaseModel):
    current_courses: List[Course]
    available_courses: List[Course]
    constraints: UserScheduleConstraints
    degree_requirements: Optional[List[str]] = None

class SemesterPlanRequest(BaseModel):
    target_courses: List[Course]
    constraints: UserScheduleConstraints
    semester: str
    year: int
    available_courses: Optional[List[Course]] = None
    degree_requirements: Optional[List[str]] = None

class CourseAnalyticsRequest(BaseModel):
    course: Course
    performance: Optional[CoursePerformance] = None

class TaskSubmitted(BaseModel):
    task_id: str
    status: str

class TaskStatus(BaseModel):
    task_id: str
    status: str
    result: Optional[ScheduleGrid] = None
    error: Optional[str] = None
