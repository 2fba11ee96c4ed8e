"""
Course conflict, workload, recommendation, semester planning and analytics tests
"""

import pytest

from weekgrid.models import (
    AssignmentLoad, ConflictSeverity, ConflictType, ExamFrequency, InsightType, PredictionType,
    RecommendationCategory, StudyTimePreference,
)
from weekgrid.schemas import (
    Course, CourseConflict, CourseLocation, CourseMetadata, CoursePerformance, RecurringTimeSlot,
    UserScheduleConstraints,
)
from weekgrid.scheduling import analyze_course_workload, calculate_feasibility_score, detect_conflicts
from weekgrid.scheduling.constraints.course_conflicts import calculate_time_overlap, estimate_travel_time
from weekgrid.services.course_planner import (
    calculate_interest_score, create_semester_plan, generate_course_analytics,
    generate_course_recommendations, get_next_available_semester,
)


def make_course(code, meetings=(), building="MATH", credits=3, difficulty=3, department="CS",
                prerequisites=(), name="", semester="Fall 2024", tags=()):
    return Course(
        id=code.lower().replace(" ", "-"),
        course_code=code,
        course_name=name or code,
        schedule=[RecurringTimeSlot(day_of_week=d, start_time=s, end_time=e) for d, s, e in meetings],
        location=CourseLocation(building=building, room="101"),
        metadata=CourseMetadata(
            credit_hours=credits,
            difficulty=difficulty,
            department=department,
            prerequisites=list(prerequisites),
            semester=semester,
            tags=list(tags),
        ),
    )

# ================================
# CONFLICTS
# ================================

def test_overlapping_courses_conflict():
    a = make_course("MATH 101", [("Monday", "09:00", "10:30")])
    b = make_course("CS 101", [("Monday", "10:00", "11:00")])

    conflicts = detect_conflicts([a, b])

    assert len(conflicts) == 1
    conflict = conflicts[0]
    assert conflict.type == ConflictType.TIME_OVERLAP
    assert conflict.severity == ConflictSeverity.CRITICAL
    assert conflict.auto_resolvable is False
    assert [c.course_code for c in conflict.courses] == ["MATH 101", "CS 101"]
    assert "MATH 101" in conflict.description


def test_overlap_minutes():
    first = RecurringTimeSlot(day_of_week="Monday", start_time="09:00", end_time="10:30")
    second = RecurringTimeSlot(day_of_week="Monday", start_time="10:00", end_time="11:00")
    apart = RecurringTimeSlot(day_of_week="Monday", start_time="11:00", end_time="12:00")

    assert calculate_time_overlap(first, second) == 30
    assert calculate_time_overlap(first, apart) == 0


def test_one_overlap_conflict_per_pair():
    a = make_course("A", [("Monday", "09:00", "10:00"), ("Wednesday", "09:00", "10:00")])
    b = make_course("B", [("Monday", "09:30", "10:30"), ("Wednesday", "09:30", "10:30")])

    overlaps = [c for c in detect_conflicts([a, b]) if c.type == ConflictType.TIME_OVERLAP]
    assert len(overlaps) == 1


def test_different_days_do_not_conflict():
    a = make_course("A", [("Monday", "09:00", "10:00")])
    b = make_course("B", [("Tuesday", "09:00", "10:00")])
    assert detect_conflicts([a, b]) == []


@pytest.mark.parametrize("first, second", [
    (("Monday", "09:00", "10:30"), ("Monday", "10:00", "11:00")),
    (("Friday", "13:00", "14:00"), ("Friday", "13:30", "13:45")),
    (("Monday", "09:00", "10:00"), ("Monday", "10:00", "11:00")),
])
def test_overlap_detection_is_symmetric(first, second):
    a = make_course("A", [first])
    b = make_course("B", [second])

    def overlap_severities(courses):
        return [c.severity for c in detect_conflicts(courses) if c.type == ConflictType.TIME_OVERLAP]

    assert overlap_severities([a, b]) == overlap_severities([b, a])


def test_travel_time_table():
    assert estimate_travel_time("ENGR", "CHEM") == 12
    assert estimate_travel_time("CHEM", "ENGR") == 12
    assert estimate_travel_time("MATH", "PHYS") == 4
    assert estimate_travel_time("LIBR", "GYM") == 8


def test_tight_building_change_is_location_conflict():
    a = make_course("ENGR 200", [("Monday", "09:00", "10:00")], building="ENGR")
    b = make_course("CHEM 110", [("Monday", "10:05", "11:00")], building="CHEM")

    for courses in ([a, b], [b, a]):
        conflicts = detect_conflicts(courses)
        assert len(conflicts) == 1
        assert conflicts[0].type == ConflictType.LOCATION_CONFLICT
        assert conflicts[0].severity == ConflictSeverity.MEDIUM
        assert conflicts[0].auto_resolvable is True


def test_enough_travel_time_is_fine():
    a = make_course("MATH 200", [("Monday", "09:00", "10:00")], building="MATH")
    b = make_course("PHYS 110", [("Monday", "10:10", "11:00")], building="PHYS")
    assert detect_conflicts([a, b]) == []


def test_same_building_back_to_back_is_fine():
    a = make_course("A", [("Monday", "09:00", "10:00")], building="ENGR")
    b = make_course("B", [("Monday", "10:00", "11:00")], building="ENGR")
    assert detect_conflicts([a, b]) == []


def test_missing_prerequisite():
    advanced = make_course("CS 201", prerequisites=["CS 101", "MATH 101"])
    intro = make_course("CS 101")

    conflicts = detect_conflicts([advanced, intro])

    assert len(conflicts) == 1
    assert conflicts[0].type == ConflictType.PREREQUISITE_MISSING
    assert conflicts[0].severity == ConflictSeverity.HIGH
    assert conflicts[0].description == "CS 201 requires prerequisites: MATH 101"


def test_detector_does_not_mutate_input():
    courses = [make_course("A", [("Monday", "09:00", "10:00")]), make_course("B", [("Monday", "09:30", "10:00")])]
    snapshot = [c.model_copy(deep=True) for c in courses]
    detect_conflicts(courses)
    assert courses == snapshot

# ================================
# WORKLOAD
# ================================

def test_cs_course_workload():
    [workload] = analyze_course_workload([make_course("CS 101", credits=3, difficulty=3, department="CS")])

    assert workload.estimated_hours_per_week == pytest.approx(7.8)
    assert workload.assignment_load == AssignmentLoad.MODERATE
    assert workload.exam_frequency == ExamFrequency.MODERATE
    assert workload.group_work_percentage == 30
    assert workload.participation_required is False


def test_workload_multipliers():
    hard_math = make_course("MATH 301", credits=4, difficulty=5, department="MATH")
    easy_art = make_course("ARTS 100", credits=2, difficulty=1, department="ARTS")
    unknown = make_course("XYZ 100", credits=3, difficulty=3, department="XYZ")

    hard, easy, other = analyze_course_workload([hard_math, easy_art, unknown])

    assert hard.estimated_hours_per_week == pytest.approx(14.4)
    assert hard.assignment_load == AssignmentLoad.HEAVY
    assert hard.exam_frequency == ExamFrequency.HIGH
    assert easy.estimated_hours_per_week == pytest.approx(2.6)
    assert easy.assignment_load == AssignmentLoad.LIGHT
    assert easy.exam_frequency == ExamFrequency.LOW
    assert easy.group_work_percentage == 10
    assert other.estimated_hours_per_week == pytest.approx(6.0)


def test_participation_courses():
    seminar = make_course("HIST 400", name="History Seminar", department="HIST")
    tagged = make_course("SPAN 101", department="SPAN", tags=["language"])

    workloads = analyze_course_workload([seminar, tagged])
    assert all(w.participation_required for w in workloads)

# ================================
# RECOMMENDATIONS
# ================================

def test_recommendations_sorted_by_confidence():
    current = [make_course("CS 101")]
    available = [
        make_course("CS 101"),
        make_course("CS 201", prerequisites=["CS 101"]),
    ]
    recommendations = generate_course_recommendations(
        current, available, UserScheduleConstraints(), degree_requirements=["CS 201"]
    )

    assert [r.confidence for r in recommendations] == [0.9, 0.8, 0.6]
    assert all(r.course_id == "cs-201" for r in recommendations)
    assert recommendations[0].category == RecommendationCategory.PREREQUISITE
    assert recommendations[2].category == RecommendationCategory.WORKLOAD_BALANCE
    assert all(r.semester == "Spring 2025" for r in recommendations)


def test_no_workload_recommendation_when_overloaded():
    current = [make_course(f"CS {n}", credits=4, difficulty=5) for n in range(100, 105)]
    available = [make_course("CS 300")]

    recommendations = generate_course_recommendations(
        current, available, UserScheduleConstraints(max_credits_per_semester=12)
    )
    assert recommendations == []


def test_interest_score():
    early = make_course("A", [("Monday", "09:00", "10:00")])
    late = make_course("B", [("Monday", "13:00", "14:00")])
    morning_person = UserScheduleConstraints(study_time_preference=StudyTimePreference.MORNING)

    assert calculate_interest_score(early, morning_person) == pytest.approx(0.7)
    assert calculate_interest_score(late, morning_person) == pytest.approx(0.5)
    assert calculate_interest_score(early, UserScheduleConstraints()) == pytest.approx(0.5)


def test_next_semester():
    assert get_next_available_semester(make_course("A", semester="Fall 2024")) == "Spring 2025"
    assert get_next_available_semester(make_course("A", semester="Spring 2025")) == "Fall 2025"
    assert get_next_available_semester(make_course("A", semester="")) == ""

# ================================
# FEASIBILITY & SEMESTER PLAN
# ================================

def conflict(severity):
    return CourseConflict(type=ConflictType.TIME_OVERLAP, severity=severity, courses=[], description="")


def test_feasibility_perfect_semester():
    assert calculate_feasibility_score(15, 18, 30, [], 3) == 100


def test_feasibility_penalties():
    score = calculate_feasibility_score(20, 18, 55, [conflict(ConflictSeverity.MEDIUM)], 4)
    # 100 - 20 (credits) - 10 (workload) - 5 (conflict) - 5 (difficulty)
    assert score == pytest.approx(60)


def test_feasibility_clamped():
    conflicts = [conflict(ConflictSeverity.CRITICAL)] * 5
    assert calculate_feasibility_score(30, 18, 80, conflicts, 5) == 0


def test_semester_plan_respects_credit_limit():
    advanced = make_course("CS 301", credits=4, prerequisites=["CS 201", "CS 101"])
    capstone = make_course("CS 401", credits=12, prerequisites=["CS 301"])
    elective = make_course("ARTS 100", credits=4, department="ARTS")

    plan = create_semester_plan(
        [elective, capstone, advanced],
        UserScheduleConstraints(max_credits_per_semester=16),
        "Spring",
        2025,
    )

    assert [c.course_code for c in plan.courses] == ["CS 301", "CS 401"]
    assert plan.total_credits == 16
    assert plan.semester == "Spring"
    assert plan.year == 2025
    assert plan.difficulty_balance == pytest.approx(3)
    assert 0 <= plan.feasibility_score <= 100


def test_semester_plan_drops_early_classes():
    early = make_course("MATH 101", [("Monday", "07:30", "08:30")])
    normal = make_course("CS 101", [("Monday", "10:00", "11:00")])
    constraints = UserScheduleConstraints(avoid_early_classes=True, early_class_threshold="08:00")

    plan = create_semester_plan([early, normal], constraints, "Fall", 2024)

    assert [c.course_code for c in plan.courses] == ["CS 101"]
    assert plan.conflicts == []
    assert plan.feasibility_score == 100


def test_difficulty_balance_does_not_reorder():
    courses = [make_course("CS 401", difficulty=5), make_course("ARTS 100", difficulty=1)]

    plain = create_semester_plan(courses, UserScheduleConstraints(), "Fall", 2024)
    balanced = create_semester_plan(courses, UserScheduleConstraints(difficulty_balance=True), "Fall", 2024)

    assert [c.course_code for c in balanced.courses] == [c.course_code for c in plain.courses]


def test_empty_semester_plan():
    plan = create_semester_plan([], UserScheduleConstraints(), "Fall", 2024)

    assert plan.courses == []
    assert plan.total_credits == 0
    assert plan.feasibility_score == 100

# ================================
# COURSE ANALYTICS
# ================================

TWICE_WEEKLY = [("Monday", "09:00", "10:15"), ("Wednesday", "09:00", "10:15")]


def test_low_attendance_insight():
    course = make_course("CS 201", TWICE_WEEKLY)
    analytics = generate_course_analytics(course, CoursePerformance(attended_classes=20, study_hours=6))

    assert analytics.stats.total_classes == 32
    assert analytics.stats.attendance_rate == pytest.approx(62.5)
    [insight] = analytics.insights
    assert insight.type == InsightType.ATTENDANCE
    assert insight.message == "Attendance is below recommended level (62.5%)"
    assert insight.actionable is True


def test_study_hours_insight():
    course = make_course("CS 201", TWICE_WEEKLY, credits=4)
    analytics = generate_course_analytics(course, CoursePerformance(attended_classes=30, study_hours=5))

    [insight] = analytics.insights
    assert insight.type == InsightType.WORKLOAD
    assert insight.suggestion == "Aim for 8 hours of study per week"
    assert analytics.recommendations == ["Aim for 8 hours of study per week"]


def test_no_performance_means_no_prediction():
    analytics = generate_course_analytics(make_course("CS 201", TWICE_WEEKLY, semester="Spring 2025"))

    assert analytics.course_id == "cs-201"
    assert analytics.semester == "Spring 2025"
    assert analytics.predictions == []
    assert [i.type for i in analytics.insights] == [InsightType.ATTENDANCE, InsightType.WORKLOAD]


def test_prediction_clamped_to_100():
    course = make_course("CS 201", TWICE_WEEKLY)
    performance = CoursePerformance(attended_classes=32, average_grade=98, study_hours=10, assignments_completed=5)

    [prediction] = generate_course_analytics(course, performance).predictions

    # 98 * 1.05 * 1.03 would be 105.9
    assert prediction.type == PredictionType.FINAL_GRADE
    assert prediction.prediction == 100
    assert prediction.confidence == pytest.approx(1.0)
    assert len(prediction.factors) == 2


def test_prediction_penalised_by_attendance_and_study_time():
    course = make_course("CS 201", TWICE_WEEKLY)

    [prediction] = generate_course_analytics(course, CoursePerformance(average_grade=80)).predictions

    assert prediction.prediction == pytest.approx(68.4)
    assert prediction.confidence == pytest.approx(0.6)
    assert prediction.factors == [
        "Low attendance may impact final grade",
        "Insufficient study time may lower grades",
    ]


def test_prediction_never_negative():
    course = make_course("CS 201", TWICE_WEEKLY)
    [prediction] = generate_course_analytics(course, CoursePerformance(average_grade=-10)).predictions
    assert prediction.prediction == 0
