"""
Course recommendations, semester planning and per-course analytics built on the workload,
conflict and feasibility scoring.
"""

import logging
import re
from typing import List, Optional

from ..models import (
    InsightSeverity, InsightType, PredictionType, RecommendationCategory, RecommendationPriority,
    StudyTimePreference,
)
from ..schemas import (
    Course, CourseAnalytics, CourseInsight, CoursePerformance, CoursePrediction, CourseRecommendation,
    CourseStats, SemesterPlan, UserScheduleConstraints,
)
from ..scheduling.constraints.course_conflicts import detect_conflicts
from ..scheduling.constraints.time_constraints import violates_class_time_preferences
from ..scheduling.scoring.feasibility_scoring import calculate_feasibility_score, TARGET_DIFFICULTY
from ..scheduling.scoring.workload_scoring import calculate_total_workload, estimate_weekly_hours
from ..scheduling.utils.clock import now
from ..scheduling.utils.slot_utils import is_valid_time, time_to_minutes

logger = logging.getLogger(__name__)

INTEREST_BASE_SCORE = 0.5
MORNING_MATCH_BONUS = 0.2
MORNING_CUTOFF_MINUTES = 10 * 60
INTEREST_THRESHOLD = 0.7

# Weekly study hours allowed per credit of the semester limit
WORKLOAD_HOURS_PER_CREDIT = 3

SEMESTER_WEEKS = 16
MIN_ATTENDANCE_RATE = 80
EXCELLENT_ATTENDANCE_RATE = 95
# Recommended weekly study hours per credit hour
STUDY_HOURS_PER_CREDIT = 2

# ================================
# RECOMMENDATIONS
# ================================

def get_next_available_semester(course: Course) -> str:
    """Fall 2024 -> Spring 2025, Spring 2025 -> Fall 2025"""
    semester = course.metadata.semester
    if "Fall" in semester:
        spring = semester.replace("Fall", "Spring")
        return re.sub(r"\d{4}", lambda match: str(int(match.group(0)) + 1), spring, count=1)
    return semester.replace("Spring", "Fall")


def calculate_interest_score(course: Course, constraints: UserScheduleConstraints) -> float:
    score = INTEREST_BASE_SCORE

    if constraints.study_time_preference == StudyTimePreference.MORNING and any(
        is_valid_time(slot.start_time) and time_to_minutes(slot.start_time) < MORNING_CUTOFF_MINUTES
        for slot in course.schedule
    ):
        score += MORNING_MATCH_BONUS

    return min(1.0, score)


def generate_course_recommendations(
    current_courses: List[Course],
    available_courses: List[Course],
    constraints: UserScheduleConstraints,
    degree_requirements: Optional[List[str]] = None,
) -> List[CourseRecommendation]:
    """
    Recommend courses not already taken. A course can be recommended for several reasons:
    - one of its prerequisites is among the current courses
    - it is a declared degree requirement
    - it fits under the weekly workload limit (max credits * 3 hours)
    - its interest score exceeds 0.7

    Args:
        current_courses: courses already taken or in progress
        available_courses: candidate courses
        constraints: user preferences (credit limit, study time preference)
        degree_requirements: course codes required for the degree

    Returns:
        Recommendations sorted by confidence, highest first
    """
    recommendations = []
    current_codes = {course.course_code for course in current_courses}
    current_workload = calculate_total_workload(current_courses)
    workload_limit = constraints.max_credits_per_semester * WORKLOAD_HOURS_PER_CREDIT
    requirements = set(degree_requirements or [])

    for course in available_courses:
        if course.course_code in current_codes:
            continue

        semester = get_next_available_semester(course)

        def recommend(reason: str, confidence: float, category: RecommendationCategory, priority: RecommendationPriority):
            recommendations.append(CourseRecommendation(
                course_id=course.id,
                reason=reason,
                confidence=confidence,
                category=category,
                priority=priority,
                semester=semester,
            ))

        if any(prereq in current_codes for prereq in course.metadata.prerequisites):
            recommend(
                f"Prerequisite completed for {course.course_code}", 0.8,
                RecommendationCategory.PREREQUISITE, RecommendationPriority.HIGH,
            )

        if course.course_code in requirements:
            recommend(
                "Required for degree completion", 0.9,
                RecommendationCategory.PREREQUISITE, RecommendationPriority.HIGH,
            )

        if current_workload + estimate_weekly_hours(course) <= workload_limit:
            recommend(
                "Fits well with current workload", 0.6,
                RecommendationCategory.WORKLOAD_BALANCE, RecommendationPriority.MEDIUM,
            )

        interest_score = calculate_interest_score(course, constraints)
        if interest_score > INTEREST_THRESHOLD:
            recommend(
                "Matches your interests and learning preferences", interest_score,
                RecommendationCategory.ELECTIVE, RecommendationPriority.MEDIUM,
            )

    recommendations.sort(key=lambda r: r.confidence, reverse=True)
    logger.debug(f"Generated {len(recommendations)} recommendations from {len(available_courses)} candidates")
    return recommendations

# ================================
# SEMESTER PLANNING
# ================================

def select_within_credit_limit(courses: List[Course], max_credits: float) -> List[Course]:
    """Greedy selection, courses with more prerequisites first."""
    ordered = sorted(courses, key=lambda c: len(c.metadata.prerequisites), reverse=True)

    selected = []
    total_credits = 0
    for course in ordered:
        if total_credits + course.metadata.credit_hours <= max_credits:
            selected.append(course)
            total_credits += course.metadata.credit_hours
    return selected


def filter_by_time_preferences(courses: List[Course], constraints: UserScheduleConstraints) -> List[Course]:
    kept = [course for course in courses if not violates_class_time_preferences(course, constraints)]
    if len(kept) < len(courses):
        logger.info(f"Dropped {len(courses) - len(kept)} courses outside preferred class times")
    return kept


def create_semester_plan(
    target_courses: List[Course],
    constraints: UserScheduleConstraints,
    semester: str,
    year: int,
    available_courses: Optional[List[Course]] = None,
    degree_requirements: Optional[List[str]] = None,
) -> SemesterPlan:
    """
    Pick courses for one semester and score the result.

    `constraints.difficulty_balance` is accepted but ignored: courses are never reordered
    by difficulty, only selected by prerequisite count and then filtered by class times.
    """
    max_credits = constraints.max_credits_per_semester

    selected = select_within_credit_limit(target_courses, max_credits)
    selected = filter_by_time_preferences(selected, constraints)

    total_credits = sum(course.metadata.credit_hours for course in selected)
    estimated_workload = calculate_total_workload(selected)
    if selected:
        average_difficulty = sum(course.metadata.difficulty for course in selected) / len(selected)
    else:
        average_difficulty = TARGET_DIFFICULTY

    conflicts = detect_conflicts(selected)
    recommendations = generate_course_recommendations(
        selected, available_courses or [], constraints, degree_requirements
    )

    feasibility_score = calculate_feasibility_score(
        total_credits=total_credits,
        max_credits=max_credits,
        estimated_workload=estimated_workload,
        conflicts=conflicts,
        average_difficulty=average_difficulty,
    )

    logger.info(
        f"Planned {semester} {year}: {len(selected)}/{len(target_courses)} courses, "
        f"{total_credits} credits, feasibility {feasibility_score:.1f}"
    )
    return SemesterPlan(
        semester=semester,
        year=year,
        courses=selected,
        total_credits=total_credits,
        estimated_workload=estimated_workload,
        difficulty_balance=average_difficulty,
        conflicts=conflicts,
        recommendations=recommendations,
        feasibility_score=feasibility_score,
    )

# ================================
# COURSE ANALYTICS
# ================================

def calculate_total_classes(course: Course) -> int:
    """Meetings over a 16-week semester."""
    return len(course.schedule) * SEMESTER_WEEKS


def recommended_study_hours(course: Course) -> float:
    return course.metadata.credit_hours * STUDY_HOURS_PER_CREDIT


def predict_final_grade(course: Course, performance: CoursePerformance, attendance_rate: float) -> CoursePrediction:
    """
    Scale the current average by attendance and weekly study time.

    Attendance under 80% costs 10%, above 95% adds 5%. Study time under 80% of the
    recommended hours costs 5%, above 120% adds 3%. The grade is clamped to [0, 100].
    Confidence starts at 0.6 and rises with how much data the student has reported.
    """
    grade = performance.average_grade
    factors = []

    if attendance_rate < MIN_ATTENDANCE_RATE:
        grade *= 0.9
        factors.append("Low attendance may impact final grade")
    elif attendance_rate > EXCELLENT_ATTENDANCE_RATE:
        grade *= 1.05
        factors.append("Excellent attendance supports strong performance")

    recommended = recommended_study_hours(course)
    if performance.study_hours < recommended * 0.8:
        grade *= 0.95
        factors.append("Insufficient study time may lower grades")
    elif performance.study_hours > recommended * 1.2:
        grade *= 1.03
        factors.append("Above-average study time should improve performance")

    confidence = 0.6
    if performance.assignments_completed > 3:
        confidence += 0.2
    if attendance_rate > 0:
        confidence += 0.1
    if performance.study_hours > 0:
        confidence += 0.1

    return CoursePrediction(
        type=PredictionType.FINAL_GRADE,
        prediction=min(100.0, max(0.0, grade)),
        confidence=min(1.0, round(confidence, 2)),
        factors=factors,
        last_updated=now(),
    )


def generate_course_analytics(course: Course, performance: Optional[CoursePerformance] = None) -> CourseAnalytics:
    """
    Attendance and study-time insights for one course, plus a final grade prediction
    when the student has reported performance data.

    Args:
        course: the course being tracked
        performance: the student's numbers so far; missing means nothing reported yet

    Returns:
        CourseAnalytics whose recommendations repeat the suggestions of actionable insights
    """
    reported = performance or CoursePerformance()
    total_classes = calculate_total_classes(course)
    attendance_rate = reported.attended_classes / total_classes * 100 if total_classes > 0 else 0.0

    stats = CourseStats(
        total_classes=total_classes,
        attended_classes=reported.attended_classes,
        attendance_rate=attendance_rate,
        average_grade=reported.average_grade,
        time_spent=reported.time_spent,
        assignments_completed=reported.assignments_completed,
        assignments_total=reported.assignments_total,
        study_hours=reported.study_hours,
        difficulty=course.metadata.difficulty,
        satisfaction=reported.satisfaction,
        would_take_again=reported.would_take_again,
    )

    insights = []
    if attendance_rate < MIN_ATTENDANCE_RATE:
        insights.append(CourseInsight(
            type=InsightType.ATTENDANCE,
            message=f"Attendance is below recommended level ({attendance_rate:.1f}%)",
            severity=InsightSeverity.WARNING,
            actionable=True,
            suggestion="Try to attend more classes to improve understanding and grades",
        ))

    recommended = recommended_study_hours(course)
    if reported.study_hours < recommended:
        insights.append(CourseInsight(
            type=InsightType.WORKLOAD,
            message="Study time is below recommended hours per week",
            severity=InsightSeverity.WARNING,
            actionable=True,
            suggestion=f"Aim for {recommended:g} hours of study per week",
        ))

    predictions = []
    if performance is not None:
        predictions.append(predict_final_grade(course, performance, attendance_rate))

    logger.debug(f"Analytics for {course.course_code}: {len(insights)} insights, {len(predictions)} predictions")
    return CourseAnalytics(
        course_id=course.id,
        semester=course.metadata.semester,
        stats=stats,
        insights=insights,
        predictions=predictions,
        recommendations=[i.suggestion for i in insights if i.actionable and i.suggestion],
    )
