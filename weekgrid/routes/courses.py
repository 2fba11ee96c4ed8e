"""
Course analysis API endpoints
"""

from typing import List

from fastapi import APIRouter

from ..schemas import (
    CourseAnalytics, CourseAnalyticsRequest, CourseConflict, CourseListRequest, CourseRecommendation,
    CourseWorkload, RecommendationRequest, SemesterPlan, SemesterPlanRequest,
)
from ..scheduling import analyze_course_workload, detect_conflicts
from ..services.course_planner import (
    create_semester_plan, generate_course_analytics, generate_course_recommendations,
)

router = APIRouter()


@router.post("/conflicts", response_model=List[CourseConflict])
def course_conflicts(request: CourseListRequest):
    """Time overlaps, tight building changes and missing prerequisites"""
    return detect_conflicts(request.courses)


@router.post("/workload", response_model=List[CourseWorkload])
def course_workload(request: CourseListRequest):
    return analyze_course_workload(request.courses)


@router.post("/recommendations", response_model=List[CourseRecommendation])
def course_recommendations(request: RecommendationRequest):
    return generate_course_recommendations(
        request.current_courses,
        request.available_courses,
        request.constraints,
        request.degree_requirements,
    )


@router.post("/semester-plan", response_model=SemesterPlan)
def semester_plan(request: SemesterPlanRequest):
    return create_semester_plan(
        request.target_courses,
        request.constraints,
        request.semester,
        request.year,
        available_courses=request.available_courses,
        degree_requirements=request.degree_requirements,
    )


@router.post("/analytics", response_model=CourseAnalytics)
def course_analytics(request: CourseAnalyticsRequest):
    """Attendance and study-time insights, with a grade prediction when performance is sent"""
    return generate_course_analytics(request.course, request.performance)
