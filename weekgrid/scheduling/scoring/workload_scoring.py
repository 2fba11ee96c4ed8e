"""
Workload-based scoring functions for course evaluation.
"""

from typing import List

from ...models import AssignmentLoad, ExamFrequency
from ...schemas import Course, CourseWorkload

# Rule of thumb: 2 hours of study per credit hour
STUDY_HOURS_PER_CREDIT = 2

# Index 0-4 for difficulty 1-5
DIFFICULTY_MULTIPLIERS = [0.8, 0.9, 1.0, 1.2, 1.5]

DEPARTMENT_MULTIPLIERS = {
    "CS": 1.3,      # programming intensive
    "MATH": 1.2,
    "PHYS": 1.2,    # lab work and calculations
    "CHEM": 1.2,
    "ENGR": 1.3,    # design projects
    "BIOL": 1.1,
    "HIST": 1.0,
    "ENGL": 1.1,    # writing intensive
    "PSYC": 0.9,
    "ARTS": 0.8,
    "ECON": 1.0,
    "POLI": 0.9,
}
DEFAULT_DEPARTMENT_MULTIPLIER = 1.0

GROUP_WORK_DEPARTMENTS = {"ENGR", "CS", "BUSI", "COMM"}
PARTICIPATION_KEYWORDS = ["seminar", "discussion", "language"]


def get_difficulty_multiplier(difficulty: int) -> float:
    return DIFFICULTY_MULTIPLIERS[max(0, min(4, difficulty - 1))]


def get_department_multiplier(department: str) -> float:
    return DEPARTMENT_MULTIPLIERS.get(department, DEFAULT_DEPARTMENT_MULTIPLIER)


def estimate_weekly_hours(course: Course) -> float:
    """
    Estimated study hours per week:
    credits * 2 * difficulty multiplier * department multiplier, rounded to one decimal.
    """
    base_hours = course.metadata.credit_hours * STUDY_HOURS_PER_CREDIT
    hours = base_hours * get_difficulty_multiplier(course.metadata.difficulty) * get_department_multiplier(course.metadata.department)
    return round(hours, 1)


def classify_assignment_load(course: Course) -> AssignmentLoad:
    score = course.metadata.credit_hours + course.metadata.difficulty
    if score <= 5:
        return AssignmentLoad.LIGHT
    if score <= 8:
        return AssignmentLoad.MODERATE
    return AssignmentLoad.HEAVY


def classify_exam_frequency(course: Course) -> ExamFrequency:
    credit_hours = course.metadata.credit_hours
    if credit_hours <= 2:
        return ExamFrequency.LOW
    if credit_hours <= 3:
        return ExamFrequency.MODERATE
    return ExamFrequency.HIGH


def requires_participation(course: Course) -> bool:
    name = course.course_name.lower()
    tags = [tag.lower() for tag in course.metadata.tags]
    return any(keyword in name or keyword in tags for keyword in PARTICIPATION_KEYWORDS)


def estimate_group_work_percentage(course: Course) -> float:
    credit_hours = course.metadata.credit_hours
    if course.metadata.department in GROUP_WORK_DEPARTMENTS:
        return min(40, credit_hours * 10)
    return min(20, credit_hours * 5)


def analyze_course_workload(courses: List[Course]) -> List[CourseWorkload]:
    return [
        CourseWorkload(
            course_id=course.id,
            estimated_hours_per_week=estimate_weekly_hours(course),
            difficulty=course.metadata.difficulty,
            assignment_load=classify_assignment_load(course),
            exam_frequency=classify_exam_frequency(course),
            participation_required=requires_participation(course),
            group_work_percentage=estimate_group_work_percentage(course),
        )
        for course in courses
    ]


def calculate_total_workload(courses: List[Course]) -> float:
    return round(sum(w.estimated_hours_per_week for w in analyze_course_workload(courses)), 1)
