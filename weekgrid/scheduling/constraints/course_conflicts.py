"""
Course conflict detection: overlapping meetings, tight building changes and missing prerequisites.
"""

import logging
import math
from typing import List, Tuple

from ...models import ConflictType, ConflictSeverity
from ...schemas import Course, CourseConflict, RecurringTimeSlot
from ..utils.slot_utils import is_valid_time, time_to_minutes

logger = logging.getLogger(__name__)

# Campus distances in miles, keyed by building pair in either order
BUILDING_DISTANCES = {
    frozenset(("MATH", "ENGR")): 0.3,
    frozenset(("MATH", "PHYS")): 0.2,
    frozenset(("MATH", "CHEM")): 0.4,
    frozenset(("ENGR", "PHYS")): 0.5,
    frozenset(("ENGR", "CHEM")): 0.6,
    frozenset(("PHYS", "CHEM")): 0.3,
}
DEFAULT_DISTANCE_MILES = 0.4
WALKING_SPEED_MPH = 3
MAX_TRANSITION_GAP_MINUTES = 15

TIME_OVERLAP_SUGGESTIONS = [
    "Choose a different section",
    "Take one course in a different semester",
    "Check if there are online options available",
]
LOCATION_SUGGESTIONS = [
    "Add buffer time between classes",
    "Consider online section for one course",
    "Plan efficient routes between buildings",
]
PREREQUISITE_SUGGESTIONS = [
    "Take prerequisite courses first",
    "Check if prerequisites can be waived",
    "Consider alternative courses without prerequisites",
]


def _slot_minutes(slot: RecurringTimeSlot) -> Tuple[int, int]:
    return time_to_minutes(slot.start_time), time_to_minutes(slot.end_time)


def _is_well_formed(slot: RecurringTimeSlot) -> bool:
    return is_valid_time(slot.start_time) and is_valid_time(slot.end_time)


def _same_day_pairs(course1: Course, course2: Course):
    for slot1 in course1.schedule:
        for slot2 in course2.schedule:
            if slot1.day_of_week == slot2.day_of_week and _is_well_formed(slot1) and _is_well_formed(slot2):
                yield slot1, slot2


def calculate_time_overlap(slot1: RecurringTimeSlot, slot2: RecurringTimeSlot) -> int:
    """Overlap in minutes between two meetings, 0 if disjoint."""
    start1, end1 = _slot_minutes(slot1)
    start2, end2 = _slot_minutes(slot2)
    return max(0, min(end1, end2) - max(start1, start2))


def estimate_travel_time(building1: str, building2: str) -> int:
    """Walking minutes between buildings, rounded up."""
    distance = BUILDING_DISTANCES.get(frozenset((building1, building2)), DEFAULT_DISTANCE_MILES)
    minutes = round(distance / WALKING_SPEED_MPH * 60, 6)
    return math.ceil(minutes)


def has_time_overlap(course1: Course, course2: Course) -> bool:
    return any(calculate_time_overlap(s1, s2) > 0 for s1, s2 in _same_day_pairs(course1, course2))


def has_location_conflict(course1: Course, course2: Course) -> bool:
    """
    True if one course ends at most 15 minutes before the other starts (either order)
    in a different building and the walk takes longer than the gap.
    """
    building1 = course1.location.building
    building2 = course2.location.building
    if building1 == building2:
        return False

    travel_time = estimate_travel_time(building1, building2)
    for slot1, slot2 in _same_day_pairs(course1, course2):
        start1, end1 = _slot_minutes(slot1)
        start2, end2 = _slot_minutes(slot2)
        for gap in (start2 - end1, start1 - end2):
            if 0 <= gap <= MAX_TRANSITION_GAP_MINUTES and travel_time > gap:
                return True
    return False


def check_prerequisites(courses: List[Course]) -> List[CourseConflict]:
    conflicts = []
    course_codes = {course.course_code for course in courses}

    for course in courses:
        missing = [prereq for prereq in course.metadata.prerequisites if prereq not in course_codes]
        if missing:
            conflicts.append(CourseConflict(
                type=ConflictType.PREREQUISITE_MISSING,
                severity=ConflictSeverity.HIGH,
                courses=[course],
                description=f"{course.course_code} requires prerequisites: {', '.join(missing)}",
                suggestions=list(PREREQUISITE_SUGGESTIONS),
                auto_resolvable=False,
            ))
    return conflicts


def detect_conflicts(courses: List[Course]) -> List[CourseConflict]:
    """
    Check every course pair for overlapping meetings and tight building changes, then every
    course for missing prerequisites. Returns an empty list when there are no issues.
    """
    conflicts = []

    for i, course1 in enumerate(courses):
        for course2 in courses[i + 1:]:
            if has_time_overlap(course1, course2):
                conflicts.append(CourseConflict(
                    type=ConflictType.TIME_OVERLAP,
                    severity=ConflictSeverity.CRITICAL,
                    courses=[course1, course2],
                    description=f"Time conflict between {course1.course_code} and {course2.course_code}",
                    suggestions=list(TIME_OVERLAP_SUGGESTIONS),
                    auto_resolvable=False,
                ))

            if has_location_conflict(course1, course2):
                conflicts.append(CourseConflict(
                    type=ConflictType.LOCATION_CONFLICT,
                    severity=ConflictSeverity.MEDIUM,
                    courses=[course1, course2],
                    description=(
                        f"Tight schedule between {course1.course_code} and {course2.course_code} "
                        f"- insufficient travel time"
                    ),
                    suggestions=list(LOCATION_SUGGESTIONS),
                    auto_resolvable=True,
                ))

    conflicts.extend(check_prerequisites(courses))

    logger.debug(f"Found {len(conflicts)} conflicts among {len(courses)} courses")
    return conflicts
