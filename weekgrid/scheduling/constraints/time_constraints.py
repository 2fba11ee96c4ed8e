"""
Time-related constraint checking functions.
"""

from typing import Iterable, Optional
from ...schemas import Course, UserScheduleConstraints
from ..core.constants import MEAL_ANCHORS
from ..utils.slot_utils import is_valid_time, time_to_minutes


def is_sleep_hour(hour: int, wake_hour: float, bed_hour: float) -> bool:
    """
    Check whether an hour falls outside the wake -> bed window.
    Sleep that crosses midnight (bed 23:00, wake 07:00) wraps around.
    """
    if bed_hour > wake_hour:
        return hour >= bed_hour or hour < wake_hour
    return bed_hour <= hour < wake_hour


def is_work_hour(hour: int, day: str, work_days: Iterable[str], work_start: Optional[float], work_end: Optional[float]) -> bool:
    """
    Check whether an hour on a given day is inside [work_start, work_end).
    Overnight shifts (end before start) wrap around midnight.
    """
    if work_start is None or work_end is None:
        return False
    if day not in work_days:
        return False

    if work_end < work_start:
        return hour >= work_start or hour < work_end

    return work_start <= hour < work_end


def meal_for_hour(hour: int) -> Optional[str]:
    return MEAL_ANCHORS.get(hour)


def violates_class_time_preferences(course: Course, constraints: UserScheduleConstraints) -> bool:
    """
    True if any meeting of the course starts before the early threshold or after the late
    threshold while the user asked to avoid such classes.
    """
    for slot in course.schedule:
        if not is_valid_time(slot.start_time):
            continue
        class_time = time_to_minutes(slot.start_time)

        if constraints.avoid_early_classes and is_valid_time(constraints.early_class_threshold):
            if class_time < time_to_minutes(constraints.early_class_threshold):
                return True

        if constraints.avoid_late_classes and is_valid_time(constraints.late_class_threshold):
            if class_time > time_to_minutes(constraints.late_class_threshold):
                return True

    return False
