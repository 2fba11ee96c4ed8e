"""
Builds the initial weekly grid from user time preferences.
"""

import logging
import math
from typing import List, Optional

from ...models import ScheduleSource
from ...schemas import Activity, ScheduleGrid, ScheduleMetadata, ScheduleSlot, UserScheduleConstraints
from ..constraints.time_constraints import is_sleep_hour, is_work_hour, meal_for_hour
from ..utils.clock import now
from ..utils.slot_utils import generate_hour_labels, is_valid_time, parse_time_to_hours, rotate
from .constants import (
    DAYS_OF_WEEK, DEFAULT_START_DAY, DEFAULT_SLEEP_HOURS, MIN_SLEEP_HOURS, MAX_SLEEP_HOURS,
    DEFAULT_BED_TIME, DEFAULT_START_TIME, FALLBACK_DAYS, FALLBACK_TIMES, FREE_TIME, SLEEP,
    CATEGORY_SLEEP, CATEGORY_WORK, CATEGORY_MEALS, CATEGORY_PERSONAL, SCHEDULE_VERSION,
)

logger = logging.getLogger(__name__)

# ================================
# INPUT VALIDATION
# ================================

def validate_start_day(value) -> str:
    if value in DAYS_OF_WEEK:
        return value
    logger.warning(f"Invalid start day {value!r}, defaulting to {DEFAULT_START_DAY}")
    return DEFAULT_START_DAY


def validate_sleep_hours(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        logger.warning(f"Invalid sleep hours {value!r}, defaulting to {DEFAULT_SLEEP_HOURS}")
        return DEFAULT_SLEEP_HOURS
    if not MIN_SLEEP_HOURS <= value <= MAX_SLEEP_HOURS:
        logger.warning(f"Sleep hours {value} outside [{MIN_SLEEP_HOURS}, {MAX_SLEEP_HOURS}], defaulting to {DEFAULT_SLEEP_HOURS}")
        return DEFAULT_SLEEP_HOURS
    return value


def validate_time(value, default: str, field_name: str) -> str:
    if is_valid_time(value):
        return value.strip()
    logger.warning(f"Invalid {field_name} {value!r}, defaulting to {default}")
    return default


def optional_hours(value, field_name: str) -> Optional[float]:
    """Parse an optional HH:MM field. Malformed values disable the rule that uses them."""
    if is_valid_time(value):
        return parse_time_to_hours(value)
    if value:
        logger.warning(f"Invalid {field_name} {value!r}, ignoring")
    return None


def compute_wake_hour(bed_time: str, sleep_hours: float) -> float:
    """Wake time as fractional hours, carrying minutes (bed 22:30 + 8h -> 6.5)."""
    return (parse_time_to_hours(bed_time) + sleep_hours) % 24


def rotated_days(start_day: str) -> List[str]:
    return rotate(DAYS_OF_WEEK, DAYS_OF_WEEK.index(start_day))


def rotated_hours(start_time: str) -> List[int]:
    start_hour = math.floor(parse_time_to_hours(start_time))
    return rotate(list(range(24)), start_hour)

# ================================
# GRID SYNTHESIS
# ================================

class GridSynthesizer:
    """
    Classifies every (hour, day) cell of the week in a fixed priority order:
    Sleep, then Work, then Meals, then Free Time.
    """
    def __init__(self, constraints: UserScheduleConstraints):
        self.constraints = constraints
        self.start_day = validate_start_day(constraints.start_day)
        self.sleep_hours = validate_sleep_hours(constraints.desired_sleep_hours)
        self.bed_time = validate_time(constraints.bed_time, DEFAULT_BED_TIME, "bed time")
        self.start_time = validate_time(constraints.start_time, DEFAULT_START_TIME, "start time")

        self.bed_hour = parse_time_to_hours(self.bed_time)
        self.wake_hour = compute_wake_hour(self.bed_time, self.sleep_hours)
        self.work_days = set(constraints.work_days or [])
        self.work_start = optional_hours(constraints.work_start_time, "work start time")
        self.work_end = optional_hours(constraints.work_end_time, "work end time")

    def classify(self, hour: int, day: str) -> Activity:
        if is_sleep_hour(hour, self.wake_hour, self.bed_hour):
            return Activity(content=SLEEP, category=CATEGORY_SLEEP)
        if is_work_hour(hour, day, self.work_days, self.work_start, self.work_end):
            return Activity(content="Work", category=CATEGORY_WORK)
        meal = meal_for_hour(hour)
        if meal:
            return Activity(content=meal, category=CATEGORY_MEALS)
        return Activity(content=FREE_TIME, category=CATEGORY_PERSONAL)

    def build(self) -> ScheduleGrid:
        days = rotated_days(self.start_day)
        labels = generate_hour_labels()
        hours = rotated_hours(self.start_time)

        slots = [
            ScheduleSlot(
                time=labels[hour],
                activities={day: self.classify(hour, day) for day in days},
            )
            for hour in hours
        ]

        logger.info(
            f"Synthesized grid starting {self.start_day} {labels[hours[0]]} "
            f"(wake {self.wake_hour:.2f}, bed {self.bed_hour:.2f}, {len(self.work_days)} work days)"
        )
        return ScheduleGrid(slots=slots, metadata=build_metadata(self.constraints, ScheduleSource.AI_GENERATED))


def build_metadata(constraints: Optional[UserScheduleConstraints], source: ScheduleSource) -> ScheduleMetadata:
    timezone = constraints.timezone if constraints is not None else None
    return ScheduleMetadata(
        generated_at=now(timezone),
        version=SCHEDULE_VERSION,
        source=source,
        constraints=constraints,
    )


def build_fallback_grid(constraints: Optional[UserScheduleConstraints] = None) -> ScheduleGrid:
    """Minimal renderable grid: 4 slots x 7 days, all Free Time."""
    slots = [
        ScheduleSlot(
            time=time,
            activities={day: Activity(content=FREE_TIME, category=CATEGORY_PERSONAL) for day in FALLBACK_DAYS},
        )
        for time in FALLBACK_TIMES
    ]
    return ScheduleGrid(slots=slots, metadata=build_metadata(constraints, ScheduleSource.MANUAL))


def synthesize(constraints: UserScheduleConstraints) -> ScheduleGrid:
    """
    Build the initial weekly schedule. Never raises: malformed fields fall back to documented
    defaults and any unexpected fault yields the minimal fallback grid.
    """
    try:
        return GridSynthesizer(constraints).build()
    except Exception:
        logger.exception("Schedule synthesis failed, returning fallback grid")
        try:
            return build_fallback_grid(constraints)
        except Exception:
            logger.exception("Fallback metadata failed, returning grid without constraints echo")
            return build_fallback_grid(None)
