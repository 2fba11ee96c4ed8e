"""
Free-time advisor: fill remaining "Free Time" cells with context-sensitive suggestions.
"""

import logging
from typing import Optional, Set

from ...schemas import Activity, ScheduleGrid, UserScheduleConstraints
from ..core.constants import (
    CATEGORY_WORK, CATEGORY_PERSONAL, CATEGORY_EXERCISE, CATEGORY_LEARNING,
    CATEGORY_MEALS, CATEGORY_LEISURE,
)
from ..core.time_slot import GridArena

logger = logging.getLogger(__name__)

SUGGESTION_CATEGORIES = {
    "Morning Planning": CATEGORY_PERSONAL,
    "Morning Exercise": CATEGORY_EXERCISE,
    "Focus Work": CATEGORY_WORK,
    "Learning": CATEGORY_LEARNING,
    "Lunch": CATEGORY_MEALS,
    "Short Break": CATEGORY_PERSONAL,
    "Admin Tasks": CATEGORY_WORK,
    "Reading": CATEGORY_LEISURE,
    "Work Wrap-up": CATEGORY_WORK,
    "Exercise": CATEGORY_EXERCISE,
    "Dinner": CATEGORY_MEALS,
    "Relaxation": CATEGORY_LEISURE,
    "Flexible Time": CATEGORY_PERSONAL,
}


def suggest_for_slot(hour: int, is_work_day: bool, prev_category: Optional[str], next_category: Optional[str]) -> str:
    """First matching hour band wins."""
    if 5 <= hour < 8:
        return "Morning Planning" if next_category == CATEGORY_WORK else "Morning Exercise"
    if 8 <= hour < 12:
        return "Focus Work" if is_work_day else "Learning"
    if 12 <= hour < 14:
        return "Lunch"
    if 14 <= hour < 16:
        if prev_category == CATEGORY_WORK and next_category == CATEGORY_WORK:
            return "Short Break"
        return "Admin Tasks" if is_work_day else "Reading"
    if 16 <= hour < 18:
        return "Work Wrap-up" if is_work_day and prev_category == CATEGORY_WORK else "Exercise"
    if 18 <= hour < 20:
        return "Dinner"
    if 20 <= hour < 23:
        return "Relaxation"
    return "Flexible Time"


def fill_free_time(arena: GridArena, work_days: Set[str]) -> GridArena:
    """Suggestions read neighbours from `arena` and are written to a copy."""
    result = arena.copy()
    filled = 0

    for day_index, day in enumerate(arena.days):
        is_work_day = day in work_days
        for i in range(arena.slot_count):
            if not arena.is_free(i, day_index):
                continue
            hour = arena.hours[i]
            if hour is None:
                continue

            prev_category = arena.get(i - 1, day_index).category if i > 0 else None
            next_category = arena.get(i + 1, day_index).category if i + 1 < arena.slot_count else None

            content = suggest_for_slot(hour, is_work_day, prev_category, next_category)
            result.put(i, day_index, Activity(content=content, category=SUGGESTION_CATEGORIES[content]))
            filled += 1

    logger.debug(f"Advisor filled {filled} free slots")
    return result


def suggest(grid: ScheduleGrid, constraints: UserScheduleConstraints) -> ScheduleGrid:
    """Never raises: on an internal fault the input is returned unchanged (as a copy)."""
    try:
        arena = fill_free_time(GridArena.from_grid(grid), set(constraints.work_days or []))
        result = grid.model_copy(deep=True)
        result.slots = arena.to_slots()
        return result
    except Exception:
        logger.exception("Free-time suggestion failed, returning unmodified grid")
        return grid.model_copy(deep=True)
