"""
Work/life balance: break up long work runs and make room for exercise.
"""

import logging
from typing import Optional

from ...schemas import Activity, UserScheduleConstraints
from ..core.constants import CATEGORY_WORK, CATEGORY_EXERCISE, CATEGORY_PERSONAL
from ..core.time_slot import GridArena
from .consolidation import find_category_runs

logger = logging.getLogger(__name__)

MIN_RUN_FOR_BREAK = 3


def insert_breaks(arena: GridArena, day_index: int) -> int:
    """Overwrite the midpoint of every Work run of 3+ slots with a Short Break."""
    inserted = 0
    for start, end in find_category_runs(arena, day_index, CATEGORY_WORK):
        length = end - start + 1
        if length >= MIN_RUN_FOR_BREAK:
            arena.put(start + length // 2, day_index, Activity(content="Short Break", category=CATEGORY_PERSONAL))
            inserted += 1
    return inserted


def find_exercise_slot(arena: GridArena, day_index: int) -> Optional[int]:
    """First Free Time slot in the first third of the day, else in the last third."""
    count = arena.slot_count
    morning = range(0, count // 3)
    evening = range((count * 2) // 3, count)

    for window in (morning, evening):
        for i in window:
            if arena.is_free(i, day_index):
                return i
    return None


def ensure_exercise(arena: GridArena, day_index: int) -> bool:
    has_exercise = any(
        arena.get(i, day_index).category == CATEGORY_EXERCISE for i in range(arena.slot_count)
    )
    if has_exercise:
        return False

    slot_index = find_exercise_slot(arena, day_index)
    if slot_index is None:
        return False

    arena.put(slot_index, day_index, Activity(content="Exercise", category=CATEGORY_EXERCISE))
    return True


def apply_work_life_balance(arena: GridArena, constraints: UserScheduleConstraints) -> GridArena:
    """Pass C."""
    result = arena.copy()
    work_days = set(constraints.work_days or [])

    for day_index, day in enumerate(result.days):
        if day not in work_days:
            continue
        breaks = insert_breaks(result, day_index)
        exercise_added = ensure_exercise(result, day_index)
        logger.debug(f"Balance pass on {day}: {breaks} breaks, exercise added={exercise_added}")

    return result
