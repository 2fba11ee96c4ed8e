"""
Time-block consolidation: pull fragmented work runs next to the day's main work block.
"""

import logging
from typing import List, Tuple

from ...schemas import UserScheduleConstraints
from ..core.constants import CATEGORY_WORK
from ..core.time_slot import GridArena

logger = logging.getLogger(__name__)

# How far before/after the primary block we look for free slots
CONSOLIDATION_WINDOW = 3


def find_category_runs(arena: GridArena, day_index: int, category: str) -> List[Tuple[int, int]]:
    """Maximal contiguous (start, end) index runs of a category, end inclusive."""
    runs = []
    start = None
    for i in range(arena.slot_count):
        if arena.get(i, day_index).category == category:
            if start is None:
                start = i
        elif start is not None:
            runs.append((start, i - 1))
            start = None
    if start is not None:
        runs.append((start, arena.slot_count - 1))
    return runs


def free_slots_near(arena: GridArena, day_index: int, block: Tuple[int, int]) -> List[int]:
    start, end = block
    before = range(max(0, start - CONSOLIDATION_WINDOW), start)
    after = range(end + 1, min(arena.slot_count, end + 1 + CONSOLIDATION_WINDOW))
    return [i for i in list(before) + list(after) if arena.is_free(i, day_index)]


def consolidate_day(arena: GridArena, day_index: int) -> int:
    """Returns the number of activities moved."""
    runs = find_category_runs(arena, day_index, CATEGORY_WORK)
    if len(runs) <= 1:
        return 0

    # Longest run wins; the first one on ties
    primary = max(runs, key=lambda run: run[1] - run[0])
    moved = 0

    for run in runs:
        if run == primary:
            continue
        free_slots = free_slots_near(arena, day_index, primary)
        for i in range(run[0], run[1] + 1):
            if not free_slots:
                break
            arena.swap(i, free_slots.pop(0), day_index)
            moved += 1

    return moved


def apply_time_block_consolidation(arena: GridArena, constraints: UserScheduleConstraints) -> GridArena:
    """
    Pass A. For each work day, relocate fragmented Work runs into Free Time slots within
    a 3-slot window around the longest Work run.
    """
    result = arena.copy()
    work_days = set(constraints.work_days or [])

    for day_index, day in enumerate(result.days):
        if day not in work_days:
            continue
        moved = consolidate_day(result, day_index)
        if moved:
            logger.debug(f"Consolidation moved {moved} work slots on {day}")

    return result
