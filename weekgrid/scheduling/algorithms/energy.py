"""
Energy-aware reassignment: move high-focus work into the user's peak-energy hours.
"""

import logging
from typing import List, Set

from ...schemas import Activity, UserScheduleConstraints
from ..core.constants import CATEGORY_WORK, CATEGORY_STUDY, FREE_TIME
from ..core.time_slot import GridArena
from ..scoring.energy_scoring import determine_energy_profile, rank_slots_by_energy

logger = logging.getLogger(__name__)

FOCUS_CATEGORIES = {CATEGORY_WORK, CATEGORY_STUDY}
LOW_FOCUS_MARKERS = ("Meeting", "Break", "Email")


def is_focus_task(activity: Activity) -> bool:
    return activity.category in FOCUS_CATEGORIES


def is_low_focus(activity: Activity) -> bool:
    return any(marker in activity.content for marker in LOW_FOCUS_MARKERS)


def reassign_day(arena: GridArena, day_index: int, ranked_slots: List[int]) -> int:
    """
    Swap the i-th high-focus task into the i-th highest-energy slot when that slot holds
    Free Time or a low-focus task. Returns the number of swaps.
    """
    high_focus = []
    low_focus: Set[int] = set()
    for i in range(arena.slot_count):
        activity = arena.get(i, day_index)
        if not is_focus_task(activity):
            continue
        if is_low_focus(activity):
            low_focus.add(i)
        else:
            high_focus.append(i)

    claimed: Set[int] = set()
    swaps = 0

    for rank, source in enumerate(high_focus):
        if rank >= len(ranked_slots):
            break
        target = ranked_slots[rank]
        if target == source or target in claimed:
            continue

        target_is_low = target in low_focus
        if arena.get(target, day_index).content != FREE_TIME and not target_is_low:
            continue

        arena.swap(source, target, day_index)
        claimed.add(target)
        swaps += 1

        # The displaced low-focus task now lives where the high-focus one was
        if target_is_low:
            low_focus.discard(target)
            low_focus.add(source)

    return swaps


def apply_energy_aware_scheduling(arena: GridArena, constraints: UserScheduleConstraints) -> GridArena:
    """Pass B."""
    result = arena.copy()
    profile = determine_energy_profile(constraints)
    ranked_slots = [index for index, _ in rank_slots_by_energy(result.hours, profile)]
    work_days = set(constraints.work_days or [])

    for day_index, day in enumerate(result.days):
        if day not in work_days:
            continue
        swaps = reassign_day(result, day_index, ranked_slots)
        if swaps:
            logger.debug(f"Energy pass ({profile.value}) made {swaps} swaps on {day}")

    return result
