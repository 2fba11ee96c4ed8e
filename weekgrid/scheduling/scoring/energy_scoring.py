"""
Energy-based scoring functions for slot evaluation.
"""

import logging
from typing import List, Optional, Tuple

from ...models import EnergyProfile
from ...schemas import UserScheduleConstraints
from ..utils.slot_utils import is_valid_time, parse_time_to_hours

logger = logging.getLogger(__name__)

# (start_hour, end_hour, energy) bands per profile; hours outside every band use the profile floor
ENERGY_BANDS = {
    EnergyProfile.MORNING: [
        (6, 11, 0.9),   # morning peak
        (11, 14, 0.7),
        (14, 17, 0.5),
        (17, 20, 0.4),
    ],
    EnergyProfile.EVENING: [
        (6, 10, 0.4),
        (10, 14, 0.6),
        (14, 19, 0.9),  # afternoon/evening peak
        (19, 23, 0.7),
    ],
    EnergyProfile.BALANCED: [
        (7, 10, 0.7),
        (10, 14, 0.9),  # mid-day peak
        (14, 17, 0.8),
        (17, 20, 0.6),
    ],
}

ENERGY_FLOOR = {
    EnergyProfile.MORNING: 0.2,
    EnergyProfile.EVENING: 0.5,
    EnergyProfile.BALANCED: 0.4,
}

DEFAULT_ENERGY = 0.5


def _hour_of(value) -> Optional[int]:
    if not is_valid_time(value):
        return None
    return int(parse_time_to_hours(value))


def determine_energy_profile(constraints: UserScheduleConstraints) -> EnergyProfile:
    """
    Derive the user's peak-alertness pattern from their wake (start) and bed times:
    - wake before 6 -> morning
    - bed at/after 23 -> evening
    - wake before 7 -> morning-leaning
    - wake after 8 -> evening-leaning
    - otherwise balanced
    """
    wake_hour = _hour_of(constraints.start_time)
    bed_hour = _hour_of(constraints.bed_time)

    if wake_hour is None or bed_hour is None:
        logger.warning("Malformed start/bed time, using balanced energy profile")
        return EnergyProfile.BALANCED

    if wake_hour < 6:
        return EnergyProfile.MORNING
    if bed_hour >= 23:
        return EnergyProfile.EVENING
    if wake_hour < 7:
        return EnergyProfile.MORNING
    if wake_hour > 8:
        return EnergyProfile.EVENING
    return EnergyProfile.BALANCED


def get_energy_level(hour: Optional[int], profile: EnergyProfile) -> float:
    """Energy score in [0, 1] for an hour of day."""
    if hour is None:
        return DEFAULT_ENERGY
    for start, end, energy in ENERGY_BANDS[profile]:
        if start <= hour < end:
            return energy
    return ENERGY_FLOOR[profile]


def rank_slots_by_energy(hours: List[Optional[int]], profile: EnergyProfile) -> List[Tuple[int, float]]:
    """(slot_index, energy) pairs, highest energy first. Ties keep slot order."""
    levels = [(index, get_energy_level(hour, profile)) for index, hour in enumerate(hours)]
    return sorted(levels, key=lambda item: item[1], reverse=True)
