"""
Time-label and single-slot utility functions.
"""

import re
from typing import List, Optional
from ...schemas import Activity, ScheduleGrid

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])$")
HOUR_LABEL_PATTERN = re.compile(r"(\d+):(\d+)\s*(AM|PM)", re.IGNORECASE)


def is_valid_time(value) -> bool:
    """True for 24h "H:MM" / "HH:MM" strings."""
    return isinstance(value, str) and TIME_PATTERN.match(value.strip()) is not None


def parse_time_to_hours(value: str) -> float:
    """Convert "HH:MM" to fractional hours, e.g. "22:30" -> 22.5"""
    hours, minutes = value.strip().split(":")
    return int(hours) + int(minutes) / 60


def time_to_minutes(value: str) -> int:
    hours, minutes = value.strip().split(":")
    return int(hours) * 60 + int(minutes)


def format_hour_label(hour: int) -> str:
    """Format an hour of day as the grid label used everywhere, e.g. 13 -> "1:00 PM"."""
    hour = int(hour) % 24
    period = "PM" if hour >= 12 else "AM"
    display_hour = 12 if hour % 12 == 0 else hour % 12
    return f"{display_hour}:00 {period}"


def parse_hour_label(label: str) -> Optional[int]:
    """Convert a grid label back to its 24h hour. Returns None if the label is not recognised."""
    match = HOUR_LABEL_PATTERN.search(label or "")
    if not match:
        return None
    hour = int(match.group(1))
    is_pm = match.group(3).upper() == "PM"
    if is_pm and hour != 12:
        hour += 12
    elif not is_pm and hour == 12:
        hour = 0
    return hour % 24


def generate_hour_labels() -> List[str]:
    return [format_hour_label(h) for h in range(24)]


def rotate(items: List, start_index: int) -> List:
    if start_index <= 0 or start_index >= len(items):
        return list(items)
    return items[start_index:] + items[:start_index]


def update_schedule_slot(grid: ScheduleGrid, time: str, day: str, content: str, category: str) -> ScheduleGrid:
    """
    Replace the activity of a single (time, day) cell.
    Returns a new grid; unknown times or days leave the copy unchanged.
    """
    updated = grid.model_copy(deep=True)
    for slot in updated.slots:
        if slot.time == time:
            if day in slot.activities:
                slot.activities[day] = Activity(content=content, category=category)
            break
    return updated
