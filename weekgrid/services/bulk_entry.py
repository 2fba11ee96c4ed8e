"""
Bulk text entry: turn lines like "Tuesday and Thursday at 5:00 PM: Gym workout (Exercise)"
into single-slot schedule updates.
"""

import logging
import re
from typing import List, Optional, Tuple

from dateutil import parser as date_parser

from ..schemas import BulkEvent, ScheduleGrid
from ..scheduling.core.constants import KNOWN_CATEGORIES, CATEGORY_PERSONAL
from ..scheduling.utils.slot_utils import format_hour_label, update_schedule_slot

logger = logging.getLogger(__name__)

# Day(s) [at] Time: Description [(Category)]
LINE_PATTERN = re.compile(
    r"^(.*?)(?:\s+at)?\s+(\d{1,2}:\d{2}\s*(?:AM|PM))\s*:\s*(.+?)(?:\s+\((.+?)\))?$",
    re.IGNORECASE,
)
DAY_SEPARATOR = re.compile(r",|\s+and\s+", re.IGNORECASE)

WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
WEEKDAYS = WEEK[:5]
WEEKENDS = WEEK[5:]

# Checked in order; the first category with a matching keyword wins
CATEGORY_KEYWORDS = [
    ("Exercise", ["gym", "workout", "exercise", "run", "fitness"]),
    ("Work", ["meeting", "work", "project", "deadline", "client"]),
    ("Meals", ["breakfast", "lunch", "dinner", "meal", "eat"]),
    ("Social", ["friend", "family", "party", "social", "date"]),
    ("Study", ["study", "learn", "class", "course", "homework"]),
]


def get_full_day_name(value: str) -> Optional[str]:
    """Full day name from a name or 3-letter abbreviation, case-insensitive."""
    cleaned = value.strip().lower()
    if len(cleaned) < 3:
        return None
    for day in WEEK:
        if day.lower() == cleaned or day.lower()[:3] == cleaned[:3]:
            return day
    return None


def parse_days(days_part: str) -> List[str]:
    lowered = days_part.lower()
    if "everyday" in lowered or "every day" in lowered:
        return list(WEEK)
    if "weekdays" in lowered:
        return list(WEEKDAYS)
    if "weekends" in lowered:
        return list(WEEKENDS)

    days = []
    for part in DAY_SEPARATOR.split(days_part):
        day = get_full_day_name(part)
        if day and day not in days:
            days.append(day)
    return days


def normalize_time(time_part: str) -> Optional[str]:
    """Snap a clock time to the grid's hour label, e.g. "5:30 pm" -> "5:00 PM"."""
    try:
        parsed = date_parser.parse(time_part)
    except (ValueError, OverflowError):
        return None
    return format_hour_label(parsed.hour)


def infer_category(content: str) -> str:
    lowered = content.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return CATEGORY_PERSONAL


def resolve_category(category: Optional[str], content: str) -> str:
    if not category:
        return infer_category(content)
    for known in KNOWN_CATEGORIES:
        if known.lower() == category.strip().lower():
            return known
    return CATEGORY_PERSONAL


def parse_bulk_events(text: str) -> Tuple[List[BulkEvent], List[str]]:
    """
    Parse one event per non-empty line.

    Returns:
        (events, errors): one event per resolved day, and a message per line that could not be parsed
    """
    events = []
    errors = []
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    for index, line in enumerate(lines, start=1):
        match = LINE_PATTERN.match(line)
        if not match:
            errors.append(f"Line {index}: Could not parse \"{line}\"")
            continue

        days_part, time_part, content_part, category_part = match.groups()

        days = parse_days(days_part)
        if not days:
            errors.append(f"Line {index}: Could not identify days in \"{days_part}\"")
            continue

        time = normalize_time(time_part)
        if time is None:
            errors.append(f"Line {index}: Invalid time format \"{time_part}\"")
            continue

        content = content_part.strip()
        category = resolve_category(category_part, content)
        events.extend(BulkEvent(day=day, time=time, content=content, category=category) for day in days)

    if errors:
        logger.warning(f"Bulk entry skipped {len(errors)} of {len(lines)} lines")
    return events, errors


def apply_bulk_events(grid: ScheduleGrid, events: List[BulkEvent]) -> ScheduleGrid:
    for event in events:
        grid = update_schedule_slot(grid, event.time, event.day, event.content, event.category)
    logger.info(f"Applied {len(events)} bulk events")
    return grid
