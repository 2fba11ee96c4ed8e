"""
Shared fixtures for the root-level test modules.
"""

import pytest

from weekgrid.schemas import Activity, ScheduleGrid, ScheduleSlot, UserScheduleConstraints
from weekgrid.scheduling.core.synthesizer import build_metadata
from weekgrid.models import ScheduleSource
from weekgrid.scheduling.utils.slot_utils import format_hour_label


def build_day_grid(cells=None, days=("Monday",), constraints=None):
    """
    24 hourly slots starting at midnight (slot index == hour), every cell Free Time
    unless overridden by cells[(hour, day)] = (content, category).
    """
    cells = cells or {}
    slots = []
    for hour in range(24):
        activities = {}
        for day in days:
            content, category = cells.get((hour, day), ("Free Time", "Personal"))
            activities[day] = Activity(content=content, category=category)
        slots.append(ScheduleSlot(time=format_hour_label(hour), activities=activities))
    return ScheduleGrid(slots=slots, metadata=build_metadata(constraints, ScheduleSource.MANUAL))


def cell(grid, hour, day="Monday"):
    return grid.slots[hour].activities[day]


@pytest.fixture
def make_day_grid():
    return build_day_grid


@pytest.fixture
def monday_worker():
    return UserScheduleConstraints(
        start_day="Monday",
        start_time="08:00",
        bed_time="22:00",
        desired_sleep_hours=8,
        work_days=["Monday"],
        work_start_time="09:00",
        work_end_time="17:00",
    )
