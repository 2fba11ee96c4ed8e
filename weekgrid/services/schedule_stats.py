"""
Grid statistics for the metadata envelope.
"""

from collections import Counter

from ..schemas import CategoryDistribution, ScheduleGrid, ScheduleStatistics
from ..scheduling.core.constants import (
    FREE_TIME, CATEGORY_SLEEP, CATEGORY_STUDY, CATEGORY_CLASSES, CATEGORY_WORK,
)

# Every grid slot is one hour
HOURS_PER_SLOT = 1


def compute_statistics(grid: ScheduleGrid) -> ScheduleStatistics:
    """
    Hours per category plus study/class/work/free totals.
    Utilization is the percentage of cells holding something other than Free Time or Sleep.
    """
    category_hours = Counter()
    free_cells = 0
    scheduled_cells = 0
    total_cells = 0

    for slot in grid.slots:
        for activity in slot.activities.values():
            total_cells += 1
            category_hours[activity.category] += HOURS_PER_SLOT
            if activity.content == FREE_TIME:
                free_cells += 1
            elif activity.category != CATEGORY_SLEEP:
                scheduled_cells += 1

    study_hours = category_hours[CATEGORY_STUDY]
    class_hours = category_hours[CATEGORY_CLASSES]
    utilization = round(scheduled_cells / total_cells * 100) if total_cells else 0

    return ScheduleStatistics(
        total_activities=scheduled_cells,
        total_study_hours=study_hours,
        total_class_hours=class_hours,
        total_work_hours=category_hours[CATEGORY_WORK],
        total_free_time=free_cells * HOURS_PER_SLOT,
        category_distribution=[
            CategoryDistribution(category=category, hours=hours)
            for category, hours in category_hours.most_common()
        ],
        weekly_workload=study_hours + class_hours,
        time_utilization=utilization,
    )


def with_statistics(grid: ScheduleGrid) -> ScheduleGrid:
    """Copy of the grid with metadata.statistics recomputed."""
    result = grid.model_copy(deep=True)
    if result.metadata is not None:
        result.metadata.statistics = compute_statistics(result)
    return result
