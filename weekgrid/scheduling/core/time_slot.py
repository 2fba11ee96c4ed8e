"""
Index-addressed grid representation for the scheduling system.
"""

from typing import List
from ...schemas import Activity, ScheduleGrid, ScheduleSlot
from ..utils.slot_utils import parse_hour_label
from .constants import FREE_TIME


class GridArena:
    """
    A week grid stored as cells[slot_index][day_index].
    Each cell holds exactly one Activity, so moving work around is a plain index swap:
    - swap() exchanges two cells of the same day
    - put() replaces one cell with a new Activity value
    """
    def __init__(self, times: List[str], days: List[str], cells: List[List[Activity]]):
        self.times = times
        self.days = days
        self.cells = cells
        self.hours = [parse_hour_label(t) for t in times]

    @classmethod
    def from_grid(cls, grid: ScheduleGrid) -> "GridArena":
        days = grid.days
        times = [slot.time for slot in grid.slots]
        cells = [
            [slot.activities[day].model_copy() for day in days]
            for slot in grid.slots
        ]
        return cls(times, days, cells)

    def copy(self) -> "GridArena":
        return GridArena(
            list(self.times),
            list(self.days),
            [[cell.model_copy() for cell in row] for row in self.cells],
        )

    def to_slots(self) -> List[ScheduleSlot]:
        return [
            ScheduleSlot(
                time=time,
                activities={day: self.cells[i][d].model_copy() for d, day in enumerate(self.days)},
            )
            for i, time in enumerate(self.times)
        ]

    @property
    def slot_count(self) -> int:
        return len(self.times)

    def get(self, slot_index: int, day_index: int) -> Activity:
        return self.cells[slot_index][day_index]

    def put(self, slot_index: int, day_index: int, activity: Activity):
        self.cells[slot_index][day_index] = activity

    def swap(self, a: int, b: int, day_index: int):
        self.cells[a][day_index], self.cells[b][day_index] = self.cells[b][day_index], self.cells[a][day_index]

    def is_free(self, slot_index: int, day_index: int) -> bool:
        return self.cells[slot_index][day_index].content == FREE_TIME

    def __repr__(self):
        return f"GridArena({self.slot_count} slots x {len(self.days)} days)"
