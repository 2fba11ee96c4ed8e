"""
Optimizer that runs an ordered list of passes over a week grid.
"""

import logging
from typing import Callable, List, Optional, Sequence

from ...models import ScheduleSource
from ...schemas import ScheduleGrid, UserScheduleConstraints
from ..algorithms.balance import apply_work_life_balance
from ..algorithms.consolidation import apply_time_block_consolidation
from ..algorithms.energy import apply_energy_aware_scheduling
from ..utils.clock import now
from .time_slot import GridArena

logger = logging.getLogger(__name__)

Pass = Callable[[GridArena, UserScheduleConstraints], GridArena]

DEFAULT_PASSES: List[Pass] = [
    apply_time_block_consolidation,
    apply_energy_aware_scheduling,
    apply_work_life_balance,
]

# ================================
# OPTIMIZATION PIPELINE
# ================================

class ScheduleOptimizer:
    """
    Applies passes strictly in order, each one consuming the previous pass's full output.
    Construct with a different pass list to reorder or disable passes.
    """
    def __init__(self, passes: Optional[Sequence[Pass]] = None):
        self.passes = list(DEFAULT_PASSES if passes is None else passes)

    def run(self, grid: ScheduleGrid, constraints: UserScheduleConstraints) -> ScheduleGrid:
        """Run every pass. Raises on internal faults; see optimize() for the fail-safe entry point."""
        arena = GridArena.from_grid(grid)

        for optimization_pass in self.passes:
            arena = optimization_pass(arena, constraints)
            logger.debug(f"Applied pass {optimization_pass.__name__}")

        result = grid.model_copy(deep=True)
        result.slots = arena.to_slots()
        if result.metadata is not None:
            result.metadata.source = ScheduleSource.OPTIMIZED
            result.metadata.last_optimized = now(constraints.timezone)
        return result

    def optimize(self, grid: ScheduleGrid, constraints: UserScheduleConstraints) -> ScheduleGrid:
        try:
            result = self.run(grid, constraints)
            logger.info(f"Optimized grid with {len(self.passes)} passes")
            return result
        except Exception:
            logger.exception("Schedule optimization failed, returning unmodified grid")
            return grid.model_copy(deep=True)


def optimize(grid: ScheduleGrid, constraints: UserScheduleConstraints) -> ScheduleGrid:
    """
    Consolidate fragmented work, move focus work into peak-energy hours and insert
    breaks/exercise. Never raises: on an internal fault the input is returned unchanged (as a copy).
    """
    return ScheduleOptimizer().optimize(grid, constraints)
