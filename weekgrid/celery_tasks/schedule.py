from typing import Any, Dict
import logging

from weekgrid.celery_app import celery_app
from weekgrid.schemas import ScheduleGrid, UserScheduleConstraints
from weekgrid.scheduling import optimize, suggest

logger = logging.getLogger(__name__)


def _load(grid: Dict[str, Any], constraints: Dict[str, Any]):
    return ScheduleGrid.model_validate(grid), UserScheduleConstraints.model_validate(constraints)


@celery_app.task(name="weekgrid.celery_tasks.schedule.optimize_schedule")
def optimize_schedule(grid: Dict[str, Any], constraints: Dict[str, Any]) -> Dict[str, Any]:
    """Run the optimizer on a JSON-serialized grid and return the optimized grid as JSON."""
    schedule_grid, schedule_constraints = _load(grid, constraints)
    logger.info(f"Optimizing grid with {len(schedule_grid.slots)} slots in background")
    result = optimize(schedule_grid, schedule_constraints)
    return result.model_dump(mode="json")


@celery_app.task(name="weekgrid.celery_tasks.schedule.suggest_activities")
def suggest_activities(grid: Dict[str, Any], constraints: Dict[str, Any]) -> Dict[str, Any]:
    schedule_grid, schedule_constraints = _load(grid, constraints)
    logger.info(f"Filling free time for grid with {len(schedule_grid.slots)} slots in background")
    result = suggest(schedule_grid, schedule_constraints)
    return result.model_dump(mode="json")
