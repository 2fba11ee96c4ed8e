"""
Schedule grid API endpoints
"""

import logging

from celery.result import AsyncResult
from fastapi import APIRouter, HTTPException

from ..celery_app import celery_app
from ..celery_tasks.schedule import optimize_schedule, suggest_activities
from ..schemas import (
    BulkEntryRequest, BulkEntryResponse, GridRequest, ScheduleGrid, ScheduleStatistics,
    SlotUpdateRequest, TaskStatus, TaskSubmitted, UserScheduleConstraints,
)
from ..scheduling import optimize, suggest, synthesize, update_schedule_slot
from ..services.bulk_entry import apply_bulk_events, parse_bulk_events
from ..services.schedule_stats import compute_statistics, with_statistics

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=ScheduleGrid)
def generate_schedule(constraints: UserScheduleConstraints, include_statistics: bool = False):
    """
    Build a fresh 24 x 7 grid from the user's preferences.
    ?include_statistics=true fills metadata.statistics instead of leaving it zeroed.
    """
    grid = synthesize(constraints)
    if include_statistics:
        return with_statistics(grid)
    return grid


@router.post("/optimize", response_model=ScheduleGrid)
def optimize_grid(request: GridRequest):
    return optimize(request.grid, request.constraints)


@router.post("/suggest", response_model=ScheduleGrid)
def suggest_free_time(request: GridRequest):
    """Replace every Free Time cell with a suggestion"""
    return suggest(request.grid, request.constraints)


@router.post("/slot", response_model=ScheduleGrid)
def update_slot(request: SlotUpdateRequest):
    return update_schedule_slot(request.grid, request.time, request.day, request.content, request.category)


@router.post("/bulk", response_model=BulkEntryResponse)
def bulk_entry(request: BulkEntryRequest):
    """
    Add events from free text, one per line, e.g.
    "Weekdays at 7:00 AM: Morning run (Exercise)"
    """
    events, errors = parse_bulk_events(request.text)
    if not events:
        detail = errors or ["No events found in text"]
        raise HTTPException(status_code=400, detail=detail)

    grid = apply_bulk_events(request.grid, events)
    return BulkEntryResponse(grid=grid, events=events, errors=errors)


@router.post("/statistics", response_model=ScheduleStatistics)
def grid_statistics(grid: ScheduleGrid):
    return compute_statistics(grid)

# ================================
# BACKGROUND PROCESSING
# ================================

def _submit(task, request: GridRequest) -> TaskSubmitted:
    result = task.delay(request.grid.model_dump(mode="json"), request.constraints.model_dump(mode="json"))
    logger.info(f"Queued {task.name} as {result.id}")
    return TaskSubmitted(task_id=result.id, status="queued")


@router.post("/optimize/async", response_model=TaskSubmitted, status_code=202)
def optimize_grid_async(request: GridRequest):
    return _submit(optimize_schedule, request)


@router.post("/suggest/async", response_model=TaskSubmitted, status_code=202)
def suggest_free_time_async(request: GridRequest):
    return _submit(suggest_activities, request)


@router.get("/tasks/{task_id}", response_model=TaskStatus)
def get_task_status(task_id: str):
    """Poll a background optimize/suggest task"""
    result = AsyncResult(task_id, app=celery_app)
    status = result.status

    # Celery reports unknown ids as PENDING
    if status == "PENDING":
        raise HTTPException(status_code=404, detail="Task not found or not started yet")

    if status == "SUCCESS":
        return TaskStatus(task_id=task_id, status=status, result=ScheduleGrid.model_validate(result.result))
    if status == "FAILURE":
        return TaskStatus(task_id=task_id, status=status, error=str(result.result))
    return TaskStatus(task_id=task_id, status=status)
