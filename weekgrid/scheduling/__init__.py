"""
Weekgrid Scheduling System

Weekly grid synthesis, multi-pass optimization, free-time suggestions and course analysis.
Pure and synchronous: the API and Celery layers call straight into these functions.
"""

from .core.synthesizer import synthesize
from .core.optimizer import optimize, ScheduleOptimizer
from .core.time_slot import GridArena
from .algorithms.suggestions import suggest
from .constraints.course_conflicts import detect_conflicts
from .scoring.workload_scoring import analyze_course_workload
from .scoring.feasibility_scoring import calculate_feasibility_score
from .utils.slot_utils import update_schedule_slot

# Version for future API compatibility
__version__ = "1.0.0"
