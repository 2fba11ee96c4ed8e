"""
Semester feasibility scoring.
"""

from typing import List

from ...models import ConflictSeverity
from ...schemas import CourseConflict

MAX_SCORE = 100.0
MIN_SCORE = 0.0
WORKLOAD_CEILING_HOURS = 50
TARGET_DIFFICULTY = 3

CREDIT_OVERLOAD_PENALTY = 10
WORKLOAD_OVERLOAD_PENALTY = 2
DIFFICULTY_DEVIATION_PENALTY = 5

CONFLICT_PENALTIES = {
    ConflictSeverity.CRITICAL: 30,
    ConflictSeverity.HIGH: 15,
    ConflictSeverity.MEDIUM: 5,
    ConflictSeverity.LOW: 0,
}


def calculate_feasibility_score(
    total_credits: float,
    max_credits: float,
    estimated_workload: float,
    conflicts: List[CourseConflict],
    average_difficulty: float,
) -> float:
    """
    Rate how sustainable a semester is, 0-100.
    Start at 100 and subtract:
    - 10 per credit over the limit
    - 2 per hour over a 50 h/week workload
    - 30/15/5 per critical/high/medium conflict
    - 5 per point of average difficulty away from 3
    """
    score = MAX_SCORE

    if total_credits > max_credits:
        score -= (total_credits - max_credits) * CREDIT_OVERLOAD_PENALTY

    if estimated_workload > WORKLOAD_CEILING_HOURS:
        score -= (estimated_workload - WORKLOAD_CEILING_HOURS) * WORKLOAD_OVERLOAD_PENALTY

    for conflict in conflicts:
        score -= CONFLICT_PENALTIES.get(conflict.severity, 0)

    score -= abs(average_difficulty - TARGET_DIFFICULTY) * DIFFICULTY_DEVIATION_PENALTY

    return max(MIN_SCORE, min(MAX_SCORE, score))
