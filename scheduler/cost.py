"""
Cost functions shared by the schedulers.

All of them simulate the same thing: a single machine that runs jobs
back-to-back in the given order, starting at time 0, with no preemption.
A job's completion instant is the running sum of processing times up to
and including that job. The functions differ only in what penalty they
measure at each completion instant and how they combine those penalties:

    max_slack                 → EDF          max over jobs of -(C_j - d_j)
    lawler_penalty            → Lawler       sqrt(T - d_j / 2), floored at 0
    weighted_completion_cost  → WSRT/Random  sum over jobs of d_j * C_j

These numbers mean different things. Never compare the cost of one policy
against the cost of another.
"""

import math
from typing import Iterable, Iterator

from models.job import Job


def completion_times(jobs: Iterable[Job]) -> Iterator[tuple[Job, int]]:
    """Yield (job, completion_time) pairs for sequential execution from t=0."""
    time = 0
    for job in jobs:
        time += job.p
        yield job, time


def slack(time: int, due: int) -> int:
    """How early a job finishes: the negated lateness -(time - due)."""
    return -(time - due)


def max_slack(jobs: Iterable[Job]) -> float:
    """
    The EDF cost: the largest slack observed at any completion instant.

    This is not clamped at zero. If every job finishes early, the result is
    the biggest head start any job had, not 0.
    """
    best = None
    for job, time in completion_times(jobs):
        value = slack(time, job.d)
        if best is None or value > best:
            best = value
    if best is None:
        raise ValueError("max_slack requires at least one job")
    return float(best)


def _half(deadline: int) -> int:
    # integer halving truncates toward zero, also for negative due dates
    if deadline >= 0:
        return deadline // 2
    return -(-deadline // 2)


def lawler_penalty(time: int, deadline: int) -> float:
    """
    Square-root lateness penalty used by the Lawler greedy heuristic.

    `time` here is the total processing time still left to schedule, not the
    elapsed time: the heuristic reasons about the job that would finish at
    that horizon. Jobs whose due date is comfortably past twice the horizon
    cost nothing.
    """
    excess = time - _half(deadline)
    if excess < 0:
        return 0.0
    return math.sqrt(excess)


def weighted_completion_cost(jobs: Iterable[Job]) -> float:
    """Sum of d_j * C_j: due dates act as weights on completion times."""
    total = 0.0
    for job, time in completion_times(jobs):
        total += float(job.d * time)
    return total
