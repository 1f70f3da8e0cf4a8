"""
Lawler-style greedy scheduler.

This is a heuristic, not Lawler's exact algorithm. Each round looks at the
total processing time T that is still unscheduled and picks, among the
remaining jobs, the one with the LARGEST penalty at that horizon:

    penalty(T, d) = sqrt(T - d / 2)   if T - d / 2 > 0
                  = 0                 otherwise

The chosen job is appended to the schedule, removed from the pool, and T
drops by its processing time. Rounds repeat until T reaches 0.

Example with jobs A(p=2, d=10), B(p=3, d=4):
    round 1: T=5  penalty(A)=0.0      penalty(B)=sqrt(3)  → pick B, T=2
    round 2: T=2  penalty(A)=0.0                          → pick A, T=0
    order B, A, cost = max(sqrt(3), 0.0)

Tie-break: the first job in the pool's current order wins (strict > scan).

Selection is by position in a working list, never by searching for an
equal Job: two jobs with identical name/p/d are still two jobs.

Cost reported: the maximum single-round penalty (not a sum), always >= 0.

Precondition: every job has p > 0. With p = 0 the remaining time could stay
positive forever, so the scheduler refuses such input up front.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from models.enums import SchedulingPolicy
from models.job import Job, Schedule
from scheduler.base import AbstractScheduler
from scheduler.cost import lawler_penalty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """One greedy round: which job was picked and at what horizon."""
    job: Job
    index: int           # position of the job in the pool when it was picked
    remaining_time: int  # T before the job's processing time was subtracted
    penalty: float


def _pick(pool: list[Job], remaining_time: int) -> tuple[int, float]:
    """Index and penalty of the highest-penalty job (first one on ties)."""
    best_index = 0
    best_penalty = -1.0
    for index, job in enumerate(pool):
        penalty = lawler_penalty(remaining_time, job.d)
        if penalty > best_penalty:
            best_index, best_penalty = index, penalty
    return best_index, best_penalty


class LawlerScheduler(AbstractScheduler):

    def iter_selections(self, jobs: Sequence[Job]) -> Iterator[Selection]:
        """
        Run the greedy loop, yielding each round as it happens.

        schedule() is a thin wrapper around this; it's exposed so callers
        can inspect the horizon and penalty behind every decision.
        """
        self._check_not_empty(jobs)
        self._check_positive_processing_times(jobs)

        pool = list(jobs)
        remaining_time = sum(job.p for job in pool)

        while remaining_time > 0:
            index, penalty = _pick(pool, remaining_time)
            job = pool.pop(index)
            yield Selection(job=job, index=index, remaining_time=remaining_time, penalty=penalty)
            remaining_time -= job.p

    def schedule(self, jobs: Sequence[Job]) -> Schedule:
        ordered: list[Job] = []
        cost = 0.0
        for selection in self.iter_selections(jobs):
            ordered.append(selection.job)
            cost = max(cost, selection.penalty)

        logger.debug(f"Lawler ordered {len(ordered)} jobs in {len(ordered)} rounds, cost={cost}")
        return Schedule(jobs=tuple(ordered), cost=cost, policy=self.policy_name)

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.LAWLER
