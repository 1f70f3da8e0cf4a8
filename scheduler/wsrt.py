"""
Weighted Shortest Ratio (WSRT) scheduler.

Jobs are sorted ascending by the ratio d // p, using integer floor
division. Jobs whose ratios floor to the same integer keep their original
relative order (Python's sort is stable), even if their exact ratios differ:
    d=5, p=2  → 2
    d=4, p=2  → 2   ← same key, so input order decides

The ratio floors toward negative infinity, so a negative due date rounds
down: d=-5, p=2 → -3, not -2. This differs on purpose from the Lawler
penalty in scheduler/cost.py, which halves due dates toward zero.

Cost reported: sum over the sorted jobs of d_j * C_j, a weighted
completion-time sum with due dates as weights. It is not a lateness measure
and is not comparable to the EDF or Lawler cost.

Precondition: every job has p > 0 (the ratio divides by p).
"""

import logging
from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import Job, Schedule
from scheduler.base import AbstractScheduler
from scheduler.cost import weighted_completion_cost

logger = logging.getLogger(__name__)


def ratio(job: Job) -> int:
    """The WSRT sort key: due date over processing time, floored."""
    return job.d // job.p


class WSRTScheduler(AbstractScheduler):

    def schedule(self, jobs: Sequence[Job]) -> Schedule:
        self._check_not_empty(jobs)
        self._check_positive_processing_times(jobs)

        ordered = sorted(jobs, key=ratio)
        cost = weighted_completion_cost(ordered)

        logger.debug(f"WSRT ordered {len(ordered)} jobs, cost={cost}")
        return Schedule(jobs=tuple(ordered), cost=cost, policy=self.policy_name)

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.WSRT
