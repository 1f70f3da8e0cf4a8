"""
Earliest Due Date (EDF) scheduler.

Jobs with the smallest due date run first. On a single machine this order
is optimal for minimizing the maximum lateness (Jackson's rule).

Algorithm: stable sort by d, then simulate sequential execution.
- sort: O(n log n), ties keep their original relative order
- cost: one pass over the sorted jobs

Cost reported: max over jobs of -(C_j - d_j), i.e. the largest slack.
Careful: this is NOT the maximum lateness. When every job is early, the
cost is the biggest head start rather than 0.
"""

import logging
from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import Job, Schedule
from scheduler.base import AbstractScheduler
from scheduler.cost import max_slack

logger = logging.getLogger(__name__)


class EDFScheduler(AbstractScheduler):

    def schedule(self, jobs: Sequence[Job]) -> Schedule:
        self._check_not_empty(jobs)

        ordered = sorted(jobs, key=lambda job: job.d)
        cost = max_slack(ordered)

        logger.debug(f"EDF ordered {len(ordered)} jobs, cost={cost}")
        return Schedule(jobs=tuple(ordered), cost=cost, policy=self.policy_name)

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.EDF
