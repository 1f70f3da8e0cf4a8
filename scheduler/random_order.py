"""
Random baseline scheduler.

Produces a uniformly random permutation of the jobs and scores it with the
same formula as WSRT (sum of d_j * C_j). It makes no attempt to be good:
it is the reference point the other policies are measured against.

The source of randomness is injectable:
- RandomScheduler()                      → a fresh, independently seeded
                                           random.Random per schedule() call
- RandomScheduler(rng=random.Random(7))  → reproducible, for tests and
                                           benchmarks
"""

import logging
import random
from typing import Optional, Sequence

from models.enums import SchedulingPolicy
from models.job import Job, Schedule
from scheduler.base import AbstractScheduler
from scheduler.cost import weighted_completion_cost

logger = logging.getLogger(__name__)


class RandomScheduler(AbstractScheduler):

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def schedule(self, jobs: Sequence[Job]) -> Schedule:
        self._check_not_empty(jobs)

        rng = self._rng if self._rng is not None else random.Random()
        shuffled = list(jobs)  # local copy, the caller's sequence is untouched
        rng.shuffle(shuffled)
        cost = weighted_completion_cost(shuffled)

        logger.debug(f"Random ordered {len(shuffled)} jobs, cost={cost}")
        return Schedule(jobs=tuple(shuffled), cost=cost, policy=self.policy_name)

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.RANDOM
