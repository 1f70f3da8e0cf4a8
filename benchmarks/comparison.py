"""
Policy comparison — runs every scheduling policy on the same job list.

How it works:
1. Take one job list (read from a file or generated)
2. For each policy, hand the scheduler its own copy of the list
3. Record the resulting order, the policy's cost, and the wall-clock time

The cost column answers "how good is this order under THIS policy's
objective". It does not rank the policies against each other: EDF reports
a slack, Lawler a square-root penalty, WSRT and Random a weighted sum. Only
WSRT and Random share an objective, which is the point of the random
baseline.
"""

import logging
import random
import time
from typing import Optional, Sequence

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.registry import available_policies, create_scheduler

logger = logging.getLogger(__name__)


class PolicyComparison:

    def __init__(self, jobs: Sequence[Job], seed: Optional[int] = None):
        self.jobs = list(jobs)
        self.seed = seed

    def run(self, policy: SchedulingPolicy) -> dict:
        """Schedule the job list with a single policy."""
        rng = random.Random(self.seed) if self.seed is not None else None
        scheduler = create_scheduler(policy, rng=rng)

        start = time.perf_counter()
        schedule = scheduler.schedule(list(self.jobs))
        elapsed = time.perf_counter() - start

        return {
            "policy": policy.value,
            "num_jobs": len(schedule),
            "cost": schedule.cost,
            "order": schedule.order,
            "elapsed_ms": round(elapsed * 1000, 3),
        }

    def run_all_policies(self) -> list[dict]:
        """Run all registered policies in declaration order."""
        results = []
        for policy in available_policies():
            result = self.run(policy)
            logger.info(
                f"{policy.value}: cost={result['cost']} "
                f"({result['elapsed_ms']} ms for {result['num_jobs']} jobs)"
            )
            results.append(result)
        return results
