"""
Abstract base class for all scheduling policies (Strategy pattern).

The Strategy pattern lets you swap algorithms at runtime without changing
the code that uses them. The runner, the API and the benchmark only know
about AbstractScheduler: they call schedule() without caring whether it's
EDF, WSRT, Lawler or the random baseline.

To add a new scheduling policy:
1. Create a new class that inherits AbstractScheduler
2. Implement schedule() and policy_name
3. Register it in scheduler/registry.py

That's it. No other code needs to change.

Every policy is offline and one-shot: it receives the whole job list up
front, works on its own local copy, and returns a finished Schedule.
Nothing is shared between runs.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import Job, Schedule


class AbstractScheduler(ABC):
    """
    Interface that all scheduling policies implement.

    The entire contract:
    - schedule: order a collection of jobs and report the order's cost
    - policy_name: which SchedulingPolicy this is
    """

    @abstractmethod
    def schedule(self, jobs: Sequence[Job]) -> Schedule:
        """
        Order `jobs` under this policy and compute the policy's own cost.

        The input sequence is never modified. The returned Schedule holds a
        permutation of the input jobs.

        Raises:
            ValueError: if `jobs` is empty, or violates a policy-specific
                        precondition (see each policy's docstring).
        """
        ...

    @property
    @abstractmethod
    def policy_name(self) -> SchedulingPolicy:
        """The policy this scheduler implements."""
        ...

    def _check_not_empty(self, jobs: Sequence[Job]) -> None:
        if not jobs:
            raise ValueError(f"{self.policy_name.value} scheduler requires at least one job")

    def _check_positive_processing_times(self, jobs: Sequence[Job]) -> None:
        for position, job in enumerate(jobs, start=1):
            if job.p <= 0:
                raise ValueError(
                    f"{self.policy_name.value} scheduler requires p > 0, "
                    f"got job {job.name!r} (position {position}) with p={job.p}"
                )
