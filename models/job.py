"""
Job and Schedule value objects.

Key design decisions:
- Both are frozen dataclasses: a scheduler may reorder jobs, but it can
  never change a job's name, processing time, or due date in place
- Equality is structural (name, p, d), which is what dataclass gives us
- Schedule stores a tuple, not a list, so the order it reports is the order
  it was built with, and nobody downstream can shuffle it afterwards
- cost is a float whose meaning depends on the policy that produced it;
  an EDF cost and a WSRT cost are NOT comparable numbers
"""

from dataclasses import dataclass

from models.enums import SchedulingPolicy


@dataclass(frozen=True)
class Job:
    """
    One schedulable unit of work on a single machine.

    name is treated as the job's identifier, but it is not required to be
    unique: schedulers select by position, never by looking a name up.
    """
    name: str
    p: int  # processing time
    d: int  # due date (may be zero or negative)

    def __str__(self) -> str:
        return f"{self.name}/{self.p}/{self.d}"


@dataclass(frozen=True)
class Schedule:
    """The ordered result of one scheduler run. Write-once."""
    jobs: tuple[Job, ...]
    cost: float
    policy: SchedulingPolicy

    @property
    def job_names(self) -> list[str]:
        return [job.name for job in self.jobs]

    @property
    def order(self) -> str:
        """Job names joined by commas, in schedule order."""
        return ",".join(self.job_names)

    def __len__(self) -> int:
        return len(self.jobs)
