"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("edf", not "SchedulingPolicy.EDF")
- They work as FastAPI request fields and argparse values
- Typos in code become immediate errors instead of silent bugs

User-supplied policy names are the one place where a typo is tolerated:
anything unrecognized is routed to the random baseline (see from_name).
"""

import enum
import logging

logger = logging.getLogger(__name__)


class SchedulingPolicy(str, enum.Enum):
    EDF = "edf"        # Earliest Due Date: sort by d, cost = max slack
    WSRT = "wsrt"      # Weighted shortest ratio: sort by d // p, cost = sum(d * C)
    LAWLER = "lawler"  # Lawler-style greedy: sqrt lateness penalty, cost = max penalty
    RANDOM = "random"  # Uniform random permutation: baseline, cost = sum(d * C)

    @classmethod
    def from_name(cls, name: str) -> "SchedulingPolicy":
        """
        Resolve a user-supplied policy name.

        Matching is case-insensitive and ignores surrounding whitespace, so
        "EDF" and " edf " both mean EDF rather than falling through to the
        random baseline as an exact-match lookup would. Any other name falls
        back to RANDOM, so `python -m runner.main whatever jobs.txt` still
        produces a schedule.
        """
        key = (name or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            logger.warning(f"Unknown scheduling policy '{name}', falling back to random")
            return cls.RANDOM

    @property
    def objective(self) -> str:
        """Human-readable description of the cost this policy reports."""
        return _OBJECTIVES[self]


_OBJECTIVES = {
    SchedulingPolicy.EDF: "maximum slack: max(-(C_j - d_j))",
    SchedulingPolicy.WSRT: "weighted completion: sum(d_j * C_j)",
    SchedulingPolicy.LAWLER: "maximum penalty: max(sqrt(T - d_j / 2))",
    SchedulingPolicy.RANDOM: "weighted completion: sum(d_j * C_j)",
}
