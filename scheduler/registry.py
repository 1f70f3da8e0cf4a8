"""
Scheduler factory — maps policies to scheduler classes.

This is the Factory pattern: instead of matching on strings in the CLI,
the API and the benchmark, there's ONE place that knows how to create
schedulers. Callers turn user input into a SchedulingPolicy first
(SchedulingPolicy.from_name), then ask this registry for the strategy.

Adding a new scheduling policy: create the class, add one line here.
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.edf import EDFScheduler
from scheduler.lawler import LawlerScheduler
from scheduler.random_order import RandomScheduler
from scheduler.wsrt import WSRTScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.EDF: EDFScheduler,
    SchedulingPolicy.WSRT: WSRTScheduler,
    SchedulingPolicy.LAWLER: LawlerScheduler,
    SchedulingPolicy.RANDOM: RandomScheduler,
}


def create_scheduler(policy: SchedulingPolicy, **kwargs) -> AbstractScheduler:
    """
    Create a scheduler instance for the given policy.

    The random baseline accepts an injectable source of randomness:
        create_scheduler(SchedulingPolicy.RANDOM, rng=random.Random(42))

    The deterministic policies take no kwargs; an rng passed to them is ignored
    so callers can pass the same arguments for every policy.
    """
    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown scheduling policy: {policy}")

    if policy == SchedulingPolicy.RANDOM:
        return cls(**kwargs)
    kwargs.pop("rng", None)
    return cls(**kwargs)


def available_policies() -> list[SchedulingPolicy]:
    """All registered policies, in declaration order."""
    return list(_REGISTRY)
