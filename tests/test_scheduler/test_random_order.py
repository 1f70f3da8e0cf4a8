"""
Tests for the random baseline scheduler.

The shuffle itself is random, so these tests either inject a seeded
random.Random or only check properties that hold for every permutation.
"""

import random

import pytest

from conftest import make_jobs
from models.enums import SchedulingPolicy
from scheduler.cost import weighted_completion_cost
from scheduler.random_order import RandomScheduler


def _jobs():
    return make_jobs(("A", 3, 5), ("B", 2, 3), ("C", 4, 10), ("D", 1, 7), ("E", 6, 2))


def test_output_is_a_permutation_of_input():
    jobs = _jobs()
    schedule = RandomScheduler().schedule(jobs)
    assert len(schedule) == len(jobs)
    assert sorted(schedule.jobs, key=str) == sorted(jobs, key=str)


def test_cost_matches_weighted_completion_of_produced_order():
    schedule = RandomScheduler().schedule(_jobs())
    assert schedule.cost == weighted_completion_cost(schedule.jobs)


def test_injected_rng_makes_order_reproducible():
    first = RandomScheduler(rng=random.Random(42)).schedule(_jobs())
    second = RandomScheduler(rng=random.Random(42)).schedule(_jobs())
    assert first.jobs == second.jobs
    assert first.cost == second.cost


def test_uses_the_injected_rng():
    """The scheduler's permutation is exactly what the injected source produces."""
    jobs = _jobs()
    expected = list(jobs)
    random.Random(7).shuffle(expected)

    schedule = RandomScheduler(rng=random.Random(7)).schedule(jobs)
    assert list(schedule.jobs) == expected


def test_does_not_modify_input():
    jobs = _jobs()
    original = list(jobs)
    RandomScheduler(rng=random.Random(1)).schedule(jobs)
    assert jobs == original


def test_single_job():
    schedule = RandomScheduler().schedule(make_jobs(("A", 2, 3)))
    assert schedule.job_names == ["A"]
    assert schedule.cost == 6.0


def test_empty_job_list_is_rejected():
    with pytest.raises(ValueError):
        RandomScheduler().schedule([])


def test_policy_name():
    assert RandomScheduler().policy_name == SchedulingPolicy.RANDOM
