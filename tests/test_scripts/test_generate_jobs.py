"""Tests for the random job list generator."""

import pytest

from jobs.loader import read_job_list
from scripts.generate_jobs import JobListGenerator, main


def test_generates_requested_number_of_jobs():
    jobs = JobListGenerator(seed=1).generate(25)
    assert len(jobs) == 25


def test_values_stay_in_range():
    jobs = JobListGenerator(seed=2).generate(50, p_range=(2, 6), tightness=0.3)
    for job in jobs:
        assert 2 <= job.p <= 6
        assert job.d >= job.p


def test_names_are_unique_across_calls():
    generator = JobListGenerator(seed=3)
    names = [j.name for j in generator.generate(5) + generator.generate(5)]
    assert names == [f"J{i}" for i in range(1, 11)]


def test_same_seed_same_jobs():
    assert JobListGenerator(seed=4).generate(10) == JobListGenerator(seed=4).generate(10)


@pytest.mark.parametrize("kwargs", [
    {"n_jobs": 0},
    {"n_jobs": 5, "p_range": (0, 3)},
    {"n_jobs": 5, "p_range": (5, 2)},
    {"n_jobs": 5, "tightness": -1.0},
])
def test_invalid_arguments(kwargs):
    with pytest.raises(ValueError):
        JobListGenerator(seed=5).generate(**kwargs)


def test_cli_writes_readable_file(tmp_path, capsys):
    path = tmp_path / "generated.txt"
    assert main(["-n", "12", "--seed", "6", "-o", str(path)]) == 0
    assert "Wrote 12 jobs" in capsys.readouterr().out
    assert len(read_job_list(path)) == 12
