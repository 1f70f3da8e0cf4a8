"""
Job list generator — writes random instances in the name/p/d format.

Usage:
    python -m scripts.generate_jobs -n 20                    # print to stdout
    python -m scripts.generate_jobs -n 50 -o jobs.txt --seed 3
    python -m scripts.generate_jobs -n 50 --tightness 0.2    # mostly late jobs

Each job gets:
- a name J1, J2, ... (unique within one generator, even across calls)
- p drawn uniformly from p_range
- d = p + slack, where slack is drawn from [0, tightness * horizon] and
  horizon is the expected total processing time of the whole list

Small tightness → due dates cluster near the start → lots of lateness.
tightness >= 1  → most jobs can finish on time.
"""

import argparse
import random
import sys
from typing import Optional

from jobs.loader import format_job_list
from models.job import Job


class JobListGenerator:

    def __init__(self, seed: Optional[int] = None, start_id: int = 1):
        self.rnd = random.Random(seed)
        self.next_id = start_id

    def _new_name(self) -> str:
        name = f"J{self.next_id}"
        self.next_id += 1
        return name

    def generate(
        self,
        n_jobs: int,
        p_range: tuple[int, int] = (1, 10),
        tightness: float = 0.5,
    ) -> list[Job]:
        if n_jobs < 1:
            raise ValueError(f"n_jobs must be at least 1, got {n_jobs}")
        low, high = p_range
        if low < 1 or high < low:
            raise ValueError(f"p_range must satisfy 1 <= low <= high, got {p_range}")
        if tightness < 0:
            raise ValueError(f"tightness must be non-negative, got {tightness}")

        horizon = n_jobs * (low + high) / 2
        max_slack = int(round(tightness * horizon))

        jobs = []
        for _ in range(n_jobs):
            p = self.rnd.randint(low, high)
            d = p + self.rnd.randint(0, max_slack)
            jobs.append(Job(self._new_name(), p, d))
        return jobs


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a random job list")
    parser.add_argument("-n", "--num-jobs", type=int, default=10, help="Number of jobs (default: 10)")
    parser.add_argument("--p-min", type=int, default=1, help="Smallest processing time (default: 1)")
    parser.add_argument("--p-max", type=int, default=10, help="Largest processing time (default: 10)")
    parser.add_argument("--tightness", type=float, default=0.5, help="Due date spread (default: 0.5)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-o", "--output", type=str, default=None, help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    generator = JobListGenerator(seed=args.seed)
    jobs = generator.generate(args.num_jobs, (args.p_min, args.p_max), args.tightness)
    text = format_job_list(jobs)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote {len(jobs)} jobs to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
