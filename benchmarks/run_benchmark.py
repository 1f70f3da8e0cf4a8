"""
CLI entry point for comparing scheduling policies.

Usage:
    python -m benchmarks.run_benchmark --job-file jobs.txt          # all policies
    python -m benchmarks.run_benchmark --job-file jobs.txt --policy lawler
    python -m benchmarks.run_benchmark --num-jobs 500 --seed 7      # generated jobs
    python -m benchmarks.run_benchmark --num-jobs 200 --json

Either --job-file or --num-jobs must be given. Generated job lists come
from scripts/generate_jobs.py, seeded with --seed when it is set.
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from benchmarks.comparison import PolicyComparison
from config.settings import settings
from jobs.loader import JobListError, read_job_list
from models.enums import SchedulingPolicy
from runner.report import format_comparison
from scripts.generate_jobs import JobListGenerator

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Single-machine scheduling policy comparison")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--job-file", type=str,
        help="Path to a name/p/d job list",
    )
    source.add_argument(
        "--num-jobs", type=int,
        help="Generate this many random jobs instead of reading a file",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=[p.value for p in SchedulingPolicy] + ["all"],
        help="Which policy to run (default: all)",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.RANDOM_SEED,
        help="Seed for job generation and the random policy",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print raw results as JSON instead of a table",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.job_file:
            jobs = read_job_list(args.job_file)
        else:
            jobs = JobListGenerator(seed=args.seed).generate(args.num_jobs)

        comparison = PolicyComparison(jobs, seed=args.seed)
        if args.policy == "all":
            results = comparison.run_all_policies()
        else:
            results = [comparison.run(SchedulingPolicy(args.policy))]
    except FileNotFoundError as e:
        logger.error(f"Couldn't open job list: {e}")
        return 1
    except (JobListError, ValueError) as e:
        logger.error(f"Comparison failed: {e}")
        return 1

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print(f"=== Scheduling policy comparison ({len(jobs)} jobs) ===\n")
        print(format_comparison(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
