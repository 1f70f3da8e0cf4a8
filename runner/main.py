"""
Command-line entry point — schedule one job list with one policy.

Usage:
    python -m runner.main edf jobs.txt
    python -m runner.main lawler jobs.txt --log-level DEBUG
    python -m runner.main random jobs.txt --seed 42
    python -m runner.main anything-else jobs.txt      # → random baseline

Flow:
    job file ──read_job_list──> [Job] ──scheduler.schedule──> Schedule ──> stdout

Exit status is 0 on success and 1 if the job list can't be read or parsed,
or if the jobs violate the chosen policy's preconditions. In the failure
case nothing is printed to stdout; the reason goes to the log.
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from config.settings import settings
from jobs.loader import JobListError, read_job_list
from models.enums import SchedulingPolicy
from runner.report import format_schedule
from scheduler.registry import create_scheduler

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Order a job list on a single machine and report the schedule's cost",
    )
    parser.add_argument(
        "policy", type=str,
        help="Scheduling policy: edf, wsrt, lawler or random (anything else means random)",
    )
    parser.add_argument(
        "job_file", type=str,
        help="Path to a whitespace-separated list of name/p/d records",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.RANDOM_SEED,
        help="Seed for the random policy (default: independently seeded per run)",
    )
    parser.add_argument(
        "--log-level", type=str, default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    policy = SchedulingPolicy.from_name(args.policy)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        jobs = read_job_list(args.job_file)
        schedule = create_scheduler(policy, rng=rng).schedule(jobs)
    except FileNotFoundError as e:
        logger.error(f"Couldn't open job list: {e}")
        return 1
    except JobListError as e:
        logger.error(f"Invalid job list: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Can't schedule with {policy.value}: {e}")
        return 1

    logger.info(f"Scheduled {len(schedule)} jobs with policy: {policy.value}")
    print(format_schedule(schedule))
    return 0


if __name__ == "__main__":
    sys.exit(main())
