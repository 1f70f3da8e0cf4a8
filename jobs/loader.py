"""
Job list loader — reads jobs from the plain-text `name/p/d` format.

A job list is a sequence of whitespace-separated records. Each record has
exactly three fields separated by "/" (configurable):

    A/3/5 B/2/3
    C/4/10

    → Job("A", 3, 5), Job("B", 2, 3), Job("C", 4, 10)

Line breaks are just whitespace, so one record per line and everything on
one line are both fine.

Anything wrong with the input is fatal. The loader raises before any
scheduler runs. It never skips a bad record or guesses a value:
- FileNotFoundError  → the file doesn't exist
- JobListError       → the file can't be decoded, or a record is malformed
"""

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Union

from config.settings import settings
from models.job import Job

logger = logging.getLogger(__name__)


# plain ASCII digits only: int() would also take "1_0" or non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")


class JobListError(ValueError):
    """Raised when a job list can't be read or a record can't be parsed."""


def _parse_record(token: str, position: int, separator: str) -> Job:
    fields = token.split(separator)
    if len(fields) != 3:
        raise JobListError(
            f"Record {position} ({token!r}): expected 3 fields "
            f"separated by {separator!r}, got {len(fields)}"
        )

    name, raw_p, raw_d = fields
    if not name:
        raise JobListError(f"Record {position} ({token!r}): job name is empty")

    for label, raw in (("processing time", raw_p), ("due date", raw_d)):
        if not _INTEGER.fullmatch(raw):
            raise JobListError(
                f"Record {position} ({token!r}): {label} {raw!r} is not a decimal integer"
            )

    return Job(name=name, p=int(raw_p), d=int(raw_d))


def parse_job_list(text: str, separator: str = settings.JOB_FIELD_SEPARATOR) -> list[Job]:
    """Parse job records from text, preserving their order."""
    return [
        _parse_record(token, position, separator)
        for position, token in enumerate(text.split(), start=1)
    ]


def read_job_list(
    path: Union[str, Path], separator: str = settings.JOB_FIELD_SEPARATOR
) -> list[Job]:
    """Read and parse a job list file."""
    path = Path(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise JobListError(f"Couldn't read {path}: {e}") from e

    jobs = parse_job_list(content, separator)
    logger.info(f"Read {len(jobs)} jobs from {path}")
    return jobs


def format_job_list(jobs: Iterable[Job], separator: str = settings.JOB_FIELD_SEPARATOR) -> str:
    """Render jobs back into the text format, one record per line."""
    return "".join(f"{job.name}{separator}{job.p}{separator}{job.d}\n" for job in jobs)
