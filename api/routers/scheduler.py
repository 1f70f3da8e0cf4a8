"""
Scheduling endpoints.

GET  /scheduler/policies → List the available policies and their objectives
POST /scheduler/schedule → Order a job list under one policy
POST /scheduler/compare  → Order the same job list under every policy

Every request is independent: the jobs come in with the request, the
schedule goes out with the response, nothing is stored in between.

The schedulers are CPU-bound (Lawler is O(n²)), so /schedule and /compare
are plain `def` endpoints: FastAPI runs them in its threadpool and the event
loop stays free to answer other requests, /health included.

Errors:
- Malformed bodies (missing fields, non-integer p/d, empty job list)
  → 422 from Pydantic validation, before our code runs
- Jobs that break a policy's preconditions (e.g. p = 0 for Lawler)
  → 422 with the scheduler's message
"""

import logging
import random

from fastapi import APIRouter, HTTPException

from api.schemas.job import JobOut
from api.schemas.scheduler import (
    CompareRequest,
    PolicyInfo,
    ScheduleRequest,
    ScheduleResponse,
)
from models.enums import SchedulingPolicy
from models.job import Schedule
from scheduler.registry import available_policies, create_scheduler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _to_response(schedule: Schedule) -> ScheduleResponse:
    return ScheduleResponse(
        policy=schedule.policy.value,
        order=schedule.order,
        jobs=[JobOut.model_validate(job) for job in schedule.jobs],
        cost=schedule.cost,
    )


def _run(policy: SchedulingPolicy, jobs, seed) -> Schedule:
    rng = random.Random(seed) if seed is not None else None
    try:
        return create_scheduler(policy, rng=rng).schedule([j.to_job() for j in jobs])
    except ValueError as e:
        logger.warning(f"Rejected {policy.value} request: {e}")
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/policies", response_model=list[PolicyInfo])
async def list_policies() -> list[PolicyInfo]:
    """All scheduling policies, with the cost each one reports."""
    return [PolicyInfo(name=p.value, objective=p.objective) for p in available_policies()]


@router.post("/schedule", response_model=ScheduleResponse)
def schedule_jobs(request: ScheduleRequest) -> ScheduleResponse:
    """
    Order the submitted jobs under the requested policy.

    The policy name is resolved the same way as on the command line:
    unknown names fall back to the random baseline.
    """
    policy = SchedulingPolicy.from_name(request.policy)
    schedule = _run(policy, request.jobs, request.seed)
    logger.info(f"Scheduled {len(schedule)} jobs with policy: {policy.value}")
    return _to_response(schedule)


@router.post("/compare", response_model=list[ScheduleResponse])
def compare_policies(request: CompareRequest) -> list[ScheduleResponse]:
    """
    Order the submitted jobs under every policy.

    Results come back in policy declaration order, not ranked: each cost is
    measured by its own policy's objective.
    """
    return [_to_response(_run(p, request.jobs, request.seed)) for p in available_policies()]
