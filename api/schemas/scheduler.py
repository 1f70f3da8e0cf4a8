"""
Pydantic schemas for the /scheduler endpoints.

ScheduleRequest: jobs + policy name (request body for POST /scheduler/schedule)
CompareRequest: jobs only (request body for POST /scheduler/compare)
ScheduleResponse: the ordered jobs and the policy's cost
PolicyInfo: one entry of GET /scheduler/policies
"""

from typing import Optional

from pydantic import BaseModel, Field

from api.schemas.job import JobIn, JobOut
from config.settings import settings


class ScheduleRequest(BaseModel):
    """Request body for POST /scheduler/schedule."""

    # A plain string, not SchedulingPolicy: unknown names fall back to random
    policy: str = Field(default=settings.DEFAULT_SCHEDULING_POLICY, examples=["edf"])
    jobs: list[JobIn] = Field(..., min_length=1, max_length=settings.MAX_JOBS_PER_REQUEST)
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the random policy; ignored by the others",
    )


class CompareRequest(BaseModel):
    """Request body for POST /scheduler/compare."""

    jobs: list[JobIn] = Field(..., min_length=1, max_length=settings.MAX_JOBS_PER_REQUEST)
    seed: Optional[int] = None


class ScheduleResponse(BaseModel):
    """One computed schedule."""

    policy: str
    order: str           # job names, comma-joined, in schedule order
    jobs: list[JobOut]
    cost: float          # meaning depends on policy, never compare across policies


class PolicyInfo(BaseModel):
    """Response entry for GET /scheduler/policies."""

    name: str
    objective: str
