"""
Pydantic schemas for jobs as they travel over HTTP.

These are NOT the domain models: models/job.py holds the frozen Job the
schedulers work with. These define the API contract:
- JobIn: one job in a request body
- JobOut: one job in a response body

Field constraints here are about well-formed input only (a name must not be
empty, p and d must be integers). Policy-specific rules such as "Lawler
needs p > 0" are enforced by the schedulers themselves.
"""

from pydantic import BaseModel, Field

from models.job import Job


class JobIn(BaseModel):
    """A job submitted for scheduling."""

    name: str = Field(
        ...,  # ... means required, no default
        min_length=1,
        max_length=255,
        examples=["A"],
    )
    p: int = Field(..., description="Processing time", examples=[3])
    d: int = Field(..., description="Due date (may be zero or negative)", examples=[5])

    def to_job(self) -> Job:
        return Job(name=self.name, p=self.p, d=self.d)


class JobOut(BaseModel):
    """A job as it appears in a computed schedule."""

    name: str
    p: int
    d: int

    # from_attributes=True lets Pydantic read the frozen dataclass directly
    model_config = {"from_attributes": True}
