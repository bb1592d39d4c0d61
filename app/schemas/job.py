"""
Job Schemas
Pydantic models for job API requests and responses.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models.job import JobStatus, JobType, parse_timestamp


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class JobCreate(CamelModel):
    """Schema for posting a new job."""
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str
    city: str
    price: int
    type: JobType
    is_high_priority: bool
    posted_at: str
    posted_by: str
    status: JobStatus = JobStatus.OPEN

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    @field_validator("posted_at")
    @classmethod
    def posted_at_is_iso(cls, v: str) -> str:
        """Check the timestamp parses; the original string is kept as-is."""
        try:
            parse_timestamp(v)
        except ValueError:
            raise ValueError("postedAt must be an ISO-8601 timestamp")
        return v

    @field_validator("status")
    @classmethod
    def status_starts_open(cls, v: JobStatus) -> JobStatus:
        if v is not JobStatus.OPEN:
            raise ValueError("new jobs must have status 'open'")
        return v

    @property
    def posted_at_utc(self) -> datetime:
        """`posted_at` as a naive UTC datetime, for ordering."""
        return parse_timestamp(self.posted_at)


class JobStatusUpdate(BaseModel):
    """Schema for changing a job's status."""
    status: JobStatus


class JobResponse(CamelModel):
    """Schema for job response."""
    id: str
    title: str
    description: str
    city: str
    price: int
    type: str
    is_high_priority: bool
    posted_at: str
    posted_by: str
    status: str


class OperationResult(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str


class MetaResponse(CamelModel):
    """Reference data the client uses to build its forms and filters."""
    cities: List[str]
    job_types: List[str]
    statuses: List[str]
    poll_interval_seconds: int
