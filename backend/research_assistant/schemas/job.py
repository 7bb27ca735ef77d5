# backend/research_assistant/schemas/job.py
from typing import Any, List, Optional

from pydantic import field_validator

from .base import BaseSchema, TimestampMixin
from ..models.job import JobStatus, JobType

class JobCreate(BaseSchema):
    project_id: Optional[int] = None
    job_type: Optional[JobType] = None
    input: Optional[Any] = None
    output: Optional[Any] = None
    status: Optional[JobStatus] = None

class JobUpdate(BaseSchema):
    """Only `output` and `status` are mutable; unset fields are left alone"""
    output: Optional[Any] = None
    status: Optional[JobStatus] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value):
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

class Job(BaseSchema, TimestampMixin):
    id: int
    project_id: Optional[int] = None
    job_type: JobType
    input: Optional[Any] = None
    output: Optional[Any] = None
    status: JobStatus

class JobResponse(BaseSchema):
    job: Job

class JobListResponse(BaseSchema):
    jobs: List[Job] = []
