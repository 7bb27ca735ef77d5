# backend/research_assistant/api/jobs.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.job import JobStatus
from ..schemas.job import JobCreate, JobUpdate, JobResponse, JobListResponse
from ..services.auth import ActionContext
from ..services.jobs import job_service
from ..utils.logging import api_logger
from .dependencies import get_action_context

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
async def list_jobs(
        project_id: Optional[int] = Query(default=None),
        status: Optional[JobStatus] = Query(default=None),
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Listing jobs", extra={"project_id": project_id, "status": status})
    return {"jobs": job_service.list_jobs(db, context, project_id=project_id, status=status)}


@router.post("", response_model=JobResponse)
async def create_job(
        job: JobCreate,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Creating job", extra={"project_id": job.project_id, "job_type": job.job_type})
    return {"job": job_service.create_job(db, context, job)}


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
        job_id: int,
        job: JobUpdate,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Updating job", extra={"job_id": job_id})
    return {"job": job_service.update_job(db, context, job_id, job)}
