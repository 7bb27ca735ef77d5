# backend/research_assistant/services/jobs.py
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from ..errors import ActionError, not_found
from ..models import Job, JobStatus, JobType, Project
from ..schemas.job import Job as JobSchema, JobCreate, JobUpdate
from ..utils.logging import service_logger
from ..utils.timestamps import utcnow
from .auth import ActionContext, CurrentUser, require_user
from .policy import can_modify_job, get_owned_project, listable_jobs_clause, modifiable_jobs_clause


def _owned_ids(db: Session, user: CurrentUser) -> set[int]:
    return set(db.execute(select(Project.id).where(Project.owner_id == user.id)).scalars().all())


def _load_modifiable_job(db: Session, user: CurrentUser, job_id: int) -> Job:
    job = db.execute(select(Job).where(Job.id == job_id).limit(1)).scalar_one_or_none()
    if job is None:
        raise not_found("Job")
    if not can_modify_job(job, user, _owned_ids(db, user)):
        raise not_found("Project") if job.project_id is not None else not_found("Job")
    return job


class JobService:
    """History of AI summary, outline and citation generation requests"""

    @staticmethod
    def create_job(db: Session, context: ActionContext, data: JobCreate) -> JobSchema:
        user = require_user(context)
        service_logger.info("Creating job", extra={
            "project_id": data.project_id,
            "job_type": data.job_type
        })

        try:
            if data.project_id is not None:
                get_owned_project(db, user, data.project_id, lock=True)
            job = Job(
                project_id=data.project_id,
                created_by=user.id,
                job_type=data.job_type or JobType.SUMMARY,
                input=data.input,
                output=data.output,
                status=data.status or JobStatus.PENDING,
                created_at=utcnow()
            )
            db.add(job)
            db.flush()
            db.refresh(job)
            result = JobSchema.model_validate(job)
            db.commit()
        except ActionError:
            service_logger.warning("Project not found for job", extra={"project_id": data.project_id})
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to create job", extra={
                "project_id": data.project_id,
                "error": str(e)
            })
            db.rollback()
            raise

        service_logger.info("Job created", extra={"job_id": result.id, "project_id": result.project_id})
        return result

    @staticmethod
    def update_job(db: Session, context: ActionContext, job_id: int, data: JobUpdate) -> JobSchema:
        """Change `output` and/or `status`; fields left out of `data` are untouched"""
        user = require_user(context)
        changes = data.model_dump(exclude_unset=True)
        service_logger.info("Updating job", extra={"job_id": job_id, "fields": sorted(changes)})

        try:
            if not changes:
                return JobSchema.model_validate(_load_modifiable_job(db, user, job_id))

            stmt = (
                update(Job)
                .where(Job.id == job_id, modifiable_jobs_clause(user))
                .values(**changes)
                .returning(Job)
                .execution_options(synchronize_session="fetch", populate_existing=True)
            )
            job = db.execute(stmt).scalar_one_or_none()
            if job is None:
                # Nothing matched: report the same error the read path would
                db.rollback()
                _load_modifiable_job(db, user, job_id)
                raise not_found("Job")
            result = JobSchema.model_validate(job)
            db.commit()
        except ActionError as e:
            service_logger.warning(e.message, extra={"job_id": job_id})
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to update job", extra={
                "job_id": job_id,
                "error": str(e)
            })
            db.rollback()
            raise

        return result

    @staticmethod
    def list_jobs(
            db: Session,
            context: ActionContext,
            project_id: Optional[int] = None,
            status: Optional[JobStatus] = None
    ) -> list[JobSchema]:
        user = require_user(context)
        owned_ids = _owned_ids(db, user)

        if project_id is not None and project_id not in owned_ids:
            service_logger.warning("Project not found for job listing", extra={"project_id": project_id})
            raise not_found("Project")

        stmt = select(Job).where(listable_jobs_clause(owned_ids))
        if project_id is not None:
            stmt = stmt.where(Job.project_id == project_id)
        if status is not None:
            stmt = stmt.where(Job.status == status)
        jobs = db.execute(stmt).scalars().all()

        service_logger.info(f"Found {len(jobs)} jobs", extra={
            "project_id": project_id,
            "status": status
        })
        return [JobSchema.model_validate(j) for j in jobs]


job_service = JobService()
