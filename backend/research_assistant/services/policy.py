# backend/research_assistant/services/policy.py
"""
Ownership rules shared by the action services.

Sources and notes have no owner column: a caller may touch them only through
a project they own. Jobs optionally belong to a project, so their access is
decided here explicitly:

* modify: a project-linked job needs the caller to own the project; a
  project-less job may only be changed by the caller that created it.
* list: only project-linked jobs under the caller's projects are listed;
  project-less jobs never show up in listings.

Each rule exists as a plain predicate (for records already loaded) and as a
SQL clause so that writes can carry the rule inside the statement itself.
"""
from typing import Collection, Optional

from sqlalchemy import and_, or_, select
from sqlalchemy.orm import Session

from ..errors import not_found
from ..models import Job, Project
from .auth import CurrentUser


def owned_project_ids(user: CurrentUser):
    """Subquery selecting ids of the caller's projects"""
    return select(Project.id).where(Project.owner_id == user.id)


def get_owned_project(db: Session, user: CurrentUser, project_id: int, lock: bool = False) -> Project:
    """Load a project owned by the caller or raise NOT_FOUND.

    With `lock=True` the row is selected FOR UPDATE so a dependent insert in
    the same transaction cannot race with changes to the parent.
    """
    stmt = select(Project).where(Project.id == project_id, Project.owner_id == user.id)
    if lock:
        stmt = stmt.with_for_update()
    project = db.execute(stmt.limit(1)).scalar_one_or_none()
    if project is None:
        raise not_found("Project")
    return project


def is_project_owned(db: Session, user: CurrentUser, project_id: Optional[int]) -> bool:
    if project_id is None:
        return False
    stmt = select(Project.id).where(Project.id == project_id, Project.owner_id == user.id)
    return db.execute(stmt.limit(1)).scalar_one_or_none() is not None


def can_modify_job(job: Job, user: CurrentUser, owned_ids: Collection[int]) -> bool:
    if job.project_id is not None:
        return job.project_id in owned_ids
    return job.created_by == user.id


def modifiable_jobs_clause(user: CurrentUser):
    return or_(
        Job.project_id.in_(owned_project_ids(user)),
        and_(Job.project_id.is_(None), Job.created_by == user.id),
    )


def listable_jobs_clause(owned_ids: Collection[int]):
    # NULL project_id never matches IN, so project-less jobs drop out here
    return Job.project_id.in_(list(owned_ids))
