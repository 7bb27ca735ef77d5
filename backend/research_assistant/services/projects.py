# backend/research_assistant/services/projects.py
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from ..errors import ActionError, not_found
from ..models import Note, Project, ProjectStatus, Source
from ..schemas.note import Note as NoteSchema
from ..schemas.project import Project as ProjectSchema, ProjectCreate, ProjectDetail, ProjectUpdate
from ..schemas.source import Source as SourceSchema
from ..utils.logging import service_logger
from ..utils.timestamps import utcnow
from .auth import ActionContext, require_user
from .policy import get_owned_project


class ProjectService:
    """Owner-scoped project actions"""

    @staticmethod
    def create_project(db: Session, context: ActionContext, data: ProjectCreate) -> ProjectSchema:
        user = require_user(context)
        service_logger.info("Creating project", extra={"owner_id": user.id})

        try:
            now = utcnow()
            project = Project(
                owner_id=user.id,
                title=data.title,
                description=data.description,
                topic=data.topic,
                tags=data.tags,
                status=data.status or ProjectStatus.ACTIVE,
                created_at=now,
                updated_at=now
            )
            db.add(project)
            db.commit()
            db.refresh(project)
        except Exception as e:
            service_logger.error("Failed to create project", extra={
                "owner_id": user.id,
                "error": str(e)
            })
            db.rollback()
            raise

        service_logger.info("Project created", extra={"project_id": project.id, "owner_id": user.id})
        return ProjectSchema.model_validate(project)

    @staticmethod
    def update_project(db: Session, context: ActionContext, project_id: int, data: ProjectUpdate) -> ProjectSchema:
        """Apply only the fields present in `data`; an empty payload is a no-op"""
        user = require_user(context)
        changes = data.model_dump(exclude_unset=True)
        service_logger.info("Updating project", extra={
            "project_id": project_id,
            "fields": sorted(changes)
        })

        if not changes:
            project = get_owned_project(db, user, project_id)
            return ProjectSchema.model_validate(project)

        try:
            stmt = (
                update(Project)
                .where(Project.id == project_id, Project.owner_id == user.id)
                .values(**changes, updated_at=utcnow())
                .returning(Project)
                .execution_options(synchronize_session="fetch", populate_existing=True)
            )
            project = db.execute(stmt).scalar_one_or_none()
            if project is None:
                raise not_found("Project")
            result = ProjectSchema.model_validate(project)
            db.commit()
        except ActionError:
            service_logger.warning("Project not found for update", extra={"project_id": project_id})
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to update project", extra={
                "project_id": project_id,
                "error": str(e)
            })
            db.rollback()
            raise

        return result

    @staticmethod
    def archive_project(db: Session, context: ActionContext, project_id: int) -> ProjectSchema:
        user = require_user(context)
        service_logger.info("Archiving project", extra={"project_id": project_id})

        try:
            stmt = (
                update(Project)
                .where(Project.id == project_id, Project.owner_id == user.id)
                .values(status=ProjectStatus.ARCHIVED, updated_at=utcnow())
                .returning(Project)
                .execution_options(synchronize_session="fetch", populate_existing=True)
            )
            project = db.execute(stmt).scalar_one_or_none()
            if project is None:
                raise not_found("Project")
            result = ProjectSchema.model_validate(project)
            db.commit()
        except ActionError:
            service_logger.warning("Project not found for archive", extra={"project_id": project_id})
            db.rollback()
            raise
        except Exception as e:
            service_logger.error("Failed to archive project", extra={
                "project_id": project_id,
                "error": str(e)
            })
            db.rollback()
            raise

        return result

    @staticmethod
    def list_projects(db: Session, context: ActionContext, include_archived: Optional[bool] = False) -> list[ProjectSchema]:
        user = require_user(context)

        stmt = select(Project).where(Project.owner_id == user.id)
        if not include_archived:
            stmt = stmt.where(Project.status == ProjectStatus.ACTIVE)
        projects = db.execute(stmt).scalars().all()

        service_logger.info(f"Found {len(projects)} projects", extra={
            "owner_id": user.id,
            "include_archived": bool(include_archived)
        })
        return [ProjectSchema.model_validate(p) for p in projects]

    @staticmethod
    def get_project_with_details(db: Session, context: ActionContext, project_id: int) -> ProjectDetail:
        user = require_user(context)

        try:
            project = get_owned_project(db, user, project_id)
        except ActionError:
            service_logger.warning("Project not found", extra={"project_id": project_id})
            raise

        sources = db.execute(select(Source).where(Source.project_id == project_id)).scalars().all()
        notes = db.execute(select(Note).where(Note.project_id == project_id)).scalars().all()

        service_logger.info("Project retrieved", extra={
            "project_id": project_id,
            "source_count": len(sources),
            "note_count": len(notes)
        })
        return ProjectDetail(
            project=ProjectSchema.model_validate(project),
            sources=[SourceSchema.model_validate(s) for s in sources],
            notes=[NoteSchema.model_validate(n) for n in notes]
        )


project_service = ProjectService()
