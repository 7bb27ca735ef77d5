# backend/research_assistant/api/projects.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse, ProjectListResponse, ProjectDetail
from ..services.auth import ActionContext
from ..services.projects import project_service
from ..utils.logging import api_logger
from .dependencies import get_action_context

router = APIRouter(prefix="/api/projects", tags=["projects"])

@router.get("", response_model=ProjectListResponse)
async def list_projects(
        include_archived: bool = Query(default=False),
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    """List the caller's projects, archived ones only when asked for"""
    api_logger.info("Listing projects", extra={
        "endpoint": "/api/projects",
        "method": "GET",
        "include_archived": include_archived
    })
    projects = project_service.list_projects(db, context, include_archived=include_archived)
    return {"projects": projects}

@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project_with_details(
        project_id: int,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Fetching project", extra={"project_id": project_id})
    return project_service.get_project_with_details(db, context, project_id)

@router.post("", response_model=ProjectResponse)
async def create_project(
        project: ProjectCreate,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Creating new project", extra={"project_title": project.title})
    return {"project": project_service.create_project(db, context, project)}

@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
        project_id: int,
        project: ProjectUpdate,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Updating project", extra={"project_id": project_id})
    return {"project": project_service.update_project(db, context, project_id, project)}

@router.post("/{project_id}/archive", response_model=ProjectResponse)
async def archive_project(
        project_id: int,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Archiving project", extra={"project_id": project_id})
    return {"project": project_service.archive_project(db, context, project_id)}
