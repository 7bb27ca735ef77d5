# backend/research_assistant/api/sources.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.source import SourceSave, SourceResponse
from ..services.auth import ActionContext
from ..services.sources import source_service
from ..utils.logging import api_logger
from .dependencies import get_action_context

router = APIRouter(prefix="/api/sources", tags=["sources"])


@router.post("", response_model=SourceResponse)
async def save_source(
        source: SourceSave,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    """Create a source, or replace an existing one when `id` is given"""
    api_logger.info("Saving source", extra={
        "source_id": source.id,
        "project_id": source.project_id
    })
    return {"source": source_service.save_source(db, context, source)}


@router.delete("/{source_id}", response_model=SourceResponse)
async def delete_source(
        source_id: int,
        project_id: int = Query(...),
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Deleting source", extra={"source_id": source_id, "project_id": project_id})
    return {"source": source_service.delete_source(db, context, source_id, project_id)}
