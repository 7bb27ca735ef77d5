# backend/research_assistant/api/notes.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.note import NoteSave, NoteResponse
from ..services.auth import ActionContext
from ..services.notes import note_service
from ..utils.logging import api_logger
from .dependencies import get_action_context

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.post("", response_model=NoteResponse)
async def save_note(
        note: NoteSave,
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    """Create a note, or replace an existing one when `id` is given"""
    api_logger.info("Saving note", extra={
        "note_id": note.id,
        "project_id": note.project_id,
        "source_id": note.source_id
    })
    return {"note": note_service.save_note(db, context, note)}


@router.delete("/{note_id}", response_model=NoteResponse)
async def delete_note(
        note_id: int,
        project_id: int = Query(...),
        db: Session = Depends(get_db),
        context: ActionContext = Depends(get_action_context)
):
    api_logger.info("Deleting note", extra={"note_id": note_id, "project_id": project_id})
    return {"note": note_service.delete_note(db, context, note_id, project_id)}
