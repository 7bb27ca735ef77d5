# backend/research_assistant/schemas/note.py
from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from .base import BaseSchema, TimestampMixin
from ..models.note import NoteType

class NoteBase(BaseSchema):
    source_id: Optional[int] = None
    content: str = Field(..., min_length=1)
    heading: Optional[str] = Field(default=None, max_length=500)
    tags: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=255)
    ai_meta: Optional[Any] = None

class NoteSave(NoteBase):
    id: Optional[int] = None
    project_id: int
    type: Optional[NoteType] = None

class Note(NoteBase, TimestampMixin):
    id: int
    project_id: int
    type: NoteType
    updated_at: datetime

class NoteResponse(BaseSchema):
    note: Note
