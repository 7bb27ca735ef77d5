# backend/research_assistant/schemas/project.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import BaseSchema, TimestampMixin
from .source import Source
from .note import Note
from ..models.project import ProjectStatus

class ProjectBase(BaseSchema):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    topic: Optional[str] = Field(default=None, max_length=255)
    tags: Optional[str] = None

class ProjectCreate(ProjectBase):
    status: Optional[ProjectStatus] = None

class ProjectUpdate(BaseSchema):
    """Partial update: only fields present in the payload are applied"""
    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = None
    topic: Optional[str] = Field(default=None, max_length=255)
    tags: Optional[str] = None
    status: Optional[ProjectStatus] = None

    @field_validator("title", "status")
    @classmethod
    def not_null(cls, value):
        # Omit the field to leave it unchanged; null cannot clear a required column
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

class Project(ProjectBase, TimestampMixin):
    id: int
    owner_id: str
    status: ProjectStatus
    updated_at: datetime

class ProjectResponse(BaseSchema):
    project: Project

class ProjectListResponse(BaseSchema):
    projects: List[Project] = []

class ProjectDetail(BaseSchema):
    project: Project
    sources: List[Source] = []
    notes: List[Note] = []
