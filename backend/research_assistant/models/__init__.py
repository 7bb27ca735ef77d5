# backend/research_assistant/models/__init__.py
from ..database import Base
from .project import Project, ProjectStatus
from .source import Source, SourceType
from .note import Note, NoteType
from .job import Job, JobType, JobStatus

__all__ = [
    "Base",
    "Project",
    "ProjectStatus",
    "Source",
    "SourceType",
    "Note",
    "NoteType",
    "Job",
    "JobType",
    "JobStatus"
]
