# backend/research_assistant/schemas/__init__.py
from .project import Project, ProjectCreate, ProjectUpdate, ProjectResponse, ProjectListResponse, ProjectDetail
from .source import Source, SourceSave, SourceResponse
from .note import Note, NoteSave, NoteResponse
from .job import Job, JobCreate, JobUpdate, JobResponse, JobListResponse

__all__ = [
    "Project", "ProjectCreate", "ProjectUpdate", "ProjectResponse", "ProjectListResponse", "ProjectDetail",
    "Source", "SourceSave", "SourceResponse",
    "Note", "NoteSave", "NoteResponse",
    "Job", "JobCreate", "JobUpdate", "JobResponse", "JobListResponse"
]
