# backend/research_assistant/services/__init__.py
from .projects import project_service
from .sources import source_service
from .notes import note_service
from .jobs import job_service

__all__ = ["project_service", "source_service", "note_service", "job_service"]
