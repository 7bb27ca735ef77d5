# backend/research_assistant/api/__init__.py
from .projects import router as projects_router
from .sources import router as sources_router
from .notes import router as notes_router
from .jobs import router as jobs_router

__all__ = ["projects_router", "sources_router", "notes_router", "jobs_router"]
