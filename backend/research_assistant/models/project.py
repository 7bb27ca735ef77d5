# backend/research_assistant/models/project.py
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from ..utils.timestamps import utcnow


class ProjectStatus(str, enum.Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class Project(Base):
    """High-level research project, e.g. "World War II essay"."""
    __tablename__ = "research_projects"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Users.id of the identity provider
    owner_id = Column(String(255), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    topic = Column(String(255), nullable=True)
    tags = Column(Text, nullable=True)  # comma/space separated
    status = Column(
        Enum(ProjectStatus, values_callable=lambda enum_cls: [m.value for m in enum_cls]),
        nullable=False,
        default=ProjectStatus.ACTIVE
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    sources = relationship("Source", back_populates="project", cascade="all, delete-orphan")
    notes = relationship("Note", back_populates="project", cascade="all, delete-orphan")
    jobs = relationship("Job", back_populates="project")
