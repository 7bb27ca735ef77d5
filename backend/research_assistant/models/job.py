# backend/research_assistant/models/job.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from ..database import Base
from ..utils.timestamps import utcnow


class JobType(str, enum.Enum):
    SUMMARY = "summary"
    OUTLINE = "outline"
    CITATION = "citation"
    OTHER = "other"


class JobStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Job(Base):
    """History record of an AI summary/outline/citation generation."""
    __tablename__ = "ai_jobs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("research_projects.id", ondelete="SET NULL"), nullable=True, index=True)
    # Caller that created the job; authorizes writes to project-less jobs
    created_by = Column(String(255), nullable=False)
    job_type = Column(
        Enum(JobType, values_callable=lambda enum_cls: [m.value for m in enum_cls]),
        nullable=False,
        default=JobType.SUMMARY
    )
    input = Column(JSON, nullable=True)
    output = Column(JSON, nullable=True)
    status = Column(
        Enum(JobStatus, values_callable=lambda enum_cls: [m.value for m in enum_cls]),
        nullable=False,
        default=JobStatus.PENDING
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    project = relationship("Project", back_populates="jobs")
