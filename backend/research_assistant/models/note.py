# backend/research_assistant/models/note.py
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from ..database import Base
from ..utils.timestamps import utcnow


class NoteType(str, enum.Enum):
    SUMMARY = "summary"
    QUOTE = "quote"
    IDEA = "idea"
    QUESTION = "question"
    OUTLINE = "outline"
    OTHER = "other"


class Note(Base):
    __tablename__ = "research_notes"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("research_projects.id", ondelete="CASCADE"), nullable=False, index=True)
    source_id = Column(Integer, ForeignKey("research_sources.id", ondelete="SET NULL"), nullable=True)
    type = Column(
        Enum(NoteType, values_callable=lambda enum_cls: [m.value for m in enum_cls]),
        nullable=False,
        default=NoteType.SUMMARY
    )
    content = Column(Text, nullable=False)
    heading = Column(String(500), nullable=True)
    tags = Column(Text, nullable=True)
    location = Column(String(255), nullable=True)  # page/position for quotes
    ai_meta = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    project = relationship("Project", back_populates="notes")
    source = relationship("Source", back_populates="notes")
