# backend/research_assistant/models/source.py
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from ..database import Base
from ..utils.timestamps import utcnow


class SourceType(str, enum.Enum):
    WEB = "web"
    PDF = "pdf"
    BOOK = "book"
    ARTICLE = "article"
    VIDEO = "video"
    OTHER = "other"


class Source(Base):
    __tablename__ = "research_sources"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("research_projects.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(
        Enum(SourceType, values_callable=lambda enum_cls: [m.value for m in enum_cls]),
        nullable=False,
        default=SourceType.WEB
    )
    title = Column(String(500), nullable=False)
    url = Column(Text, nullable=True)
    citation_text = Column(Text, nullable=True)  # APA/MLA/BibTeX string
    citation_meta = Column(JSON, nullable=True)
    snippet = Column(Text, nullable=True)  # extracted text
    # `metadata` is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    project = relationship("Project", back_populates="sources")
    notes = relationship("Note", back_populates="source")
