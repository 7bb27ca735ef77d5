# backend/research_assistant/schemas/source.py
from typing import Any, Optional

from pydantic import AliasChoices, Field

from .base import BaseSchema, TimestampMixin, UrlStr
from ..models.source import SourceType

class SourceBase(BaseSchema):
    title: str = Field(..., min_length=1, max_length=500)
    url: Optional[UrlStr] = None
    citation_text: Optional[str] = None
    citation_meta: Optional[Any] = None
    snippet: Optional[str] = None

class SourceSave(SourceBase):
    """Inserts when `id` is omitted, replaces every mutable field otherwise"""
    id: Optional[int] = None
    project_id: int
    type: Optional[SourceType] = None
    metadata: Optional[Any] = None

class Source(SourceBase, TimestampMixin):
    id: int
    project_id: int
    type: SourceType
    # ORM attribute is `meta`; `metadata` is taken by the declarative base
    metadata: Optional[Any] = Field(default=None, validation_alias=AliasChoices("meta", "metadata"))

class SourceResponse(BaseSchema):
    source: Source
