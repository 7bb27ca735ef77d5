# backend/research_assistant/schemas/base.py
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, TypeAdapter, ValidationError

class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

class TimestampMixin(BaseModel):
    created_at: datetime

_url_adapter = TypeAdapter(AnyUrl)

def _validate_url(value: str) -> str:
    # Validate only; the caller's spelling is what gets stored
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid URL") from None
    return value

UrlStr = Annotated[str, AfterValidator(_validate_url)]
