# backend/research_assistant/utils/timestamps.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current time used for server-assigned timestamps"""
    return datetime.now(timezone.utc)
