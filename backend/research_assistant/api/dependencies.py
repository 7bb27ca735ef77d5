# backend/research_assistant/api/dependencies.py
from fastapi import Request

from ..config import settings
from ..services.auth import ActionContext, user_from_headers


async def get_action_context(request: Request) -> ActionContext:
    """Per-request caller context built from the identity proxy headers.

    Missing identity is not rejected here; every action decides through
    `require_user` so that the failure is reported the same way everywhere.
    """
    user = user_from_headers(
        request.headers.get(settings.AUTH_USER_HEADER),
        request.headers.get(settings.AUTH_USER_NAME_HEADER),
    )
    return ActionContext(user=user)
