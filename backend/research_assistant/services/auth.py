# backend/research_assistant/services/auth.py
"""
Caller identity for action handlers.

Authentication happens upstream: the identity proxy puts the signed-in
user's id on every request. Handlers never read it from the request
themselves; they receive an `ActionContext` and call `require_user` first.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import ActionError, ErrorCode
from ..utils.logging import auth_logger


@dataclass(frozen=True)
class CurrentUser:
    id: str
    name: Optional[str] = None


@dataclass(frozen=True)
class ActionContext:
    user: Optional[CurrentUser] = None


def require_user(context: Optional[ActionContext]) -> CurrentUser:
    user = context.user if context is not None else None
    if user is None:
        auth_logger.warning("Rejected unauthenticated action call")
        raise ActionError(
            ErrorCode.UNAUTHORIZED,
            "You must be signed in to perform this action.",
        )
    return user


def user_from_headers(user_id: Optional[str], user_name: Optional[str] = None) -> Optional[CurrentUser]:
    """Build the caller from identity proxy headers; blank ids mean anonymous"""
    user_id = (user_id or "").strip()
    if not user_id:
        return None
    user_name = (user_name or "").strip() or None
    return CurrentUser(id=user_id, name=user_name)
