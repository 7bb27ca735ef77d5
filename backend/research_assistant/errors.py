# backend/research_assistant/errors.py
from enum import Enum


class ErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"


ERROR_STATUS = {
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.BAD_REQUEST: 400,
}


class ActionError(Exception):
    """Structured failure raised by action handlers"""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.code]

    def to_dict(self) -> dict:
        return {"error": {"code": self.code.value, "message": self.message}}

    def __repr__(self):
        return f"ActionError(code={self.code.value!r}, message={self.message!r})"


def not_found(entity: str) -> ActionError:
    return ActionError(ErrorCode.NOT_FOUND, f"{entity} not found.")
