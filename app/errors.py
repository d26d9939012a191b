"""
Application error taxonomy.

Every error carries the HTTP status it maps to. Handlers in ``app.main``
render them as ``{"error": message, **extra}``.
"""
from typing import Any, Optional


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_dict(self) -> dict:
        return {"error": self.message, **self.extra}


class ValidationError(AppError):
    """Missing or malformed input"""
    status_code = 400


class AuthError(AppError):
    """Bad credentials or a missing/invalid token"""
    status_code = 401


class NotFoundError(AppError):
    status_code = 404


class StoreError(AppError):
    """An underlying query failed; terminal for the request"""
    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None, **extra: Any):
        super().__init__(message, **extra)
        self.cause = cause
