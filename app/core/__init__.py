"""Core app configuration, database, security helpers and error types."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import (
    AccessDenied,
    AuthFailure,
    Conflict,
    NotFound,
    ServiceError,
    ValidationFailure,
)

__all__ = [
    "AccessDenied",
    "AuthFailure",
    "Conflict",
    "NotFound",
    "ServiceError",
    "ValidationFailure",
    "get_db",
    "get_settings",
    "settings",
]
