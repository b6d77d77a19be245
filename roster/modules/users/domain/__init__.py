"""
Domain Models

Pure data models, validation rules and errors for roster users.
"""

from .user import User, UserPayload, Page
from .validation import ValidationResult, validate
from .exceptions import (
    UserStoreError,
    InvalidArgumentError,
    ValidationError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "User",
    "UserPayload",
    "Page",
    "ValidationResult",
    "validate",
    "UserStoreError",
    "InvalidArgumentError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
