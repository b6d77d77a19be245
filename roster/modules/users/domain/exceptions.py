"""
User Store - Exceptions
"""
from typing import Dict, List


class UserStoreError(Exception):
    """Base exception for user store errors"""
    pass


class InvalidArgumentError(UserStoreError):
    """Raised when pagination arguments or field values are invalid"""
    pass


class ValidationError(InvalidArgumentError):
    """Raised when a payload fails field validation"""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        fields = ", ".join(errors)
        super().__init__(f"Validation failed for: {fields}")


class NotFoundError(UserStoreError):
    """Raised when no user exists with the requested id"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"No user exists with id {user_id}.")


class ConflictError(UserStoreError):
    """Raised when an email is already taken by another user"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email '{email}' already exists.")
