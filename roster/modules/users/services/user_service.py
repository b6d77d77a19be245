"""
User Service

Business logic for user management operations: payloads are
validated first, then applied to the repository.
"""
from typing import Optional
from roster.modules.users.domain.user import User, UserPayload, Page
from roster.modules.users.domain.validation import validate
from roster.modules.users.domain.exceptions import ValidationError
from roster.modules.users.repositories.user_repository import UserRepository


class UserService:
    """Service for user business logic."""

    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or UserRepository()

    def list_users(self, page: int = 1, page_size: int = 20) -> Page:
        """List one page of users."""
        return self.repository.list(page, page_size)

    def get_user(self, user_id: int) -> User:
        """Get user by ID."""
        return self.repository.get(user_id)

    def create_user(self, payload: UserPayload) -> User:
        """Create a new user account."""
        result = validate(payload, is_partial=False)
        if not result.is_valid:
            raise ValidationError(result.errors)
        return self.repository.create(payload)

    def update_user(self, user_id: int, payload: UserPayload) -> User:
        """
        Update user account.

        Blank or absent fields keep their current value.
        """
        result = validate(payload, is_partial=True)
        if not result.is_valid:
            raise ValidationError(result.errors)
        return self.repository.update(user_id, payload)

    def delete_user(self, user_id: int):
        """Delete user."""
        self.repository.delete(user_id)

    def count_users(self) -> int:
        return self.repository.count()
