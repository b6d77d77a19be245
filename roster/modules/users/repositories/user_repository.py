"""
User Repository

In-memory user store. Owns the roster collection, assigns ids and
enforces email uniqueness. Every operation runs under one lock, so
concurrent callers observe a single sequential order.
"""
import threading
from dataclasses import replace
from typing import Optional, Dict

from roster.modules.users.domain.user import User, UserPayload, Page
from roster.modules.users.domain.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ConflictError,
)

MAX_PAGE_SIZE = 200


class UserRepository:
    """Repository for user data access."""

    def __init__(self, max_page_size: int = MAX_PAGE_SIZE):
        self.max_page_size = max_page_size
        # Insertion-ordered; replacing a value keeps its position.
        self._users: Dict[int, User] = {}
        self._lock = threading.Lock()

    def list(self, page: int, page_size: int) -> Page:
        """Return one page of users in insertion order."""
        if page < 1 or page_size < 1 or page_size > self.max_page_size:
            raise InvalidArgumentError(
                f"page must be >= 1 and pageSize must be between 1 and {self.max_page_size}."
            )

        start = (page - 1) * page_size
        with self._lock:
            snapshot = list(self._users.values())
            return Page(
                items=snapshot[start:start + page_size],
                total=len(snapshot),
                page=page,
                page_size=page_size,
            )

    def get(self, user_id: int) -> User:
        """Get user by ID."""
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return user

    def create(self, payload: UserPayload) -> User:
        """Insert a validated creation payload and return the stored user."""
        name = payload.provided("name")
        email = payload.provided("email")
        role = payload.provided("role")

        with self._lock:
            if self._find_by_email(email) is not None:
                raise ConflictError(email)

            user_id = max(self._users, default=0) + 1
            user = User(id=user_id, name=name, email=email, role=role)
            self._users[user_id] = user
            return user

    def update(self, user_id: int, payload: UserPayload) -> User:
        """Apply the non-blank fields of a validated payload."""
        changes = {}
        for field in ("name", "email", "role"):
            value = payload.provided(field)
            if value is not None:
                changes[field] = value

        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                raise NotFoundError(user_id)

            email = changes.get("email")
            if email is not None:
                owner = self._find_by_email(email)
                if owner is not None and owner.id != user_id:
                    raise ConflictError(email)

            updated = replace(existing, **changes)
            self._users[user_id] = updated
            return updated

    def delete(self, user_id: int):
        """Remove a user."""
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError(user_id)
            del self._users[user_id]

    def count(self) -> int:
        """Number of stored users."""
        with self._lock:
            return len(self._users)

    def _find_by_email(self, email: str) -> Optional[User]:
        # Caller must hold the lock.
        needle = email.lower()
        for user in self._users.values():
            if user.email.lower() == needle:
                return user
        return None
