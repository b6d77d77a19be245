"""
User Domain Model

Pure data models for a roster member and for the payloads that
create or modify one.
"""
from dataclasses import dataclass
from typing import Optional, List


USER_FIELDS = ("name", "email", "role")


@dataclass(frozen=True)
class User:
    """User domain model. Instances handed out by the store are snapshots."""
    id: int
    name: str
    email: str
    role: str

    def to_dict(self) -> dict:
        """Convert User to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
        }


@dataclass(frozen=True)
class UserPayload:
    """
    Candidate field values for a create or update request.

    Each field is tri-state: None (absent), blank, or a non-blank string.
    Only non-blank values are ever written to the store.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None

    def provided(self, field: str) -> Optional[str]:
        """Return the trimmed value of *field*, or None when absent or blank."""
        value = getattr(self, field)
        if value is None or not value.strip():
            return None
        return value.strip()


@dataclass
class Page:
    """One page of users plus the collection size at snapshot time."""
    items: List[User]
    total: int
    page: int
    page_size: int

    def to_dict(self) -> dict:
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "total": self.total,
            "items": [user.to_dict() for user in self.items],
        }
