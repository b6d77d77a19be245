"""
Data Access Layer (Repositories)

Repositories own the user collection.
"""

from .user_repository import UserRepository

__all__ = [
    "UserRepository",
]
