"""
Business Logic Services

Services validate input and orchestrate repository calls.
"""

from .user_service import UserService
from .provisioning import UserProvisioningService, seed_users, DEFAULT_USERS

__all__ = [
    "UserService",
    "UserProvisioningService",
    "seed_users",
    "DEFAULT_USERS",
]
