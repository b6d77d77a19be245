"""
User Provisioning Service

Seeds the roster with its initial users at startup.
"""
import logging
from typing import Optional, Iterable, List
from roster.modules.users.domain.user import User, UserPayload
from roster.modules.users.domain.exceptions import ConflictError
from roster.modules.users.services.user_service import UserService

logger = logging.getLogger("roster.users.provisioning")


DEFAULT_USERS = (
    UserPayload(name="Alice Johnson", email="alice.johnson@techhive.com", role="HR Manager"),
    UserPayload(name="Bob Smith", email="bob.smith@techhive.com", role="IT Admin"),
)


class UserProvisioningService:
    """Service for seeding users."""

    def __init__(self, user_service: Optional[UserService] = None):
        self.user_service = user_service or UserService()

    def seed(self, users: Iterable[UserPayload] = DEFAULT_USERS) -> List[User]:
        """
        Create the seed users.

        Skipped when the roster already holds users. A seed record whose
        email is already taken (for example by a concurrent seeder) is
        skipped rather than failing the rest.
        """
        if self.user_service.count_users() > 0:
            logger.debug("[UserProvisioningService.seed] Roster not empty, skipping")
            return []

        created = []
        for payload in users:
            try:
                created.append(self.user_service.create_user(payload))
            except ConflictError:
                logger.debug(f"[UserProvisioningService.seed] {payload.email} already exists, skipping")
        logger.info(f"[UserProvisioningService.seed] Seeded {len(created)} users")
        return created


def seed_users(user_service: UserService, users: Iterable[UserPayload] = DEFAULT_USERS) -> int:
    """Seed *user_service* and return how many users were created."""
    return len(UserProvisioningService(user_service).seed(users))
