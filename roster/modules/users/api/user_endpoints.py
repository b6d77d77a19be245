"""
User Management API Endpoints

REST API endpoints for user CRUD operations.
Thin layer: request models in, service call, response out. Store
errors are mapped to problem responses by the handlers in errors.py.
"""
import logging
from fastapi import APIRouter, Query, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional
from roster import config
from roster.modules.users.domain.user import UserPayload
from roster.modules.users.repositories.user_repository import UserRepository
from roster.modules.users.services.user_service import UserService

logger = logging.getLogger("roster.users.api")

router = APIRouter(prefix="/api/users", tags=["users"])

# Request Models
# Fields stay optional here; required/length/format rules are applied by
# the domain validator so errors come back as a field -> messages mapping.
class CreateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None

    def to_payload(self) -> UserPayload:
        return UserPayload(name=self.name, email=self.email, role=self.role)


class UpdateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None

    def to_payload(self) -> UserPayload:
        return UserPayload(name=self.name, email=self.email, role=self.role)


# Service instance
_user_service = UserService(UserRepository(max_page_size=config.MAX_PAGE_SIZE))


def get_user_service() -> UserService:
    """FastAPI dependency returning the process-wide user service."""
    return _user_service


@router.get("")
def list_users(
    page: int = Query(1, description="1-based page number"),
    page_size: int = Query(config.DEFAULT_PAGE_SIZE, alias="pageSize", description="Users per page"),
    service: UserService = Depends(get_user_service)
):
    """
    List users.

    Returns one page in insertion order plus the total count.
    """
    logger.debug(f"[user_endpoints.list_users] page={page}, page_size={page_size}")
    return service.list_users(page=page, page_size=page_size).to_dict()


@router.get("/{user_id}")
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """Get user details by ID."""
    logger.debug(f"[user_endpoints.get_user] user_id={user_id}")
    return service.get_user(user_id).to_dict()


@router.post("", status_code=201)
def create_user(
    request: CreateUserRequest,
    service: UserService = Depends(get_user_service)
):
    """Create a new user."""
    logger.debug(f"[user_endpoints.create_user] email={request.email}")

    user = service.create_user(request.to_payload())
    return JSONResponse(
        status_code=201,
        content=user.to_dict(),
        headers={"Location": f"/api/users/{user.id}"},
    )


@router.put("/{user_id}", status_code=204)
def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: UserService = Depends(get_user_service)
):
    """
    Update user.

    Only non-blank fields are applied; the rest keep their values.
    """
    logger.debug(f"[user_endpoints.update_user] user_id={user_id}")

    service.update_user(user_id, request.to_payload())
    return Response(status_code=204)


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """Delete user."""
    logger.debug(f"[user_endpoints.delete_user] user_id={user_id}")

    service.delete_user(user_id)
    return Response(status_code=204)
