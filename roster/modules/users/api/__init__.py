"""
REST API Endpoints

Thin API layer that delegates to services.
"""

from .user_endpoints import router as user_router, get_user_service
from .errors import register_error_handlers

__all__ = [
    "user_router",
    "get_user_service",
    "register_error_handlers",
]
