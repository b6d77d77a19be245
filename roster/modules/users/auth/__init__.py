"""
Authentication Module

Provides:
- Bearer token middleware
"""

from .middleware import TokenAuthMiddleware, extract_bearer_token

__all__ = [
    "TokenAuthMiddleware",
    "extract_bearer_token",
]
