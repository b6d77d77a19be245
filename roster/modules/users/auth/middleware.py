"""
Authentication Middleware

Bearer-token gate in front of the roster API.

Usage:
    app.add_middleware(
        TokenAuthMiddleware,
        token=config.API_TOKEN,
        protected_paths=["/api/"],
    )
"""
import logging
import secrets
from typing import Optional, List
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = logging.getLogger("roster.users.auth")

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Extract the token from an Authorization header.

    Returns None when the header is missing or not a Bearer credential.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):].strip()


def _unauthorized(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """Rejects requests on protected paths that lack the shared bearer token."""

    def __init__(
        self,
        app,
        token: str,
        protected_paths: Optional[List[str]] = None,
    ):
        super().__init__(app)
        self.token = token
        self.protected_paths = protected_paths or ["/api/"]

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not any(path.startswith(p) for p in self.protected_paths):
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            logger.warning(f"[TokenAuthMiddleware] Missing token: {request.method} {path}")
            return _unauthorized("Unauthorized: Missing token.")

        if not secrets.compare_digest(token.encode(), self.token.encode()):
            logger.warning(f"[TokenAuthMiddleware] Invalid token: {request.method} {path}")
            return _unauthorized("Unauthorized: Invalid token.")

        return await call_next(request)
