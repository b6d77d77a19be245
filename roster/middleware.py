"""
HTTP Middleware

Request/response logging and the last-resort error handler.
"""
import logging
import time
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("roster.requests")
error_logger = logging.getLogger("roster.errors")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log all incoming HTTP requests and responses.

    Observes method, path, client, status and duration; never alters
    the response.
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        client_host = request.client.host if request.client else "unknown"
        logger.info(f"→ REQUEST: {request.method} {request.url.path} | Client: {client_host}")

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            f"← RESPONSE: {request.method} {request.url.path} | "
            f"Status: {response.status_code} | "
            f"Duration: {duration_ms:.2f}ms"
        )

        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turn any unhandled exception into a 500 problem response."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            error_logger.error(
                f"[ErrorHandlingMiddleware] {request.method} {request.url.path} failed: {e}",
                exc_info=True
            )
            return JSONResponse(
                status_code=500,
                content={
                    "title": "Internal server error",
                    "detail": "An unexpected error occurred.",
                    "statusCode": 500,
                },
            )
