"""
API Error Mapping

Translates user store errors into problem responses.
"""
import logging
from typing import Dict, List
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from roster.modules.users.domain.exceptions import (
    InvalidArgumentError,
    ValidationError,
    NotFoundError,
    ConflictError,
)

logger = logging.getLogger("roster.users.api")

VALIDATION_TITLE = "One or more validation errors occurred."


def problem(status_code: int, title: str, detail: str) -> JSONResponse:
    """Build a {title, detail, statusCode} problem response."""
    return JSONResponse(
        status_code=status_code,
        content={"title": title, "detail": detail, "statusCode": status_code},
    )


def validation_problem(errors: Dict[str, List[str]]) -> JSONResponse:
    """Build a 400 response carrying a field -> messages mapping."""
    return JSONResponse(
        status_code=400,
        content={"title": VALIDATION_TITLE, "statusCode": 400, "errors": errors},
    )


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.debug(f"[errors.handle_validation_error] {request.url.path}: {exc.errors}")
    return validation_problem(exc.errors)


async def handle_invalid_argument(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return problem(400, "Invalid pagination parameters", str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return problem(404, "User not found", str(exc))


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return problem(409, "Duplicate email", str(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed bodies and query strings with the same shape as field validation."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    logger.debug(f"[errors.handle_request_validation] {request.url.path}: {errors}")
    return validation_problem(errors)


def register_error_handlers(app: FastAPI):
    """Attach the user store error handlers to *app*."""
    # ValidationError subclasses InvalidArgumentError; handler lookup follows the MRO.
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(InvalidArgumentError, handle_invalid_argument)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
