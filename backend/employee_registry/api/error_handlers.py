"""Error Handlers - global exception handlers for the employee-registry API.

Invariants:
    - EmployeeRegistryError → its own status and to_response() body
    - RequestValidationError (malformed JSON, wrong types, bad path id) → 400
    - Unmatched path or unsupported method → 404 {"error": "Route not found"}
    - Exception (catch-all) → 500 generic body; details only in the server log

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
    - Extracted from main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_registry.core.errors import (
    EmployeeNotFoundError, EmployeeRegistryError, EmployeeValidationError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)

_ROUTING_STATUSES = (
    status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(exc: EmployeeRegistryError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register employee-registry domain/store error handler."""

    @app.exception_handler(EmployeeRegistryError)
    async def domain_error_handler(request: Request, exc: EmployeeRegistryError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        extra = {"error_code": exc.code, "path": request.url.path}
        if isinstance(exc, EmployeeNotFoundError):
            extra["employee_id"] = exc.employee_id
        logger.log(level, f"{type(exc).__name__}: {exc.message}", extra=extra)
        return _error_response(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _error_response(_build_validation_error(exc))


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing/HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code in _ROUTING_STATUSES:
            return _error_response(RouteNotFoundError())
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _build_validation_error(
    exc: RequestValidationError,
) -> EmployeeValidationError:
    """Collapse pydantic errors into one readable message."""
    problems = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return EmployeeValidationError("Invalid request data", detail=problems)
