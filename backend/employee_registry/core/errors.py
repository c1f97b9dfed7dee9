"""Error Hierarchy - typed, categorized exceptions for all employee-registry failure modes.

Invariants:
    - Every error has a message (str), code (str), category (ErrorCategory) and http_status
    - to_response() produces the REST body: {"error": str, "message"?: str, ...}
    - Client errors (4xx) are recoverable; store errors (5xx) are critical
    - No tracebacks in user-facing bodies; the driver message is the only detail exposed

Design Decisions:
    - Single hierarchy with EmployeeRegistryError base: one FastAPI handler catches all
    - Extra body fields (e.g. `required`) passed as keyword details, merged into the body
"""

from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    RATE_LIMIT = "rate_limit"
    DATABASE = "database"
    INTERNAL = "internal"


class EmployeeRegistryError(Exception):
    """Base exception for all employee-registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        detail: str | None = None,
        **extra: Any,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.detail = detail
        self.extra = extra

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        body: dict[str, Any] = {"error": self.message}
        if self.detail is not None:
            body["message"] = self.detail
        body.update(self.extra)
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

class EmployeeValidationError(EmployeeRegistryError):
    """Malformed or missing employee input."""
    def __init__(self, message: str, detail: str | None = None, **extra: Any):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400, detail, **extra,
        )


class EmployeeConflictError(EmployeeRegistryError):
    """Write would create a second row with the same email."""
    def __init__(self):
        super().__init__(
            "Employee with this email already exists",
            "EMAIL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )


class EmployeeNotFoundError(EmployeeRegistryError):
    """No employee row has the requested id."""
    def __init__(self, employee_id: int | str):
        super().__init__(
            "Employee not found",
            "EMPLOYEE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.employee_id = employee_id


class RouteNotFoundError(EmployeeRegistryError):
    """No route matches the request method and path."""
    def __init__(self):
        super().__init__(
            "Route not found",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class RateLimitExceededError(EmployeeRegistryError):
    """Source exceeded its request budget for the current window."""
    def __init__(self, retry_after_seconds: int):
        super().__init__(
            "Too many requests from this IP, please try again later.",
            "RATE_LIMITED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, 429,
        )
        self.retry_after_seconds = retry_after_seconds


# ─── Store Errors (500-level) ───────────────────────────────────

class DatabaseError(EmployeeRegistryError):
    """Record store operation failed. `detail` carries the driver message."""
    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500, detail,
        )
