"""Domain Types - identity type and fixed vocabulary for employee records.

Invariants:
    - EmployeeId wraps the integer primary key - assigned by the store, never by callers
    - REQUIRED_FIELDS lists every mutable field in wire order; all are mandatory on create and update

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, full type-checker support
    - Wire names (hireDate) kept here so error bodies and the client share one list
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)


# ─── Field Vocabulary ────────────────────────────────────────────

REQUIRED_FIELDS: tuple[str, ...] = (
    "name", "email", "department", "role", "hireDate",
)

# Wire name -> attribute name on the ORM row and pydantic models
FIELD_ATTRIBUTES: dict[str, str] = {
    "name": "name",
    "email": "email",
    "department": "department",
    "role": "role",
    "hireDate": "hire_date",
}


# ─── Response Messages ───────────────────────────────────────────

MSG_FIELDS_REQUIRED = "All fields are required"
MSG_INVALID_EMAIL = "Invalid email format"
MSG_DELETED = "Employee deleted successfully"


# ─── Id Range ────────────────────────────────────────────────────

# SQLite rowids are signed 64-bit; no stored row can have an id outside this range
MIN_EMPLOYEE_ID = 1
MAX_EMPLOYEE_ID = 2**63 - 1
