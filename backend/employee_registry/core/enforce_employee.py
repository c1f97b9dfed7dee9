"""Employee Input Enforcement - validates employee fields before they reach the store.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return error dict on violation, None on success
    - validate_employee_fields chains all checks - first error wins
    - Identical rules for create and update (no partial updates)

Design Decisions:
    - Return dicts (not exceptions): the service layer decides how to surface them,
      keeping these checks testable without the error hierarchy
    - Email pattern matched with fullmatch so a trailing newline never passes
    - Path ids that are not digits or fall outside the rowid range resolve to None:
      such an id names no row, so callers report it as not found
"""

import re
from collections.abc import Mapping

from employee_registry.core.domain_types import (
    EmployeeId, MAX_EMPLOYEE_ID, MIN_EMPLOYEE_ID, REQUIRED_FIELDS,
    MSG_FIELDS_REQUIRED, MSG_INVALID_EMAIL,
)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ID_PATTERN = re.compile(r"\d+")


def check_required_fields(fields: Mapping[str, str | None]) -> dict | None:
    """Rule 1: every required field present and non-empty."""
    if any(not fields.get(name) for name in REQUIRED_FIELDS):
        return {
            "error": MSG_FIELDS_REQUIRED,
            "required": list(REQUIRED_FIELDS),
        }
    return None


def check_email_format(email: str) -> dict | None:
    """Rule 2: email looks like local@domain.tld."""
    if not is_valid_email(email):
        return {"error": MSG_INVALID_EMAIL}
    return None


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_employee_fields(fields: Mapping[str, str | None]) -> dict | None:
    """Run all checks in order. Returns the first error or None."""
    error = check_required_fields(fields)
    if error:
        return error
    return check_email_format(fields["email"])


def is_storable_id(employee_id: int) -> bool:
    return MIN_EMPLOYEE_ID <= employee_id <= MAX_EMPLOYEE_ID


def parse_employee_id(raw: str | int) -> EmployeeId | None:
    """Path segment -> EmployeeId, or None when no stored row could match it."""
    if isinstance(raw, str):
        if not ID_PATTERN.fullmatch(raw):
            return None
        raw = int(raw)
    if not is_storable_id(raw):
        return None
    return EmployeeId(raw)
