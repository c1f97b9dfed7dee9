"""Employee Service - the API Service operations: validate → store → map.

Invariants:
    - Create and update run the same validation (all fields, email format) before the store is touched
    - Every operation is a single store call; no retries
    - Store errors (NotFound, Conflict, DatabaseError) propagate unchanged to the global handler
    - get_employee turns a missing row into EmployeeNotFoundError
    - Ids arrive as raw path segments; one that cannot name a row is NotFound, never a 400
    - update validates the body before resolving the id

Design Decisions:
    - Store injected as EmployeeRepository: service testable with an in-memory fake
    - Validation reads wire names (hireDate) so the required-field list matches the request body
"""

import logging
from collections.abc import Sequence

from employee_registry.core.domain_types import EmployeeId, MSG_DELETED
from employee_registry.core.enforce_employee import (
    parse_employee_id, validate_employee_fields,
)
from employee_registry.core.errors import (
    EmployeeNotFoundError, EmployeeValidationError,
)
from employee_registry.core.repository_protocols import (
    EmployeeLike, EmployeeRepository,
)
from employee_registry.schemas.employee import EmployeeFields

logger = logging.getLogger(__name__)


def validated_fields(body: EmployeeFields) -> dict[str, str]:
    """Apply enforce_employee rules. Returns attribute-keyed fields for the store."""
    error = validate_employee_fields(body.model_dump(by_alias=True))
    if error:
        message = error.pop("error")
        raise EmployeeValidationError(message, **error)
    return body.model_dump()


def resolve_employee_id(raw: EmployeeId | str) -> EmployeeId:
    """Path id -> EmployeeId. Ids no row could carry are reported as missing."""
    employee_id = parse_employee_id(raw)
    if employee_id is None:
        raise EmployeeNotFoundError(raw)
    return employee_id


class EmployeeService:
    """Employee CRUD and department listing over an injected store."""

    def __init__(self, store: EmployeeRepository):
        self.store = store

    async def list_employees(
        self, department: str | None = None,
    ) -> Sequence[EmployeeLike]:
        return await self.store.list_employees(department or None)

    async def get_employee(self, raw_id: EmployeeId | str) -> EmployeeLike:
        employee_id = resolve_employee_id(raw_id)
        employee = await self.store.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def create_employee(self, body: EmployeeFields) -> EmployeeLike:
        fields = validated_fields(body)
        employee = await self.store.insert(fields)
        logger.info(
            f"Employee created: {employee.id}",
            extra={"employee_id": employee.id},
        )
        return employee

    async def update_employee(
        self, raw_id: EmployeeId | str, body: EmployeeFields,
    ) -> EmployeeLike:
        fields = validated_fields(body)
        employee_id = resolve_employee_id(raw_id)
        employee = await self.store.update(employee_id, fields)
        logger.info(
            f"Employee updated: {employee_id}",
            extra={"employee_id": employee_id},
        )
        return employee

    async def delete_employee(self, raw_id: EmployeeId | str) -> str:
        employee_id = resolve_employee_id(raw_id)
        await self.store.delete(employee_id)
        logger.info(
            f"Employee deleted: {employee_id}",
            extra={"employee_id": employee_id},
        )
        return MSG_DELETED

    async def list_departments(self) -> list[str]:
        return await self.store.distinct_departments()
