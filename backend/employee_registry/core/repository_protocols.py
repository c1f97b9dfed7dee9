"""Boundary Protocols - the Record Store contract between services and persistence.

Invariants:
    - Services depend on EmployeeRepository, never on SQLAlchemy directly
    - insert/update raise EmployeeConflictError on an email collision with another row
    - update/delete raise EmployeeNotFoundError when no row has the id
    - get returns None (not an error) when the row is absent

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO; callers await one operation at a time
"""

from collections.abc import Sequence
from typing import Protocol

from employee_registry.core.domain_types import EmployeeId


class EmployeeLike(Protocol):
    """Structural contract for an employee row returned by the store."""
    id: int
    name: str
    email: str
    department: str
    role: str
    hire_date: str


class EmployeeRepository(Protocol):
    """Contract for employee persistence - implemented by infrastructure."""
    async def list_employees(
        self, department: str | None = None,
    ) -> Sequence[EmployeeLike]: ...
    async def get(self, employee_id: EmployeeId) -> EmployeeLike | None: ...
    async def insert(self, fields: dict[str, str]) -> EmployeeLike: ...
    async def update(
        self, employee_id: EmployeeId, fields: dict[str, str],
    ) -> EmployeeLike: ...
    async def delete(self, employee_id: EmployeeId) -> None: ...
    async def distinct_departments(self) -> list[str]: ...
