"""Employee Store - SQLAlchemy implementation of the EmployeeRepository contract.

Invariants:
    - Each write is a single statement committed on its own (no multi-write transactions)
    - Email uniqueness is enforced by the UNIQUE index, never by a read-then-write check
    - IntegrityError from a unique index → EmployeeConflictError, after rollback
    - Any other SQLAlchemyError → DatabaseError(<operation summary>, <driver message>)
    - update/delete decide NotFound from the affected row count
    - Ids outside the rowid range are missing rows; the driver never sees them

Design Decisions:
    - update echoes the submitted fields with the stable id instead of re-reading the row
    - list orders by id, which matches storage order for a rowid table
"""

import logging
from collections.abc import Sequence
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_registry.core.domain_types import EmployeeId
from employee_registry.core.enforce_employee import is_storable_id
from employee_registry.core.errors import (
    DatabaseError, EmployeeConflictError, EmployeeNotFoundError,
)
from employee_registry.models.employee import Employee

logger = logging.getLogger(__name__)

_UNIQUE_VIOLATION_MARKERS = (
    "UNIQUE constraint failed",           # sqlite
    "duplicate key value violates",       # postgresql
)


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def is_unique_violation(exc: IntegrityError) -> bool:
    message = _driver_message(exc)
    return any(marker in message for marker in _UNIQUE_VIOLATION_MARKERS)


class SqlEmployeeStore:
    """Record Store over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _translate_errors(self, failure: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except IntegrityError as e:
            await self._db.rollback()
            if is_unique_violation(e):
                raise EmployeeConflictError() from e
            logger.error(f"{failure}: {e}")
            raise DatabaseError(failure, _driver_message(e)) from e
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"{failure}: {e}", exc_info=True)
            raise DatabaseError(failure, _driver_message(e)) from e

    async def list_employees(
        self, department: str | None = None,
    ) -> Sequence[Employee]:
        query = select(Employee).order_by(Employee.id)
        if department:
            query = query.where(Employee.department == department)
        async with self._translate_errors("Failed to fetch employees"):
            result = await self._db.execute(query)
            return result.scalars().all()

    async def get(self, employee_id: EmployeeId) -> Employee | None:
        if not is_storable_id(employee_id):
            return None
        async with self._translate_errors("Failed to fetch employee"):
            return await self._db.get(Employee, employee_id)

    async def insert(self, fields: dict[str, str]) -> Employee:
        employee = Employee(**fields)
        async with self._translate_errors("Failed to create employee"):
            self._db.add(employee)
            await self._db.commit()
        return employee

    async def update(
        self, employee_id: EmployeeId, fields: dict[str, str],
    ) -> Employee:
        if not is_storable_id(employee_id):
            raise EmployeeNotFoundError(employee_id)
        stmt = (
            update(Employee)
            .where(Employee.id == employee_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        async with self._translate_errors("Failed to update employee"):
            result = await self._db.execute(stmt)
            await self._db.commit()
        if result.rowcount == 0:
            raise EmployeeNotFoundError(employee_id)
        return Employee(id=employee_id, **fields)

    async def delete(self, employee_id: EmployeeId) -> None:
        if not is_storable_id(employee_id):
            raise EmployeeNotFoundError(employee_id)
        stmt = (
            delete(Employee)
            .where(Employee.id == employee_id)
            .execution_options(synchronize_session=False)
        )
        async with self._translate_errors("Failed to delete employee"):
            result = await self._db.execute(stmt)
            await self._db.commit()
        if result.rowcount == 0:
            raise EmployeeNotFoundError(employee_id)

    async def distinct_departments(self) -> list[str]:
        query = (
            select(Employee.department)
            .distinct()
            .order_by(Employee.department)
        )
        async with self._translate_errors("Failed to fetch departments"):
            result = await self._db.execute(query)
            return list(result.scalars().all())
