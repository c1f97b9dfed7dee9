"""Route Dependencies - builds the per-request EmployeeService."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_registry.infrastructure.database import get_db
from employee_registry.infrastructure.employee_store import SqlEmployeeStore
from employee_registry.services.employee_service import EmployeeService


def get_employee_service(
    db: AsyncSession = Depends(get_db),
) -> EmployeeService:
    return EmployeeService(SqlEmployeeStore(db))
