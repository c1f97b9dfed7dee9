"""Department Routes - distinct department values derived from employee rows."""

from fastapi import APIRouter, Depends

from employee_registry.api.dependencies import get_employee_service
from employee_registry.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/departments", tags=["departments"])


@router.get("", response_model=list[str])
async def list_departments(
    service: EmployeeService = Depends(get_employee_service),
):
    """Sorted, de-duplicated department names across all employees."""
    return await service.list_departments()
