"""Employee Routes - CRUD over /api/employees.

Invariants:
    - Handlers only translate HTTP to EmployeeService calls; errors surface via global handlers
    - POST → 201 with the created record; PUT → 200 with the updated record
    - An empty ?department= is the same as no filter
    - Path ids are taken as raw strings; the service resolves them (non-numeric → 404)
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from employee_registry.api.dependencies import get_employee_service
from employee_registry.schemas.employee import (
    EmployeeFields, EmployeeResponse, MessageResponse,
)
from employee_registry.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    department: str | None = Query(None),
    service: EmployeeService = Depends(get_employee_service),
):
    """List employees, optionally restricted to one department (exact match)."""
    return await service.list_employees(department)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    return await service.get_employee(employee_id)


@router.post(
    "", response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeFields | None = None,
    service: EmployeeService = Depends(get_employee_service),
):
    """Create an employee. The store assigns the id."""
    return await service.create_employee(body or EmployeeFields())


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    body: EmployeeFields | None = None,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace all fields of an employee. The id never changes."""
    return await service.update_employee(
        employee_id, body or EmployeeFields(),
    )


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    message = await service.delete_employee(employee_id)
    return MessageResponse(message=message)
