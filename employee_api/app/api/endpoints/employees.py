"""
Employee endpoints.

These routes expose a CRUD API for employees under ``/api/employees``.
Requests and responses use camelCase JSON (``firstName``,
``lastName``, ``email`` plus ``id`` in responses).  Unknown ids are
answered with HTTP 404; missing body fields are rejected by FastAPI
with HTTP 422 before the service is called.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from employee_api.app.api.dependencies import get_employee_service
from employee_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    MessageResponse,
)
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()

DELETED_MESSAGE = "Employee deleted successfully!"


def _not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee not found with id {employee_id}",
    )


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_in: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Create a new employee and return it with its assigned id."""
    return await service.create(employee_in)


@router.get("", response_model=List[EmployeeRead])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRead]:
    """Return all employees."""
    return await service.list_all()


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Retrieve a single employee by ID.

    Returns HTTP 404 if the employee is not found.
    """
    employee = await service.get_by_id(employee_id)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    employee_in: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Replace the fields of an existing employee."""
    employee = await service.update(employee_id, employee_in)
    if employee is None:
        raise _not_found(employee_id)
    return employee


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    """Delete an employee.

    Deleting an id that does not exist answers HTTP 404 rather than
    reporting success.
    """
    deleted = await service.delete_by_id(employee_id)
    if not deleted:
        raise _not_found(employee_id)
    return MessageResponse(message=DELETED_MESSAGE)
