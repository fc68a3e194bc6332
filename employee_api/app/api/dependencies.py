"""
FastAPI dependencies wiring repositories and services.

The database path is stored on ``app.state`` by ``create_app``, so
every application instance talks to its own database.  Override these
functions through ``app.dependency_overrides`` to substitute another
repository or service.
"""

from fastapi import Depends, Request

from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.services.employee_service import EmployeeService


def get_employee_repository(request: Request) -> EmployeeRepository:
    return EmployeeRepository(request.app.state.database_path)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
