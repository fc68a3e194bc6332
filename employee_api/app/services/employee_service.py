"""
Service layer for employees.

This module provides the CRUD operations exposed by the employee
endpoints.  The service performs no validation of its own: whatever
the schemas accept is stored as is.  A missing record is reported by
returning ``None`` (or ``False`` for deletion) and it is up to the API
layer to translate that into an HTTP 404.  Errors raised by the
repository are not caught.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from employee_api.app.repositories.employee_repository import EmployeeRepository
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service class for managing employees."""

    def __init__(self, repository: EmployeeRepository) -> None:
        self.repository = repository

    async def create(self, data: EmployeeCreate) -> EmployeeRead:
        """Store a new employee and return it with its assigned id."""
        employee = self.repository.save(data.to_model())
        logger.info("Created employee %s", employee.id)
        return EmployeeRead.from_model(employee)

    async def list_all(self) -> List[EmployeeRead]:
        return [EmployeeRead.from_model(employee) for employee in self.repository.find_all()]

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeRead]:
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            return None
        return EmployeeRead.from_model(employee)

    async def update(self, employee_id: int, data: EmployeeUpdate) -> Optional[EmployeeRead]:
        """Replace first name, last name and email of an existing employee.

        Returns the updated employee, or ``None`` without writing
        anything if no employee has ``employee_id``.
        """
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            return None
        employee.first_name = data.first_name
        employee.last_name = data.last_name
        employee.email = data.email
        employee = self.repository.save(employee)
        logger.info("Updated employee %s", employee_id)
        return EmployeeRead.from_model(employee)

    async def delete_by_id(self, employee_id: int) -> bool:
        """Delete an employee by ID.

        Returns ``True`` if the employee existed and was removed,
        ``False`` otherwise.
        """
        deleted = self.repository.delete_by_id(employee_id)
        if deleted:
            logger.info("Deleted employee %s", employee_id)
        return deleted
