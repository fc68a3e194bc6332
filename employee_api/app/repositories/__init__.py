"""
Persistence adapters.

Repositories perform CRUD on a single table and return domain records
from ``employee_api.app.models``.  They hold no business rules.
"""

from .employee_repository import EmployeeRepository

__all__ = ["EmployeeRepository"]
