"""
Repository for the ``employees`` table.

Each method opens its own connection through ``core.db.get_cursor``
and closes it before returning, so a repository instance can be shared
freely between requests.  All queries use parameterized statements.
Database errors are not caught here; they propagate to the caller.
Ids outside SQLite's INTEGER range are treated as unknown.
"""

from __future__ import annotations

import sqlite3
from typing import Iterable, List, Optional

from employee_api.app.core.db import get_cursor
from employee_api.app.models.employee import Employee

# SQLite INTEGER is a signed 64-bit value; larger ids can never be stored.
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


def is_storable_id(employee_id: int) -> bool:
    return SQLITE_INTEGER_MIN <= employee_id <= SQLITE_INTEGER_MAX


class EmployeeRepository:
    """CRUD access to stored employees."""

    def __init__(self, database_path: str) -> None:
        self.database_path = database_path

    def save(self, employee: Employee) -> Employee:
        """Insert a new employee or overwrite an existing one.

        A record without ``id`` is inserted and returned with the id
        assigned by the database.  A record with ``id`` replaces the
        stored row carrying that id.
        """
        with get_cursor(self.database_path) as cursor:
            if employee.id is None:
                cursor.execute(
                    "INSERT INTO employees (first_name, last_name, email) VALUES (?, ?, ?)",
                    (employee.first_name, employee.last_name, employee.email),
                )
                employee.id = cursor.lastrowid
            else:
                cursor.execute(
                    "UPDATE employees SET first_name = ?, last_name = ?, email = ? WHERE id = ?",
                    (employee.first_name, employee.last_name, employee.email, employee.id),
                )
        return employee

    def save_all(self, employees: Iterable[Employee]) -> List[Employee]:
        return [self.save(employee) for employee in employees]

    def find_all(self) -> List[Employee]:
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute("SELECT * FROM employees ORDER BY id").fetchall()
        return [self._row_to_employee(row) for row in rows]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        if not is_storable_id(employee_id):
            return None
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT * FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_employee(row)

    def exists_by_id(self, employee_id: int) -> bool:
        if not is_storable_id(employee_id):
            return False
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT 1 FROM employees WHERE id = ?",
                (employee_id,),
            ).fetchone()
        return row is not None

    def delete_by_id(self, employee_id: int) -> bool:
        """Delete the employee with ``employee_id``.

        Returns ``True`` if a row was deleted, ``False`` otherwise.
        """
        if not is_storable_id(employee_id):
            return False
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
            affected = cursor.rowcount
        return affected > 0

    def delete_all(self) -> None:
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM employees")

    def count(self) -> int:
        with get_cursor(self.database_path) as cursor:
            total = cursor.execute("SELECT COUNT(*) FROM employees").fetchone()[0]
        return total

    @staticmethod
    def _row_to_employee(row: sqlite3.Row) -> Employee:
        return Employee(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
        )
