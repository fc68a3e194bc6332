"""
Pydantic schemas for employees.

The JSON representation uses camelCase keys (``firstName``,
``lastName``, ``email``), while Python code works with snake_case
attributes.  Field aliases bridge the two; either spelling is accepted
on input and responses are rendered with the aliases.  Fields only
need to be present: no format or uniqueness checks are applied.
"""

from pydantic import BaseModel, Field

from employee_api.app.models.employee import Employee


class EmployeeBase(BaseModel):
    """Fields shared by all employee schemas."""

    first_name: str = Field(..., alias="firstName", description="Employee's first name")
    last_name: str = Field(..., alias="lastName", description="Employee's last name")
    email: str = Field(..., description="Contact e‑mail address")

    class Config:
        populate_by_name = True


class EmployeeCreate(EmployeeBase):
    """Schema for creating a new employee."""

    def to_model(self) -> Employee:
        return Employee(first_name=self.first_name, last_name=self.last_name, email=self.email)


class EmployeeUpdate(EmployeeBase):
    """Schema for updating an employee.

    All three fields are required and replace the stored values.
    """


class EmployeeRead(EmployeeBase):
    """Schema for reading an employee."""

    id: int

    @classmethod
    def from_model(cls, employee: Employee) -> "EmployeeRead":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
        )


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
