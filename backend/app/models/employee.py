"""Employee models: the public shape and the employee server's wire shape."""

from __future__ import annotations

from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Employee(BaseModel):
    """Employee as exposed by this API."""

    id: str | None = None
    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None
    email: str | None = None


class CreateEmployeeInput(BaseModel):
    """Request body for creating an employee.

    Field constraints are checked by ``validate_create_input`` so that every
    violation can be collected before anything is sent upstream.
    """

    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None


class EmployeeRecord(BaseModel):
    """Employee record as serialized by the employee server."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID | None = None
    name: str | None = Field(default=None, alias="employee_name")
    salary: int | None = Field(default=None, alias="employee_salary")
    age: int | None = Field(default=None, alias="employee_age")
    title: str | None = Field(default=None, alias="employee_title")
    email: str | None = Field(default=None, alias="employee_email")

    def to_employee(self) -> Employee:
        return Employee(
            id=str(self.id) if self.id is not None else None,
            name=self.name,
            salary=self.salary,
            age=self.age,
            title=self.title,
            email=self.email,
        )


class UpstreamEnvelope(BaseModel, Generic[T]):
    """``{data, status}`` wrapper the employee server puts around every payload."""

    data: T | None = None
    status: str | None = None
