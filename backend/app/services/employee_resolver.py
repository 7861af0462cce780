"""Public employee operations composed from employee server calls."""

from __future__ import annotations

import logging
from uuid import UUID

from app.core.errors import (
    ClientInputError,
    EmployeeNotFoundError,
    UpstreamRefusedError,
    UpstreamServerError,
)
from app.models.employee import CreateEmployeeInput, Employee
from app.services.employee_client import EmployeeClient
from app.services.employee_validation import validate_create_input

logger = logging.getLogger(__name__)

TOP_EARNERS_LIMIT = 10


def _require_uuid(employee_id: str) -> None:
    message = f"Invalid employee id format: {employee_id}"
    try:
        parsed = UUID(employee_id)
    except ValueError as e:
        raise ClientInputError(message) from e
    # UUID() also accepts braces, urn: prefixes and stray hyphens
    if str(parsed) != employee_id.lower():
        raise ClientInputError(message)


class EmployeeResolver:
    """Stateless: every method works on a fresh snapshot from the employee server."""

    def __init__(self, client: EmployeeClient) -> None:
        self.client = client

    async def list_employees(self) -> list[Employee]:
        return await self.client.list_all()

    async def search_employees(self, search_string: str | None) -> list[Employee]:
        employees = await self.client.list_all()
        if search_string is None or not search_string.strip():
            return employees

        needle = search_string.lower()
        return [e for e in employees if e.name is not None and needle in e.name.lower()]

    async def get_employee(self, employee_id: str) -> Employee:
        _require_uuid(employee_id)
        employee = await self.client.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def highest_salary(self) -> int:
        salaries = [e.salary for e in await self.client.list_all() if e.salary is not None]
        return max(salaries, default=0)

    async def top_ten_earner_names(self) -> list[str | None]:
        employees = await self.client.list_all()
        # sorted() is stable, so equal salaries keep the employee server's order
        ranked = sorted(
            employees,
            key=lambda e: (e.salary is None, -(e.salary or 0)),
        )
        return [e.name for e in ranked[:TOP_EARNERS_LIMIT]]

    async def create_employee(self, payload: CreateEmployeeInput) -> Employee:
        violations = validate_create_input(payload)
        if violations:
            logger.info("Rejected create request with %d violation(s): %s", len(violations), violations[0])
            raise ClientInputError(str(violations[0]))

        employee = await self.client.create(payload)
        logger.info("Created employee id=%s name=%s", employee.id, employee.name)
        return employee

    async def delete_employee(self, employee_id: str) -> str:
        employee = await self.get_employee(employee_id)
        name = employee.name
        if not name:
            logger.error("Employee server returned id=%s without a name; cannot delete by name", employee_id)
            raise UpstreamServerError()

        # The employee server deletes by name; with duplicate names it picks which record goes.
        if not await self.client.delete_by_name(name):
            logger.warning("Employee server refused delete for id=%s name=%s", employee_id, name)
            raise UpstreamRefusedError(name)

        logger.info("Deleted employee id=%s name=%s", employee_id, name)
        return name
