from __future__ import annotations

from fastapi import Request

from app.services.employee_client import EmployeeClient
from app.services.employee_resolver import EmployeeResolver


def get_employee_client(request: Request) -> EmployeeClient:
    return request.app.state.employee_client


def get_employee_resolver(request: Request) -> EmployeeResolver:
    return request.app.state.employee_resolver
