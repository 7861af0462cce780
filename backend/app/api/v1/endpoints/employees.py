from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from app.core.dependencies import get_employee_resolver
from app.models.employee import CreateEmployeeInput, Employee
from app.services.employee_resolver import EmployeeResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employee", tags=["employee"])


@router.get("", response_model=list[Employee])
async def get_all_employees(
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    return await resolver.list_employees()


@router.get("/search/{search_string}", response_model=list[Employee])
async def get_employees_by_name_search(
    search_string: str,
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    return await resolver.search_employees(search_string)


@router.get("/highestSalary", response_model=int)
async def get_highest_salary_of_employees(
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    return await resolver.highest_salary()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str | None])
async def get_top_ten_highest_earning_employee_names(
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    return await resolver.top_ten_earner_names()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: str,
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    return await resolver.get_employee(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: CreateEmployeeInput,
    response: Response,
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    created = await resolver.create_employee(payload)
    # header values must be latin-1
    response.headers["X-Message"] = f"Employee successfully added: {quote(created.name or '', safe=' ')}"
    return created


@router.delete("/{employee_id}", response_class=PlainTextResponse)
async def delete_employee_by_id(
    employee_id: str,
    resolver: EmployeeResolver = Depends(get_employee_resolver),  # noqa: B008
):
    name = await resolver.delete_employee(employee_id)
    logger.info("Delete request for id=%s completed", employee_id)
    return PlainTextResponse(name)
