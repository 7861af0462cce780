from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_employee_client
from app.services.employee_client import EmployeeClient

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(client: EmployeeClient = Depends(get_employee_client)):  # noqa: B008
    services: dict[str, str] = {}

    ok = await client.check_connection()
    services["employee_server"] = "ok" if ok else "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
