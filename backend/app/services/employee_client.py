"""HTTP client for the upstream employee server."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import StrictBool

from app.core.config import Settings
from app.core.errors import (
    EmployeeApiError,
    UpstreamClientError,
    UpstreamRateLimitedError,
    UpstreamServerError,
)
from app.models.employee import CreateEmployeeInput, Employee, EmployeeRecord, UpstreamEnvelope

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def create_session(settings: Settings) -> aiohttp.ClientSession:
    timeout = aiohttp.ClientTimeout(
        sock_connect=settings.EMPLOYEE_SERVER_CONNECT_TIMEOUT_MS / 1000,
        sock_read=settings.EMPLOYEE_SERVER_READ_TIMEOUT_MS / 1000,
    )
    return aiohttp.ClientSession(timeout=timeout)


def classify_upstream_status(status: int, retry_after: str | None = None) -> EmployeeApiError:
    if status == 429:
        return UpstreamRateLimitedError(retry_after)
    if status >= 500:
        return UpstreamServerError()
    return UpstreamClientError(status)


class EmployeeClient:
    def __init__(self, session: aiohttp.ClientSession, base_url: str) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")

    @property
    def collection_url(self) -> str:
        return f"{self.base_url}/employee"

    async def close(self) -> None:
        if not self.session.closed:
            await self.session.close()

    async def list_all(self) -> list[Employee]:
        envelope = await self._exchange("GET", self.collection_url, UpstreamEnvelope[list[EmployeeRecord]])
        if not envelope.data:
            return []
        return [record.to_employee() for record in envelope.data]

    async def get_by_id(self, employee_id: str) -> Employee | None:
        envelope = await self._exchange(
            "GET",
            f"{self.collection_url}/{employee_id}",
            UpstreamEnvelope[EmployeeRecord],
            absent_on_not_found=True,
        )
        if envelope is None or envelope.data is None:
            return None
        return envelope.data.to_employee()

    async def create(self, payload: CreateEmployeeInput) -> Employee:
        envelope = await self._exchange(
            "POST",
            self.collection_url,
            UpstreamEnvelope[EmployeeRecord],
            json=payload.model_dump(),
        )
        if envelope.data is None:
            logger.error("Employee server accepted create for name=%s but returned no record", payload.name)
            raise UpstreamServerError()
        return envelope.data.to_employee()

    async def delete_by_name(self, name: str) -> bool:
        envelope = await self._exchange(
            "DELETE",
            self.collection_url,
            UpstreamEnvelope[StrictBool],
            json={"name": name},
            headers=JSON_HEADERS,
        )
        return envelope.data is True

    async def check_connection(self) -> bool:
        try:
            async with self.session.get(self.collection_url) as response:
                return response.status == 200
        except Exception:
            logger.exception("Employee server connection check failed")
            return False

    async def _exchange(
        self,
        method: str,
        url: str,
        envelope_type: type[UpstreamEnvelope[Any]],
        *,
        absent_on_not_found: bool = False,
        **kwargs: Any,
    ) -> Any:
        try:
            async with self.session.request(method, url, **kwargs) as response:
                if response.status == 404 and absent_on_not_found:
                    return None
                if response.status >= 400:
                    body = await response.text()
                    logger.warning("Employee server %s %s -> %d: %s", method, url, response.status, body[:200])
                    raise classify_upstream_status(response.status, response.headers.get("Retry-After"))
                payload = await response.json(content_type=None)
            return envelope_type.model_validate(payload)
        except EmployeeApiError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error("Employee server %s %s failed: %s", method, url, e)
            raise UpstreamServerError() from e
