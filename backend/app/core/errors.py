"""Error taxonomy shared by the upstream client, the resolver and the HTTP layer."""

from __future__ import annotations

from fastapi import status


class EmployeeApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClientInputError(EmployeeApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class EmployeeNotFoundError(EmployeeApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class UpstreamRateLimitedError(EmployeeApiError):
    status_code = status.HTTP_429_TOO_MANY_REQUESTS

    def __init__(self, retry_after: str | None = None) -> None:
        super().__init__("Rate limit exceeded. Please try later.")
        self.retry_after = retry_after


class UpstreamClientError(EmployeeApiError):
    """Non-404 4xx from the employee server, passed through with its status."""

    def __init__(self, upstream_status: int) -> None:
        super().__init__(f"Upstream client error: {upstream_status}")
        self.status_code = upstream_status


class UpstreamServerError(EmployeeApiError):
    """5xx from the employee server or a transport fault; always surfaced as 502."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str = "Upstream server error") -> None:
        super().__init__(message)


class UpstreamRefusedError(EmployeeApiError):
    """The employee server answered a delete with ``false`` instead of failing."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, name: str) -> None:
        super().__init__(f"Upstream refused to delete employee: {name}")
        self.name = name
