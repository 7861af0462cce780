from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from app.core.dependencies import get_employee_client, get_employee_resolver
from app.main import app
from app.services.employee_client import EmployeeClient
from app.services.employee_resolver import EmployeeResolver


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mock_employee_client():
    client = MagicMock(spec=EmployeeClient)
    client.list_all = AsyncMock(return_value=[])
    client.get_by_id = AsyncMock(return_value=None)
    client.create = AsyncMock()
    client.delete_by_name = AsyncMock(return_value=True)
    client.check_connection = AsyncMock(return_value=True)
    return client


@pytest.fixture
def resolver(mock_employee_client):
    return EmployeeResolver(mock_employee_client)


@pytest.fixture
def client(mock_employee_client, resolver):
    app.dependency_overrides[get_employee_client] = lambda: mock_employee_client
    app.dependency_overrides[get_employee_resolver] = lambda: resolver
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
