from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.exception_handlers import register_exception_handlers
from app.services.employee_client import EmployeeClient, create_session
from app.services.employee_resolver import EmployeeResolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    client = EmployeeClient(create_session(settings), settings.EMPLOYEE_SERVER_BASE_URL)
    application.state.employee_client = client
    application.state.employee_resolver = EmployeeResolver(client)
    logger.info("Employee server client ready (base_url=%s)", client.base_url)
    yield
    await client.close()
    logger.info("Employee server client closed")


app = FastAPI(
    title="Employee API",
    description="Employee façade over the mock employee server",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee API"}
