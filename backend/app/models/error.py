"""Error body returned by every failing endpoint."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    message: str
    path: str
    timestamp: datetime
    code: int
