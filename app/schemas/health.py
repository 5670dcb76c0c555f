"""Health check body."""

from typing import Literal

from pydantic import BaseModel, Field

DatabaseStatus = Literal["connected", "disconnected", "not_configured"]


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    version: str
    environment: str = Field(description="APP_ENV (dev or prod)")
    database: DatabaseStatus = Field(
        description="not_configured when DATABASE_URL is unset; otherwise the result of SELECT 1",
    )
