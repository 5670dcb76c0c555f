"""Error body shared by every non-2xx response."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(description="Machine-readable error code, e.g. not_found")
    detail: str = Field(description="Human-readable message")
