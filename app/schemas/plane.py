"""Request/response schemas for planes and their parts."""

from datetime import datetime

from pydantic import BaseModel, Field


class CreatePlaneRequest(BaseModel):
    tail_number: str = Field(..., min_length=2, max_length=50, description="Unique tail number")
    model: str = Field(..., min_length=2, max_length=100, description="Aircraft model")


class UpdatePlaneRequest(BaseModel):
    tail_number: str | None = Field(default=None, min_length=2, max_length=50)
    model: str | None = Field(default=None, min_length=2, max_length=100)


class PlaneResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    tail_number: str
    model: str
    created_at: datetime


class CreatePlanePartRequest(BaseModel):
    """New part on the plane in the URL path. usage_hours defaults to 0."""

    part_name: str = Field(..., min_length=2, max_length=255)
    serial_number: str = Field(..., min_length=2, max_length=100)
    category: str = Field(..., min_length=2, max_length=150)
    usage_hours: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Hours already logged"
    )
    usage_limit_hours: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Certified limit in hours"
    )


class UpdatePlanePartRequest(BaseModel):
    """Partial update. Usage hours are changed only through the usage endpoint."""

    part_name: str | None = Field(default=None, min_length=2, max_length=255)
    serial_number: str | None = Field(default=None, min_length=2, max_length=100)
    category: str | None = Field(default=None, min_length=2, max_length=150)
    usage_limit_hours: float | None = Field(default=None, gt=0, allow_inf_nan=False)


class UpdatePartUsageRequest(BaseModel):
    usage_hours: float = Field(
        ..., ge=0, allow_inf_nan=False, description="New cumulative usage hours"
    )


class PlanePartResponse(BaseModel):
    """Part with its derived usage percentage."""

    model_config = {"from_attributes": True}

    id: int
    plane_id: int
    part_name: str
    serial_number: str
    category: str
    usage_hours: float
    usage_limit_hours: float
    usage_percent: float
    installed_at: datetime


class PlaneWithPartsResponse(BaseModel):
    plane: PlaneResponse
    parts: list[PlanePartResponse]
