"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    Principal,
    RegisterRequest,
    UpdateUserRequest,
    UserResponse,
)
from app.schemas.errors import ErrorResponse
from app.schemas.health import HealthResponse
from app.schemas.plane import (
    CreatePlanePartRequest,
    CreatePlaneRequest,
    PlanePartResponse,
    PlaneResponse,
    PlaneWithPartsResponse,
    UpdatePartUsageRequest,
    UpdatePlanePartRequest,
    UpdatePlaneRequest,
)

__all__ = [
    "CreatePlanePartRequest",
    "CreatePlaneRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PlanePartResponse",
    "PlaneResponse",
    "PlaneWithPartsResponse",
    "Principal",
    "RegisterRequest",
    "UpdatePartUsageRequest",
    "UpdatePlanePartRequest",
    "UpdatePlaneRequest",
    "UpdateUserRequest",
    "UserResponse",
]
