"""Request/response schemas for user and auth endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.core.security import NAME_MAX_LEN, NAME_MIN_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN

# Registration accepts every role; updates only switch between user and admin.
RegisterRole = Literal["user", "mechanic", "admin"]
UpdateRole = Literal["user", "admin"]


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RegisterRequest(BaseModel):
    """New account. role defaults to 'user' when absent or empty."""

    name: str = Field(..., min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    role: RegisterRole | None = None

    @field_validator("role", mode="before")
    @classmethod
    def empty_role_is_default(cls, v: object) -> object:
        return _blank_to_none(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class UpdateUserRequest(BaseModel):
    """Partial update; omitted or empty fields are left unchanged."""

    name: str | None = Field(default=None, min_length=NAME_MIN_LEN, max_length=NAME_MAX_LEN)
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    role: UpdateRole | None = None

    @field_validator("name", "password", "role", mode="before")
    @classmethod
    def empty_is_unset(cls, v: object) -> object:
        return _blank_to_none(v)


class UserResponse(BaseModel):
    """User as returned by the API (no password digest)."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    role: str
    created_at: datetime


class LoginResponse(BaseModel):
    """Logged-in user plus the token; the token is also set as an HttpOnly cookie."""

    user: UserResponse
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class Principal(BaseModel):
    """Authenticated identity (id, name, role) resolved from the request token."""

    id: int
    name: str
    role: str


class MessageResponse(BaseModel):
    message: str
