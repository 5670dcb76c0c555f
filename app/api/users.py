"""User endpoints: registration, login/logout (cookie), and user CRUD."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import (
    CurrentPrincipal,
    get_app_settings,
    get_token_service,
    get_user_service,
    has_role,
    require_admin,
)
from app.core.config import Settings
from app.core.exceptions import ForbiddenError, InvalidCredentialsError, UserNotFoundError
from app.core.security import ROLE_ADMIN, TokenService
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    Principal,
    RegisterRequest,
    UpdateUserRequest,
    UserResponse,
)
from app.services.user_service import UserService

router = APIRouter()

UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def _set_auth_cookie(response: Response, settings: Settings, value: str, max_age: int) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=value,
        max_age=max_age,
        path="/",
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="none" if settings.COOKIE_SECURE else "lax",
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, users: UserServiceDep) -> UserResponse:
    """Create an account. 409 if the name is taken."""
    user = users.register(name=body.name, password=body.password, role=body.role)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    response: Response,
    users: UserServiceDep,
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> LoginResponse:
    """
    Authenticate with name and password.
    The token is set as an HttpOnly cookie and also returned for use as `Authorization: Bearer <token>`.
    """
    try:
        result = users.login(name=body.name, password=body.password)
    except UserNotFoundError as e:
        raise InvalidCredentialsError() from e

    _set_auth_cookie(response, settings, result.token, tokens.expiry_seconds)
    return LoginResponse(user=UserResponse.model_validate(result.user), access_token=result.token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    _set_auth_cookie(response, settings, "", max_age=0)
    return MessageResponse(message="logged out successfully")


@router.get("/me", response_model=UserResponse)
def get_me(principal: CurrentPrincipal, users: UserServiceDep) -> UserResponse:
    return UserResponse.model_validate(users.get_me(principal.id))


@router.get("", response_model=list[UserResponse])
def list_users(_principal: CurrentPrincipal, users: UserServiceDep) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in users.get_all()]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, _principal: CurrentPrincipal, users: UserServiceDep) -> UserResponse:
    return UserResponse.model_validate(users.get_by_id(user_id))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UpdateUserRequest,
    principal: CurrentPrincipal,
    users: UserServiceDep,
) -> UserResponse:
    """Users may update themselves; admins may update anyone. Only admins change roles."""
    is_admin = has_role(principal, ROLE_ADMIN)
    if principal.id != user_id and not is_admin:
        raise ForbiddenError()
    if body.role is not None and not is_admin:
        raise ForbiddenError("only admins can change roles")
    user = users.update(user_id, name=body.name, password=body.password, role=body.role)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user(
    user_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    users: UserServiceDep,
) -> Response:
    users.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
