"""Request dependencies: service construction and the access gate (principal + role checks)."""

import logging
from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import get_db
from app.core.exceptions import ForbiddenError, UnauthenticatedError
from app.core.security import ROLE_ADMIN, TokenService
from app.repositories.plane_part_repository import PlanePartRepository
from app.repositories.plane_repository import PlaneRepository
from app.repositories.user_repository import UserRepository
from app.schemas.auth import Principal
from app.services.plane_part_service import PlanePartService
from app.services.plane_service import PlaneService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserService:
    return UserService(UserRepository(db), tokens, bcrypt_rounds=settings.BCRYPT_ROUNDS)


def get_plane_service(db: Annotated[Session, Depends(get_db)]) -> PlaneService:
    return PlaneService(PlaneRepository(db))


def get_plane_part_service(db: Annotated[Session, Depends(get_db)]) -> PlanePartService:
    return PlanePartService(PlaneRepository(db), PlanePartRepository(db))


def get_current_principal(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Principal:
    """
    Dependency: resolve the principal from the auth cookie, falling back to a Bearer header.
    Raises UnauthenticatedError (401) when no valid token is presented.
    """
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token and credentials is not None:
        token = credentials.credentials
    if not token:
        logger.warning("Auth: no token found path=%s", request.url.path)
        raise UnauthenticatedError()

    try:
        claims = tokens.decode(token)
    except UnauthenticatedError as e:
        logger.warning("Auth: token validation failed path=%s reason=%s", request.url.path, e.message)
        raise

    logger.debug("Auth: user authenticated user_id=%s role=%s", claims.user_id, claims.role)
    return Principal(id=claims.user_id, name=claims.name, role=claims.role)


def has_role(principal: Principal, required_role: str) -> bool:
    """Admin passes every role check."""
    return principal.role == required_role or principal.role == ROLE_ADMIN


def require_role(required_role: str) -> Callable[..., Principal]:
    """Dependency factory: require the given role (or admin). Raises ForbiddenError (403)."""

    def dependency(
        principal: Annotated[Principal, Depends(get_current_principal)],
    ) -> Principal:
        if not has_role(principal, required_role):
            logger.warning(
                "Role: insufficient permissions user_id=%s role=%s required_role=%s",
                principal.id,
                principal.role,
                required_role,
            )
            raise ForbiddenError()
        return principal

    return dependency


require_admin = require_role(ROLE_ADMIN)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
