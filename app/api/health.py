"""Health check endpoint with optional database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.core.database import check_db_connected
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; answers even when no database is configured.
    """
    session_factory = request.app.state.session_factory
    if session_factory is None:
        db_status = "not_configured"
    else:
        db = session_factory()
        try:
            db_status = "connected" if check_db_connected(db) else "disconnected"
        finally:
            db.close()

    return HealthResponse(
        version=request.app.version, environment=settings.APP_ENV, database=db_status
    )
