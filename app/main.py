"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session, sessionmaker

from app.api import router as api_router
from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory
from app.core.exceptions import AircraftSystemError
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.core.security import TokenService
from app.schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "internal server error"


def _validation_detail(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AircraftSystemError)
    async def handle_domain_error(request: Request, exc: AircraftSystemError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Request failed path=%s error=%s", request.url.path, exc.message)
        # Store failures carry SQL text and driver messages; those stay in the log.
        detail = INTERNAL_ERROR_DETAIL if exc.status_code == 500 else exc.message
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.code, detail=detail).model_dump(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="invalid_input", detail=_validation_detail(exc)).model_dump(),
        )


def create_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> FastAPI:
    """
    Build the application. Collaborators (settings, session factory, token service) are
    attached to app.state and resolved by request dependencies.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    if session_factory is None:
        session_factory = build_session_factory(build_engine(settings))
    if session_factory is None:
        logger.warning("DATABASE_URL is not set; store-backed routes will answer 503")

    app = FastAPI(
        title="Aircraft System API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.token_service = TokenService(
        secret=settings.SECRET.get_secret_value(),
        expiry_hours=settings.TOKEN_EXP,
        algorithm=settings.JWT_ALGORITHM,
        issuer=settings.JWT_ISSUER,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/ping")
    def ping() -> dict[str, str]:
        """Discovery payload; no auth, no database."""
        return {
            "message": "Aircraft API is running...",
            "version": app.version,
            "description": "Tracks aircraft, their installed parts, and part usage against maintenance limits.",
        }

    logger.info("Application configured env=%s prefix=%s", settings.APP_ENV, settings.API_PREFIX)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=get_settings().PORT)
