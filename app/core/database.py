"""PostgreSQL connection and session management."""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.core.exceptions import StoreUnavailableError


def build_engine(settings: Settings) -> Engine | None:
    """Create the engine for DATABASE_URL, or None when no database is configured."""
    if settings.DATABASE_URL is None:
        return None
    return create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        echo=settings.DEBUG,
        # Server-side timeout so a stalled statement fails fast instead of blocking the worker.
        connect_args={"options": f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"},
    )


def build_session_factory(engine: Engine | None) -> sessionmaker[Session] | None:
    if engine is None:
        return None
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app's factory and closes it when done."""
    session_factory = request.app.state.session_factory
    if session_factory is None:
        raise StoreUnavailableError()
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
