"""Shared builders for tests: SQLite-backed session factory, settings, and seed helpers."""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.models import Base

TEST_SECRET = "test-secret-key"


def make_session_factory() -> sessionmaker[Session]:
    """In-memory SQLite shared across threads (TestClient runs sync routes in a threadpool)."""
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def make_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "SECRET": TEST_SECRET,
        "BCRYPT_ROUNDS": 4,
        "COOKIE_SECURE": False,
        "DATABASE_URL": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
