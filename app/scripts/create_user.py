"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user NAME PASSWORD [role]
Example:
  python -m app.scripts.create_user admin your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import build_engine, build_session_factory
from app.core.exceptions import AircraftSystemError, UserExistsError
from app.core.logging import setup_logging
from app.core.security import (
    NAME_MAX_LEN,
    NAME_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    ROLES,
    TokenService,
)
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, session_factory=None) -> int:
    parser = argparse.ArgumentParser(description="Create an aircraft system user.")
    parser.add_argument("name", help=f"User name ({NAME_MIN_LEN}-{NAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    args = parser.parse_args(argv)

    name = args.name.strip()
    if not NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)
    if session_factory is None:
        session_factory = build_session_factory(build_engine(settings))
    if session_factory is None:
        print("DATABASE_URL is not set.", file=sys.stderr)
        return 1

    tokens = TokenService(secret=settings.SECRET.get_secret_value())
    db = session_factory()
    try:
        service = UserService(UserRepository(db), tokens, bcrypt_rounds=settings.BCRYPT_ROUNDS)
        user = service.register(name=name, password=args.password, role=args.role)
        print(f"Created user '{user.name}' with role '{user.role}' (id={user.id}).")
        return 0
    except UserExistsError:
        print(f"User '{name}' already exists.", file=sys.stderr)
        return 1
    except AircraftSystemError as e:
        logger.exception("create_user failed: %s", e.message)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
