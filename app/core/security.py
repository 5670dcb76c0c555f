"""Password hashing and JWT issuance/verification for authentication."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.exceptions import InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Input bounds shared by request schemas and the bootstrap script.
NAME_MIN_LEN = 2
NAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128

# Roles accepted at registration; updates accept a narrower set (see schemas.user).
ROLE_USER = "user"
ROLE_MECHANIC = "mechanic"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_MECHANIC, ROLE_ADMIN)


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Decoded token payload."""

    user_id: int
    name: str
    role: str
    issued_at: datetime
    expires_at: datetime
    issuer: str
    subject: str


class TokenService:
    """Issues and validates HS256 session tokens carrying the user's id, name and role."""

    def __init__(
        self,
        secret: str,
        expiry_hours: int = 24,
        algorithm: str = "HS256",
        issuer: str = "aircraft-system",
    ) -> None:
        if not secret:
            raise ValueError("token secret must be non-empty")
        self._secret = secret
        self.expiry_hours = expiry_hours
        self.algorithm = algorithm
        self.issuer = issuer

    @property
    def expiry(self) -> timedelta:
        return timedelta(hours=self.expiry_hours)

    @property
    def expiry_seconds(self) -> int:
        return int(self.expiry.total_seconds())

    def issue(self, user_id: int, name: str, role: str, now: datetime | None = None) -> str:
        """Create a signed token for the user. `now` is injectable for tests."""
        now = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "user_id": user_id,
            "name": name,
            "role": role,
            "iat": now,
            "nbf": now,
            "exp": now + self.expiry,
            "iss": self.issuer,
            "sub": str(user_id),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenClaims:
        """
        Validate signature, expiry and issuer; return the claims.
        Raises TokenExpiredError or InvalidTokenError.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError() from e
        except jwt.PyJWTError as e:
            logger.debug("Token rejected: %s", e)
            raise InvalidTokenError() from e

        try:
            user_id = int(payload["user_id"])
            name = str(payload["name"])
            role = str(payload["role"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("invalid token payload") from e

        return TokenClaims(
            user_id=user_id,
            name=name,
            role=role,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            issuer=payload.get("iss", ""),
            subject=payload["sub"],
        )
