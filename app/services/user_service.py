"""Identity service: registration, login, and user CRUD."""

import logging
from dataclasses import dataclass

from app.core.exceptions import (
    DuplicateRecordError,
    InvalidCredentialsError,
    UserExistsError,
    UserNotFoundError,
)
from app.core.security import (
    BCRYPT_ROUNDS,
    ROLE_USER,
    TokenService,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    token: str


class UserService:
    """Owns user records. Role strings are validated by the request schemas, not here."""

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        bcrypt_rounds: int = BCRYPT_ROUNDS,
    ) -> None:
        self.users = users
        self.tokens = tokens
        self.bcrypt_rounds = bcrypt_rounds

    def register(self, name: str, password: str, role: str | None = None) -> User:
        logger.info("UserService: register name=%s", name)
        if self.users.get_by_name(name) is not None:
            logger.warning("UserService: user already exists name=%s", name)
            raise UserExistsError()

        password_hash = hash_password(password, rounds=self.bcrypt_rounds)
        try:
            user = self.users.create(name=name, password_hash=password_hash, role=role or ROLE_USER)
        except DuplicateRecordError as e:
            raise UserExistsError() from e

        logger.info("UserService: register successful user_id=%s role=%s", user.id, user.role)
        return user

    def login(self, name: str, password: str) -> LoginResult:
        """
        Verify credentials and issue a token.

        Raises UserNotFoundError for an unknown name and InvalidCredentialsError for a
        wrong password; the HTTP layer reports both the same way.
        """
        logger.info("UserService: login name=%s", name)
        user = self.users.get_by_name(name)
        if user is None:
            logger.warning("UserService: login for unknown user name=%s", name)
            raise UserNotFoundError()
        if not verify_password(password, user.password_hash):
            logger.warning("UserService: invalid password user_id=%s", user.id)
            raise InvalidCredentialsError()

        token = self.tokens.issue(user_id=user.id, name=user.name, role=user.role)
        logger.info("UserService: login successful user_id=%s", user.id)
        return LoginResult(user=user, token=token)

    def get_by_id(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            logger.warning("UserService: user not found user_id=%s", user_id)
            raise UserNotFoundError()
        return user

    def get_me(self, principal_id: int) -> User:
        return self.get_by_id(principal_id)

    def get_all(self) -> list[User]:
        users = self.users.get_all()
        logger.info("UserService: get_all count=%s", len(users))
        return users

    def update(
        self,
        user_id: int,
        name: str | None = None,
        password: str | None = None,
        role: str | None = None,
    ) -> User:
        """Apply only the supplied fields; the password is re-hashed only when a new one is given."""
        logger.info("UserService: update user_id=%s", user_id)
        user = self.get_by_id(user_id)

        if name and name != user.name:
            if self.users.get_by_name(name) is not None:
                logger.warning("UserService: name already taken name=%s", name)
                raise UserExistsError()
            user.name = name
        if role:
            user.role = role
        if password:
            user.password_hash = hash_password(password, rounds=self.bcrypt_rounds)

        try:
            user = self.users.update(user)
        except DuplicateRecordError as e:
            raise UserExistsError() from e

        logger.info("UserService: update successful user_id=%s", user_id)
        return user

    def delete(self, user_id: int) -> None:
        logger.info("UserService: delete user_id=%s", user_id)
        user = self.get_by_id(user_id)
        self.users.delete(user)
        logger.info("UserService: delete successful user_id=%s", user_id)
